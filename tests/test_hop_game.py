import pytest

from game.hop.collaborators import JsonHighScoreStore, MemoryHighScoreStore
from game.hop.entities import ItemKind, Phase
from game.hop.hop_game import HopGame
from game.hop.render import Sprite

from conftest import item_on


def crash(game):
    """Drop a rock onto the bunny and tick once"""
    game.state.items.append(item_on(game.state.player, ItemKind.ROCK))
    return game.tick()


def test_starts_idle(make_game):
    game = make_game()
    assert game.phase is Phase.IDLE
    assert not game.running
    assert game.state.player.x == 224
    assert game.state.player.y == 600
    assert game.scoreboard.start_visible
    assert game.renderer.draw_calls == 1


def test_tick_does_nothing_until_started(make_game):
    game = make_game()
    report = game.tick()
    assert game.state.frame_count == 0
    assert report.collected == [] and not report.hazard_hit
    assert game.renderer.draw_calls == 1


def test_start(make_game):
    game = make_game()
    assert game.start()
    assert game.phase is Phase.RUNNING
    assert game.audio.played == ["jump"]
    assert (game.scoreboard.start_visible, game.scoreboard.game_over_visible) == (False, False)
    assert game.scoreboard.score_text == "Score: 0"


def test_start_is_ignored_while_running(make_game):
    game = make_game()
    game.start()
    game.run(10)
    game.state.score = 30
    assert not game.press("start")
    assert game.state.score == 30
    assert game.state.frame_count == 10


def test_player_stays_on_screen(make_game):
    game = make_game(spawn_interval=10_000)
    game.start()

    game.press("left")
    for _ in range(100):
        game.tick()
        assert 0 <= game.state.player.x <= 448
    assert game.state.player.x == 0

    game.release("left")
    game.press("right")
    for _ in range(200):
        game.tick()
        assert 0 <= game.state.player.x <= 448
    assert game.state.player.x == 448


def test_both_directions_cancel(make_game):
    game = make_game(spawn_interval=10_000)
    game.start()
    game.press("left")
    game.press("right")
    game.run(10)
    assert game.state.player.x == 224


def test_one_step_per_tick(make_game):
    game = make_game(spawn_interval=10_000)
    game.start()
    game.press("right")
    game.run(3)
    assert game.state.player.x == 239


def test_first_item_after_sixty_ticks(make_game):
    game = make_game(values=[0.9, 0.0])
    game.start()

    game.run(60)
    assert len(game.state.items) == 1
    item = game.state.items[0]
    assert item.kind is ItemKind.CARROT
    assert item.speed == 3.0
    assert 0 <= item.x < 448
    assert item.y == -29  # spawned at -32 and moved once on the same tick

    game.run(59)
    assert len(game.state.items) == 1
    assert item.y == -32 + 60 * 3 == 148
    assert game.running


def test_falling_rock_ends_the_run(make_game):
    # rock straight above the bunny, every later item is a carrot
    game = make_game(values=[0.1, 0.5])
    game.start()

    ticks = game.run(1000)

    assert ticks < 1000
    assert game.phase is Phase.GAME_OVER
    assert game.state.score == 0
    assert game.audio.played[-1] == "game_over"
    assert game.scoreboard.final_score_text == "Score: 0"
    assert (game.scoreboard.start_visible, game.scoreboard.game_over_visible) == (False, True)


def test_carrot_scores(make_game):
    game = make_game()
    game.start()
    game.state.items.append(item_on(game.state.player, ItemKind.CARROT))

    report = game.tick()

    assert len(report.collected) == 1
    assert game.state.score == 10
    assert game.state.items == []
    assert game.audio.played == ["jump", "collect"]
    assert game.scoreboard.score_text == "Score: 10"
    assert len(game.state.particles) == 8


def test_rock_leaves_score_unchanged(make_game):
    game = make_game()
    game.start()
    game.state.score = 40

    crash(game)

    assert game.phase is Phase.GAME_OVER
    assert game.state.score == 40


def test_terminal_frame_is_rendered_then_loop_stops(make_game):
    game = make_game()
    game.start()
    calls = game.renderer.draw_calls

    crash(game)
    assert game.renderer.draw_calls == calls + 1
    bunny = game.renderer.last[1]
    assert bunny == Sprite("bunny", 224, 600, 32, 32)  # no hop once the run is over

    frame = game.state.frame_count
    game.tick()
    assert game.state.frame_count == frame
    assert game.renderer.draw_calls == calls + 1
    assert not game.running


def test_restart_resets_the_run(make_game):
    game = make_game()
    game.start()
    game.press("left")
    game.run(5)
    game.state.score = 20
    crash(game)
    frame = game.state.frame_count
    assert game.state.particles and game.state.items

    assert game.press("start")

    assert game.phase is Phase.RUNNING
    assert game.state.score == 0
    assert game.state.items == []
    assert game.state.particles == []
    assert game.state.player.x == 224
    assert game.state.frame_count == frame  # spawn cadence carries over
    assert game.scoreboard.game_over_visible is False
    assert game.audio.played == ["jump", "game_over", "jump"]


@pytest.mark.parametrize("scores, expected", [
    ([30, 80, 10], [50, 80, 80]),
    ([0, 0], [50, 50]),
    ([60, 60], [60, 60]),
])
def test_high_score_only_goes_up(make_game, scores, expected):
    store = MemoryHighScoreStore(50)
    game = make_game(high_score_store=store)
    assert game.state.high_score == 50

    seen = []
    for score in scores:
        game.start()
        game.state.score = score
        crash(game)
        seen.append(game.state.high_score)

    assert seen == expected
    assert store.value == expected[-1]
    assert game.scoreboard.final_high_score_text == f"High Score: {expected[-1]}"


def test_high_score_loaded_from_store(make_game):
    game = make_game(high_score_store=MemoryHighScoreStore(120))
    assert game.scoreboard.high_score_text == "High Score: 120"


def test_unwritable_high_score_file_is_not_fatal(make_game, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = JsonHighScoreStore(str(blocker / "highscore.json"))

    game = make_game(high_score_store=store)
    game.start()
    game.state.score = 70
    crash(game)

    assert game.state.high_score == 70
    assert game.start()


def test_rejects_bad_playfield():
    with pytest.raises(ValueError):
        HopGame(width=0)
    with pytest.raises(ValueError):
        HopGame(width=20, player_size=32)
    with pytest.raises(ValueError):
        HopGame(spawn_interval=0)
