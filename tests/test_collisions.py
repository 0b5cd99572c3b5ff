from game.hop.collisions import CARROT_POINTS, resolve_items
from game.hop.entities import GameState, Item, ItemKind
from game.hop.particles import ACCENT_COLOR, WARNING_COLOR

from conftest import item_on


def test_carrot_scores_and_disappears(state, make_rng):
    carrot = item_on(state.player, ItemKind.CARROT)
    bystander = Item(x=400, y=0, kind=ItemKind.CARROT, speed=3)
    state.items[:] = [bystander, carrot]

    report = resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert state.score == CARROT_POINTS == 10
    assert report.collected == [carrot]
    assert state.items == [bystander]
    assert not report.hazard_hit


def test_carrot_burst_at_item_centre(state, make_rng):
    carrot = item_on(state.player, ItemKind.CARROT)
    state.items.append(carrot)

    resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert len(state.particles) == 8
    assert all(p.color == ACCENT_COLOR for p in state.particles)
    assert (state.particles[0].x, state.particles[0].y) == (carrot.x + 16, carrot.y + 16)


def test_rock_stops_the_pass(state, make_rng):
    old_carrot = item_on(state.player, ItemKind.CARROT)
    rock = item_on(state.player, ItemKind.ROCK)
    state.items[:] = [old_carrot, rock]

    report = resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert report.hazard is rock
    assert state.score == 0
    assert report.collected == []
    # the older carrot was never reached: not scored, not moved
    assert state.items == [old_carrot, rock]
    assert old_carrot.y == state.player.y - 3
    assert len(state.particles) == 8
    assert all(p.color == WARNING_COLOR for p in state.particles)
    assert (state.particles[0].x, state.particles[0].y) == (116.0, 616.0)


def test_items_fall_by_their_own_speed(state, make_rng):
    slow = Item(x=0, y=0, kind=ItemKind.ROCK, speed=3)
    fast = Item(x=0, y=0, kind=ItemKind.ROCK, speed=4.5)
    state.items[:] = [slow, fast]

    resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert (slow.y, fast.y) == (3, 4.5)
    assert (slow.x, fast.x) == (0, 0)


def test_off_screen_items_are_culled(state, make_rng):
    gone = Item(x=400, y=638, kind=ItemKind.ROCK, speed=3)
    edge = Item(x=400, y=637, kind=ItemKind.ROCK, speed=3)
    state.items[:] = [gone, edge]

    report = resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert report.culled == 1
    assert state.items == [edge]
    assert not report.hazard_hit


def test_collision_wins_over_culling(state, make_rng):
    # lands at y=601: below a 600px floor but still touching the bunny
    carrot = Item(x=state.player.x, y=598, kind=ItemKind.CARROT, speed=3)
    state.items.append(carrot)

    report = resolve_items(state, hop=0.0, height=600, rng=make_rng())

    assert report.collected == [carrot]
    assert report.culled == 0
    assert state.score == 10


def test_touching_edges_do_not_collide(state, make_rng):
    # bottom edge ends exactly at the bunny's top
    rock = Item(x=state.player.x, y=565, kind=ItemKind.ROCK, speed=3)
    state.items.append(rock)

    report = resolve_items(state, hop=0.0, height=640, rng=make_rng())

    assert rock.y + rock.height == state.player.y
    assert not report.hazard_hit


def test_hop_offset_moves_the_hitbox(state, make_rng):
    def rock():
        return Item(x=state.player.x, y=563, kind=ItemKind.ROCK, speed=3)

    grounded = GameState(player=state.player, items=[rock()])
    assert not resolve_items(grounded, hop=0.0, height=640, rng=make_rng()).hazard_hit

    hopping = GameState(player=state.player, items=[rock()])
    assert resolve_items(hopping, hop=-3.0, height=640, rng=make_rng()).hazard_hit
