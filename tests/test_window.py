import pytest

pytest.importorskip("arcade")

from game.hop.particles import ACCENT_COLOR, WARNING_COLOR
from game.hop.window import hex_to_rgba


def test_burst_colours():
    assert hex_to_rgba(ACCENT_COLOR) == (255, 165, 0, 255)
    assert hex_to_rgba(WARNING_COLOR) == (255, 0, 0, 255)


def test_hash_is_optional():
    assert hex_to_rgba("1e90ff") == (30, 144, 255, 255)


@pytest.mark.parametrize("alpha, expected", [
    (0.5, 128),
    (0.05, 13),
    (0.0, 0),
    (1.0, 255),
])
def test_alpha_is_scaled_and_rounded(alpha, expected):
    assert hex_to_rgba("#ffffff", alpha)[3] == expected


@pytest.mark.parametrize("alpha, expected", [(1.5, 255), (-0.2, 0)])
def test_alpha_is_clamped(alpha, expected):
    assert hex_to_rgba("#ffffff", alpha)[3] == expected
