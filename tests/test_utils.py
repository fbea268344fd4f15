from types import SimpleNamespace

import pytest

from jungle_gun.utils import clamp, overlaps


def box(x, y, w, h):
    return SimpleNamespace(x=x, y=y, w=w, h=h)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (box(0, 0, 10, 10), box(5, 5, 10, 10), True),
        (box(0, 0, 10, 10), box(2, 2, 3, 3), True),      # contained
        (box(0, 0, 10, 10), box(10, 0, 10, 10), False),  # touching edges
        (box(0, 0, 10, 10), box(0, 10, 10, 10), False),
        (box(0, 0, 10, 10), box(20, 20, 5, 5), False),
        (box(0, 0, 0, 0), box(0, 0, 10, 10), False),     # zero size on a corner
        (box(10, 5, 0, 0), box(0, 0, 10, 10), False),    # zero size on an edge
        (box(5, 5, 0, 0), box(0, 0, 10, 10), True),      # zero size strictly inside
    ],
)
def test_overlaps(a, b, expected):
    assert overlaps(a, b) is expected
    assert overlaps(b, a) is expected


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(4.5, 0, 10) == 4.5
