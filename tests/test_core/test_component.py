import pytest
from pydantic import ValidationError

from item_forge.core.component import Component


class Point(Component):
    x: int = 0
    y: int = 0


def test_components_are_hashable_values():
    assert Point(x=1, y=2) == Point(x=1, y=2)
    assert {Point(x=1, y=2): "a"}[Point(x=1, y=2)] == "a"


def test_frozen():
    p = Point(x=1)
    with pytest.raises(ValidationError):
        p.x = 5


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        Point(x=1, z=3)


def test_evolve_validates():
    p = Point(x=1, y=2)
    assert p.evolve(y=7) == Point(x=1, y=7)
    assert p == Point(x=1, y=2)

    with pytest.raises(ValidationError):
        p.evolve(y="not a number")

