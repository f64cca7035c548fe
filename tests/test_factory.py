import pytest

from arcadecase.flappy.factory import Factory


class Thing:
    def __init__(self, x, y, *extra):
        self.x = x
        self.y = y
        self.extra = extra
        self.resets = 0

    def reset(self, x, y):
        self.x = x
        self.y = y
        self.resets += 1


def test_create_builds_new_object_with_floats():
    factory = Factory(Thing)
    thing = factory.create(3, 4, "a", "b")
    assert isinstance(thing.x, float)
    assert (thing.x, thing.y) == (3.0, 4.0)
    assert thing.extra == ("a", "b")
    assert thing.resets == 0


def test_removed_object_is_reused_and_reset():
    factory = Factory(Thing)
    first = factory.create(1, 2)
    factory.remove(first)
    again = factory.create(7, 8)
    assert again is first
    assert (again.x, again.y) == (7.0, 8.0)
    assert again.resets == 1


def test_pool_is_last_in_first_out():
    factory = Factory(Thing)
    a = factory.create(0, 0)
    b = factory.create(0, 0)
    factory.remove(a)
    factory.remove(b)
    assert factory.create(1, 1) is b
    assert factory.create(1, 1) is a
    fresh = factory.create(1, 1)
    assert fresh is not a and fresh is not b


def test_coordinates_must_be_numbers():
    with pytest.raises(ValueError):
        Factory(Thing).create("left", 0)