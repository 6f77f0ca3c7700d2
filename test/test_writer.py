# -*- coding: utf-8 -*-

from pytest import raises

from funcat import config
from funcat.writer import *


def is_even(x: int) -> Writer[bool, str]:
    return Writer(x % 2 == 0, "is_even ")


def negate(x: bool) -> Writer[bool, str]:
    return Writer(not x, "negate ")


def test_Writer():
    writer = Writer(42, "answer")
    assert (writer.value, writer.log) == (42, "answer")
    with raises(AttributeError):
        writer.value = 43


def test_unit():
    assert unit(42) == Writer(42, config.EMPTY_LOG)
    assert unit(42, empty=[]) == Writer(42, [])


def test_fish():
    assert fish(is_even, negate)(4) == Writer(False, "is_even negate ")


def test_fish_unit():
    assert fish(unit, is_even)(3) == is_even(3) == fish(is_even, unit)(3)


def test_fish_associative():
    left = fish(fish(is_even, negate), negate)
    right = fish(is_even, fish(negate, negate))
    assert left(3) == right(3) == Writer(False, "is_even negate negate ")


def test_fish_calls_each_arrow_once():
    calls = []

    def logged(x):
        calls.append(x)
        return Writer(x + 1, (x, ))
    assert fish(logged, logged)(0) == Writer(2, (0, 1))
    assert calls == [0, 1]


def test_bind():
    assert unit(4).bind(is_even).bind(negate)\
        == Writer(False, "is_even negate ")
    assert Writer(1, "one ").bind(is_even) == Writer(False, "one is_even ")


def test_tell():
    assert tell("hello") == Writer(None, "hello")
    assert unit(1).bind(lambda x: tell(f"{x}")) == Writer(None, "1")
