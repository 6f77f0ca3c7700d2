# -*- coding: utf-8 -*-

from pytest import raises

from funcat.data import *
from funcat.functor import *
from funcat.instances import *
from funcat.utils import identity, after


def test_Functor_call():
    F = maybe_functor()
    assert F(lambda x: x * 2)(Just(2)) == F.fmap(lambda x: x * 2)(Just(2))


def test_Functor_eq():
    assert maybe_functor() == maybe_functor() != list_functor()
    assert writer_functor() == writer_functor() != writer_functor(empty=())
    assert Functor(lambda f: f) != Functor(lambda f: f)
    assert maybe_functor() != "maybe"


def test_Functor_hash():
    assert {maybe_functor(): 42}[maybe_functor()] == 42


def test_Functor_is_frozen():
    F = list_functor()
    with raises(AttributeError):
        F.fmap = identity


def test_Functor_id():
    assert Functor.id().fmap(len)("Alice") == 5
    assert Functor.id() == Functor.id()
    F = list_functor()
    assert (F >> Functor.id()).fmap(str)([1, 2]) == F.fmap(str)([1, 2])
    assert (Functor.id() >> F).fmap(str)([1, 2]) == F.fmap(str)([1, 2])


def test_compose():
    F = compose(maybe_functor(), list_functor())
    f = after(str, lambda x: x + 1)
    assert F.fmap(f)(Just([1, 2, 3])) == Just(["2", "3", "4"])
    assert F.fmap(f)(Nothing()) == Nothing()


def test_compose_is_nested_fmap():
    outer, inner = list_functor(), either_functor()
    container = [Left("error"), Right(1), Right(2)]
    assert compose(outer, inner).fmap(abs)(container)\
        == outer.fmap(inner.fmap(abs))(container)


def test_compose_type_error():
    with raises(TypeError) as err:
        compose(maybe_functor(), len)
    assert str(err.value)\
        == "Expected functor.Functor, got builtin_function_or_method instead."


def test_then():
    F, G = list_functor(), maybe_functor()
    assert F.then(G) == F >> G == G << F == compose(G, F)
    H = pair_functor()
    container = Pair("x", Just([1, 2]))
    assert F.then(G, H).fmap(str)(container) == Pair("x", Just(["1", "2"]))
    assert F >> G >> H == F.then(G, H)


def test_compose_associative():
    F, G, H = list_functor(), maybe_functor(), identity_functor()
    container = Identity(Just([1, 2, 3]))
    left, right = (F >> G) >> H, F >> (G >> H)
    assert left.fmap(str)(container) == right.fmap(str)(container)


def test_replace():
    assert replace(pair_functor())(True, Pair(9, False)) == Pair(9, True)
    assert pair_functor().replace(True, Pair(9, False)) == Pair(9, True)
    assert replace(list_functor())(0, [1, 2, 3]) == [0, 0, 0]
    assert replace(list_functor())(0, []) == []
    assert replace(maybe_functor())(0, Nothing()) == Nothing()
    assert replace(either_functor())(0, Left(1)) == Left(1)
    assert replace(const_functor())(0, Const(1)) == Const(1)


def test_replace_composite():
    F = compose(list_functor(), maybe_functor())
    assert F.replace("x", [Just(1), Nothing(), Just(3)])\
        == [Just("x"), Nothing(), Just("x")]


def test_replace_type_error():
    with raises(TypeError):
        replace(lambda f: f)


def test_phantom_tags():
    with raises(TypeError):
        Id()
    with raises(TypeError):
        Compose[MaybeF, ListF]()
