# -*- coding: utf-8 -*-

"""
Functor instances, one constructor for each shape of container.

Each constructor takes no argument and returns a fresh :class:`Functor`
tagged with the phantom type of its shape, e.g. :class:`MaybeF` for
optional values and :class:`ListF` for lists.

Summary
-------

.. autosummary::
    :nosignatures:
    :toctree:

    IdentityF
    MaybeF
    ListF
    ConstF
    TupleF
    PairF
    TripleF
    EitherF
    FunctionF
    ReaderF
    WriterF

.. admonition:: Functions

    .. autosummary::
        :nosignatures:
        :toctree:

        identity_functor
        maybe_functor
        list_functor
        const_functor
        tuple_functor
        pair_functor
        triple_functor
        either_functor
        function_functor
        reader_functor
        writer_functor

Example
-------
>>> from funcat.data import Just, Nothing, Left, Right
>>> maybe_functor().fmap(lambda x: x * 2)(Just(2))
Just(value=4)
>>> maybe_functor().fmap(lambda x: x * 2)(Nothing())
Nothing()
>>> list_functor().fmap(lambda x: x + 1)([1, 2, 3])
[2, 3, 4]
>>> either_functor().fmap(lambda x: not x)(Left(27))
Left(value=27)
>>> either_functor().fmap(lambda x: not x)(Right(False))
Right(value=True)

>>> from funcat.writer import Writer
>>> writer_functor().fmap(lambda x: x % 4 == 0)(Writer(16, "message"))
Writer(value=True, log='message')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from funcat import config
from funcat.data import (
    Const, Either, Identity, Just, Left, Maybe, Nothing, Pair, Reader, Right)
from funcat.functor import Functor
from funcat.utils import Phantom, after, assert_isinstance, identity
from funcat.writer import Writer, fish, unit

A = TypeVar('A')
B = TypeVar('B')
E = TypeVar('E')
L = TypeVar('L')
P = TypeVar('P')
R = TypeVar('R')
W = TypeVar('W')
X = TypeVar('X')
Y = TypeVar('Y')


class IdentityF(Phantom):
    """ The tag of :func:`identity_functor`. """


class MaybeF(Phantom):
    """ The tag of :func:`maybe_functor`. """


class ListF(Phantom):
    """ The tag of :func:`list_functor`. """


class ConstF(Phantom, Generic[P]):
    """ The tag of :func:`const_functor` with payloads of type ``P``. """


class TupleF(Phantom, Generic[X]):
    """ The tag of :func:`tuple_functor` with first components in ``X``. """


class PairF(Phantom, Generic[X]):
    """ The tag of :func:`pair_functor` with first fields in ``X``. """


class TripleF(Phantom, Generic[X, Y]):
    """ The tag of :func:`triple_functor`. """


class EitherF(Phantom, Generic[L]):
    """ The tag of :func:`either_functor` with left payloads in ``L``. """


class FunctionF(Phantom, Generic[R]):
    """ The tag of :func:`function_functor` with domain ``R``. """


class ReaderF(Phantom, Generic[E]):
    """ The tag of :func:`reader_functor` with environments in ``E``. """


class WriterF(Phantom, Generic[W]):
    """ The tag of :func:`writer_functor` with logs in ``W``. """


def _identity_fmap(f):
    return lambda box: Identity(f(box.value))


def _maybe_fmap(f):
    def inside(maybe):
        if isinstance(maybe, Nothing):
            return maybe
        assert_isinstance(maybe, Just)
        return Just(f(maybe.value))
    return inside


def _list_fmap(f):
    return lambda xs: [f(x) for x in xs]


def _const_fmap(_):
    return identity


def _tuple_fmap(f):
    def inside(pair):
        first, second = pair
        return first, f(second)
    return inside


def _pair_fmap(f):
    return lambda pair: Pair(pair.first, f(pair.second))


def _triple_fmap(f):
    def inside(triple):
        first, second, third = triple
        return first, second, f(third)
    return inside


def _either_fmap(f):
    def inside(either):
        if isinstance(either, Left):
            return either
        assert_isinstance(either, Right)
        return Right(f(either.value))
    return inside


def _function_fmap(f):
    return lambda g: after(f, g)


def _reader_fmap(f):
    return lambda reader: Reader(after(f, reader.run))


@dataclass(frozen=True)
class WriterFmap(Generic[A, B, W]):
    """
    The :code:`fmap` of :func:`writer_functor`, i.e. Kleisli composition of
    the identity with :func:`writer.unit` after ``f``.

    Parameters:
        empty : The empty log passed to :func:`writer.unit`.
    """
    empty: W = config.EMPTY_LOG

    def __call__(self, f: Callable[[A], B]
                 ) -> Callable[[Writer[A, W]], Writer[B, W]]:
        return fish(identity, lambda x: unit(f(x), self.empty))


def identity_functor() -> Functor[IdentityF, A, B, Identity[A], Identity[B]]:
    """
    The functor mapping over the value inside an :class:`Identity` box.

    Example
    -------
    >>> identity_functor().fmap(str)(Identity(42))
    Identity(value='42')
    """
    return Functor(_identity_fmap)


def maybe_functor() -> Functor[MaybeF, A, B, Maybe[A], Maybe[B]]:
    """
    The functor mapping over optional values, :class:`Nothing` is untouched.
    """
    return Functor(_maybe_fmap)


def list_functor() -> Functor[ListF, A, B, list[A], list[B]]:
    """
    The functor mapping over every element of a list, in order.

    Note
    ----
    The input list is never mutated, we always return a new list.
    """
    return Functor(_list_fmap)


def const_functor() -> Functor[ConstF[P], A, B, Const[P, A], Const[P, B]]:
    """
    The functor over constant boxes, mapping does nothing.

    Example
    -------
    >>> const_functor().fmap(lambda x: 1 / 0)(Const("Alice"))
    Const(value='Alice')
    """
    return Functor(_const_fmap)


def tuple_functor() -> Functor[TupleF[X], A, B, tuple[X, A], tuple[X, B]]:
    """
    The functor over pairs as Python tuples, mapping the second component.

    Example
    -------
    >>> tuple_functor().fmap(len)(("name", "Alice"))
    ('name', 5)
    """
    return Functor(_tuple_fmap)


def pair_functor() -> Functor[PairF[X], A, B, Pair[X, A], Pair[X, B]]:
    """
    The functor over :class:`Pair`, mapping the :code:`second` field.
    """
    return Functor(_pair_fmap)


def triple_functor(
        ) -> Functor[TripleF[X, Y], A, B, tuple[X, Y, A], tuple[X, Y, B]]:
    """
    The functor over triples as Python tuples, mapping the third component.

    Example
    -------
    >>> triple_functor().fmap(abs)((1, 2, -3))
    (1, 2, 3)
    """
    return Functor(_triple_fmap)


def either_functor() -> Functor[EitherF[L], A, B, Either[L, A], Either[L, B]]:
    """
    The functor over sums of two types, mapping only :class:`Right` values.
    """
    return Functor(_either_fmap)


def function_functor(
        ) -> Functor[FunctionF[R], A, B, Callable[[R], A], Callable[[R], B]]:
    """
    The functor over functions with a fixed domain, mapping is composition.

    Example
    -------
    >>> function_functor().fmap(str)(len)([1, 2, 3])
    '3'
    """
    return Functor(_function_fmap)


def reader_functor() -> Functor[ReaderF[E], A, B, Reader[E, A], Reader[E, B]]:
    """
    The functor over :class:`Reader` values, mapping is composition.

    Example
    -------
    >>> reader = reader_functor().fmap(str.upper)(Reader(lambda env: env[0]))
    >>> reader(["alice", "bob"])
    'ALICE'
    """
    return Functor(_reader_fmap)


def writer_functor(empty: W = config.EMPTY_LOG
                   ) -> Functor[WriterF[W], A, B, Writer[A, W], Writer[B, W]]:
    """
    The functor over :class:`Writer` values, mapping the value and keeping the
    log.

    Parameters:
        empty : The empty log, default is :attr:`config.EMPTY_LOG`.

    Note
    ----
    Mapping goes through the monad structure: we take the Kleisli composite
    of the identity with :func:`writer.unit` after ``f``. Because the log of
    :func:`writer.unit` is empty, the log of the input appears exactly once.

    >>> writer_functor(empty=()).fmap(len)(Writer("Alice", ("hello", )))
    Writer(value=5, log=('hello',))
    """
    return Functor(WriterFmap(empty))
