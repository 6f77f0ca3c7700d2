# -*- coding: utf-8 -*-

"""
Plain algebraic data types, i.e. the containers we map functions over.

Summary
-------

.. autosummary::
    :nosignatures:
    :toctree:

    Identity
    Const
    Pair
    Just
    Nothing
    Left
    Right
    Reader

Note
----
None of these classes know anything about functors: the instances are
defined separately in :mod:`funcat.instances`.

Example
-------
>>> assert Just(42) != Nothing() == Nothing()
>>> assert Left(42) != Right(42)
>>> assert Pair(1, 2) == Pair(1, 2) != (1, 2)
>>> assert Reader(len)("Alice") == 5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

A = TypeVar('A')
E = TypeVar('E')
L = TypeVar('L')
P = TypeVar('P')
X = TypeVar('X')


@dataclass(frozen=True)
class Identity(Generic[A]):
    """
    A box holding exactly one value.

    Parameters:
        value : The value inside the box.
    """
    value: A


@dataclass(frozen=True)
class Const(Generic[P, A]):
    """
    A box holding a ``value`` of type ``P``, with a phantom element type ``A``.

    Parameters:
        value : The payload, never touched by mapping.
    """
    value: P


@dataclass(frozen=True)
class Pair(Generic[X, A]):
    """
    A pair with explicit fields.

    Parameters:
        first : The fixed component.
        second : The element component.
    """
    first: X
    second: A


@dataclass(frozen=True)
class Just(Generic[A]):
    """
    The variant of an optional value where the value is present.

    Parameters:
        value : The value that is present.
    """
    value: A


@dataclass(frozen=True)
class Nothing:
    """ The variant of an optional value where the value is absent. """


Maybe = Union[Just[A], Nothing]


@dataclass(frozen=True)
class Left(Generic[L]):
    """
    The left variant of a sum of two types.

    Parameters:
        value : The left payload.
    """
    value: L


@dataclass(frozen=True)
class Right(Generic[A]):
    """
    The right variant of a sum of two types.

    Parameters:
        value : The right payload.
    """
    value: A


Either = Union[Left[L], Right[A]]


@dataclass(frozen=True)
class Reader(Generic[E, A]):
    """
    A value that depends on some environment of type ``E``.

    Parameters:
        run : The function from environment to value.

    Example
    -------
    >>> reader = Reader(lambda env: env["name"])
    >>> reader({"name": "Alice"})
    'Alice'
    """
    run: Callable[[E], A]

    def __call__(self, env: E) -> A:
        return self.run(env)
