# -*- coding: utf-8 -*-

"""
Functors as plain Python values, i.e. type classes in dictionary-passing style.

Python has no higher-kinded types, so we cannot write ``Functor[Maybe]``
for the type constructor ``Maybe``. Instead, a functor is a record with one
field :code:`fmap`, generic over five type parameters:

* a phantom ``Tag`` telling apart the instances for different shapes,
* the element types ``A`` and ``B``,
* the container types ``FA`` and ``FB``, e.g. ``Maybe[A]`` and ``Maybe[B]``.

Callers pick the instance for a given shape by calling the appropriate
constructor in :mod:`funcat.instances`, then pass it around explicitly.

Summary
-------

.. autosummary::
    :nosignatures:
    :toctree:

    Functor
    Id
    Compose

.. admonition:: Functions

    .. autosummary::
        :nosignatures:
        :toctree:

        compose
        replace

Axioms
------

Functors preserve identity and composition.

>>> from funcat.utils import identity, after
>>> from funcat.instances import list_functor, maybe_functor
>>> F, xs = list_functor(), [1, 2, 3]
>>> f, g = (lambda x: x + 1), str
>>> assert F.fmap(identity)(xs) == xs
>>> assert F.fmap(after(g, f))(xs) == F.fmap(g)(F.fmap(f)(xs))

Functors compose, the composite maps over the nested shape.

>>> from funcat.data import Just
>>> G = compose(maybe_functor(), list_functor())
>>> G.fmap(after(g, f))(Just(xs))
Just(value=['2', '3', '4'])
>>> assert G == list_functor() >> maybe_functor() == maybe_functor() << F

Every functor comes with :func:`replace`.

>>> replace(F)(0, xs)
[0, 0, 0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from funcat.utils import (
    Composable,
    Phantom,
    assert_isinstance,
    constant,
    identity,
    unbiased,
)

Tag = TypeVar('Tag')
Outer = TypeVar('Outer')
Inner = TypeVar('Inner')
A = TypeVar('A')
B = TypeVar('B')
FA = TypeVar('FA')
FB = TypeVar('FB')
GFA = TypeVar('GFA')
GFB = TypeVar('GFB')


class Id(Phantom):
    """ The tag of the identity functor. """


class Compose(Phantom, Generic[Outer, Inner]):
    """ The tag of the composite of an ``Outer`` and an ``Inner`` functor. """


@dataclass(frozen=True)
class Functor(Composable, Generic[Tag, A, B, FA, FB]):
    """
    A functor is a function :code:`fmap` from functions to functions.

    Parameters:
        fmap : Takes ``f`` from ``A`` to ``B`` to a function from ``FA`` to
            ``FB``, i.e. maps ``f`` over the elements of the container.

    .. admonition:: Summary

        .. autosummary::

            id
            then
            replace

    Note
    ----
    Calling a functor on a function is the same as calling :code:`fmap`.

    >>> from funcat.instances import maybe_functor
    >>> from funcat.data import Just, Nothing
    >>> F = maybe_functor()
    >>> assert F(lambda x: x * 2)(Just(2)) == Just(4)
    >>> assert F.fmap(lambda x: x * 2)(Nothing()) == Nothing()

    Important
    ---------
    We cannot check equality of functions, so two functors are equal only if
    they have the same :code:`fmap` or they are composites of equal functors.
    """
    fmap: Callable[[Callable[[A], B]], Callable[[FA], FB]]

    def __call__(self, f: Callable[[A], B]) -> Callable[[FA], FB]:
        return self.fmap(f)

    @classmethod
    def id(cls) -> Functor[Id, A, B, A, B]:
        """
        The identity functor, with containers of ``A`` simply ``A``.

        Example
        -------
        >>> assert Functor.id().fmap(len)("Alice") == 5
        """
        return cls(identity)

    @unbiased
    def then(self, other: Functor[Outer, GFA, GFB, FA, FB]
             ) -> Functor[Compose[Outer, Tag], A, B, FA, FB]:
        """
        The composite functor with ``self`` inside and ``other`` outside,
        called with :code:`>>` and :code:`<<`.

        Parameters:
            other : The outer functor.
        """
        return compose(other, self)

    def replace(self, x: B, container: FA) -> FB:
        """
        Replace every element of a container with ``x``, see :func:`replace`.

        Parameters:
            x : The value to put in the element slots.
            container : The container.
        """
        return replace(self)(x, container)


@dataclass(frozen=True)
class Composite(Generic[A, B, FA, FB]):
    """
    The :code:`fmap` of a composite functor, i.e. ``outer.fmap`` after
    ``inner.fmap``.

    Parameters:
        outer : The outer functor.
        inner : The inner functor.
    """
    outer: Functor
    inner: Functor

    def __call__(self, f: Callable[[A], B]) -> Callable[[FA], FB]:
        return self.outer.fmap(self.inner.fmap(f))


def compose(
        outer: Functor[Outer, GFA, GFB, FA, FB],
        inner: Functor[Inner, A, B, GFA, GFB]
        ) -> Functor[Compose[Outer, Inner], A, B, FA, FB]:
    """
    The composite of two functors, mapping over an ``outer`` container of
    ``inner`` containers.

    Parameters:
        outer : The outer functor, with elements the containers of ``inner``.
        inner : The inner functor.

    Example
    -------
    >>> from funcat.instances import maybe_functor, list_functor
    >>> from funcat.data import Just, Nothing
    >>> F = compose(maybe_functor(), list_functor())
    >>> F.fmap(lambda x: x + 1)(Just([1, 2, 3]))
    Just(value=[2, 3, 4])
    >>> F.fmap(lambda x: x + 1)(Nothing())
    Nothing()
    """
    assert_isinstance(outer, Functor)
    assert_isinstance(inner, Functor)
    return Functor(Composite(outer, inner))


def replace(functor: Functor[Tag, A, B, FA, FB]
            ) -> Callable[[B, FA], FB]:
    """
    Replace every element of a container with some constant value.

    Parameters:
        functor : The functor for the shape of the container.

    Example
    -------
    >>> from funcat.instances import pair_functor
    >>> from funcat.data import Pair
    >>> replace(pair_functor())(True, Pair(9, False))
    Pair(first=9, second=True)
    """
    assert_isinstance(functor, Functor)
    return lambda x, container: functor.fmap(constant(x))(container)
