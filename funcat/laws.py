# -*- coding: utf-8 -*-

"""
Checking the functor laws on given containers.

Summary
-------

.. admonition:: Functions

    .. autosummary::
        :nosignatures:
        :toctree:

        assert_identity_law
        assert_composition_law
        check_laws

Example
-------
>>> from funcat.instances import maybe_functor, function_functor
>>> from funcat.data import Just, Nothing
>>> check_laws(maybe_functor(), str, abs, Just(-1), Nothing())

Functions are compared by their values on some ``probe``.

>>> check_laws(function_functor(), str, abs, len, probe=lambda g: g("Alice"))

We can catch instances that break the laws.

>>> from funcat.functor import Functor
>>> F = Functor(lambda f: lambda xs: [f(x) for x in xs[1:]])
>>> assert_identity_law(F, [1, 2, 3])  # doctest: +ELLIPSIS
Traceback (most recent call last):
...
funcat.utils.AxiomError: ... does not preserve identity on [1, 2, 3]: ...
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from funcat import messages
from funcat.functor import Functor
from funcat.utils import AxiomError, after, assert_isinstance, identity

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
FA = TypeVar('FA')


def assert_identity_law(
        functor: Functor, container: FA,
        probe: Optional[Callable[[FA], object]] = None) -> None:
    """
    Raise :class:`AxiomError` if mapping the identity changes ``container``.

    Parameters:
        functor : The functor to check.
        container : Some container of the functor's shape.
        probe : Applied to both sides before comparing, e.g. to evaluate
            function-valued containers.
    """
    assert_isinstance(functor, Functor)
    probe = probe or identity
    logger.debug("Checking identity law of %r on %r.", functor, container)
    result = functor.fmap(identity)(container)
    if probe(result) != probe(container):
        raise AxiomError(messages.IDENTITY_LAW.format(
            functor, container, result))


def assert_composition_law(
        functor: Functor, g: Callable[[B], C], h: Callable[[A], B],
        container: FA, probe: Optional[Callable[[FA], object]] = None
        ) -> None:
    """
    Raise :class:`AxiomError` if mapping ``g`` after ``h`` is not the same as
    mapping ``h`` and then mapping ``g``.

    Parameters:
        functor : The functor to check.
        g : The function applied second.
        h : The function applied first.
        container : Some container of the functor's shape.
        probe : Applied to both sides before comparing.
    """
    assert_isinstance(functor, Functor)
    probe = probe or identity
    logger.debug("Checking composition law of %r on %r.", functor, container)
    once = functor.fmap(after(g, h))(container)
    twice = functor.fmap(g)(functor.fmap(h)(container))
    if probe(once) != probe(twice):
        raise AxiomError(messages.COMPOSITION_LAW.format(
            functor, container, once, twice))


def check_laws(
        functor: Functor, g: Callable[[B], C], h: Callable[[A], B],
        *containers: FA, probe: Optional[Callable[[FA], object]] = None
        ) -> None:
    """
    Check both functor laws on each of the ``containers``.

    Parameters:
        functor : The functor to check.
        g : The function applied second.
        h : The function applied first.
        containers : The containers to check the laws on.
        probe : Applied to both sides before comparing.
    """
    for container in containers:
        assert_identity_law(functor, container, probe)
        assert_composition_law(functor, g, h, container, probe)
