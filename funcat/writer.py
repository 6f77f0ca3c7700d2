# -*- coding: utf-8 -*-

"""
The writer monad, i.e. values with an accumulated log.

Summary
-------

.. autosummary::
    :nosignatures:
    :toctree:

    Writer

.. admonition:: Functions

    .. autosummary::
        :nosignatures:
        :toctree:

        unit
        fish
        tell

Axioms
------

Kleisli arrows are functions returning a :class:`Writer`. They compose with
:func:`fish`, which concatenates logs in call order, and :func:`unit` is the
identity for this composition.

>>> def negate(x: bool) -> Writer[bool, str]:
...     return Writer(not x, "negate ")
>>> def to_string(x: bool) -> Writer[str, str]:
...     return Writer(str(x), "to_string ")
>>> fish(negate, to_string)(True)
Writer(value='False', log='negate to_string ')

>>> assert fish(unit, negate)(True) == negate(True) == fish(negate, unit)(True)
>>> assert fish(fish(negate, negate), to_string)(True)\\
...     == fish(negate, fish(negate, to_string))(True)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from funcat import config

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
W = TypeVar('W')


@dataclass(frozen=True)
class Writer(Generic[A, W]):
    """
    A value together with a log.

    Parameters:
        value : The value being computed.
        log : The log accumulated so far, e.g. a string or a tuple.

    Note
    ----
    Logs only need an associative ``+`` with :attr:`config.EMPTY_LOG` as unit,
    or whatever ``empty`` is passed to :func:`unit`.
    """
    value: A
    log: W

    def bind(self, k: Callable[[A], Writer[B, W]]) -> Writer[B, W]:
        """
        Feed the value into a Kleisli arrow, appending its log to ours.

        Parameters:
            k : The Kleisli arrow.

        Example
        -------
        >>> Writer(2, "two ").bind(lambda x: Writer(x * x, "square "))
        Writer(value=4, log='two square ')
        """
        return fish(lambda _: self, k)(None)


def unit(value: A, empty: W = config.EMPTY_LOG) -> Writer[A, W]:
    """
    The trivial writer with an empty log, i.e. the monad's ``return``.

    Parameters:
        value : The value to wrap.
        empty : The empty log, default is :attr:`config.EMPTY_LOG`.

    Example
    -------
    >>> unit(42)
    Writer(value=42, log='')
    >>> unit(42, empty=())
    Writer(value=42, log=())
    """
    return Writer(value, empty)


def fish(m1: Callable[[A], Writer[B, W]], m2: Callable[[B], Writer[C, W]]
         ) -> Callable[[A], Writer[C, W]]:
    """
    Kleisli composition of two functions returning writers.

    Parameters:
        m1 : The Kleisli arrow applied first.
        m2 : The Kleisli arrow applied second.

    Note
    ----
    Each arrow is called exactly once and the log of ``m1`` comes first.
    """
    def composite(x: A) -> Writer[C, W]:
        first = m1(x)
        second = m2(first.value)
        return Writer(second.value, first.log + second.log)
    return composite


def tell(message: W) -> Writer[None, W]:
    """
    The writer that only logs a ``message``.

    Parameters:
        message : The log entry.

    Example
    -------
    >>> unit(42).bind(lambda x: tell(f"got {x}"))
    Writer(value=None, log='got 42')
    """
    return Writer(None, message)
