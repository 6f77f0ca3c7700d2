# -*- coding: utf-8 -*-

""" funcat utility functions. """

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import wraps
from typing import Callable, Generic, TypeVar

from funcat import messages

T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def factory_name(cls: type) -> str:
    """
    Returns a string describing a funcat class.

    Example
    -------
    >>> from funcat.data import Just
    >>> assert factory_name(Just) == "data.Just"
    >>> assert factory_name(int) == "int"
    """
    module = cls.__module__.removeprefix('funcat.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


def identity(x: A) -> A:
    """
    The identity function.

    Example
    -------
    >>> assert identity(42) == 42
    """
    return x


def constant(x: A) -> Callable[[object], A]:
    """
    The function that ignores its argument and always returns ``x``.

    Parameters:
        x : The value to return.

    Example
    -------
    >>> assert constant(42)("Alice") == constant(42)(None) == 42
    """
    return lambda _: x


def after(g: Callable[[B], C], h: Callable[[A], B]) -> Callable[[A], C]:
    """
    The composition of plain functions, read ``g`` after ``h``.

    Parameters:
        g : The function applied second.
        h : The function applied first.

    Example
    -------
    >>> assert after(str, len)([1, 2, 3]) == "3"
    """
    return lambda x: g(h(x))


def unbiased(binary_method):
    """
    Turn a biased method with signature (self, other) to an unbiased one, i.e.
    with signature (self, *others), see the `nLab`_.

    .. _nLab: https://ncatlab.org/nlab/show/biased+definition
    """
    @wraps(binary_method)
    def method(self, *others):
        result = self
        for other in others:
            result = binary_method(result, other)
        return result
    return method


class Phantom:
    """
    A phantom type, i.e. a class with no instances.

    Subclasses of :class:`Phantom` are only ever used as type parameters, in
    order for the type checker to tell apart otherwise identical values.

    Example
    -------
    >>> class Tag(Phantom):
    ...     pass
    >>> Tag()
    Traceback (most recent call last):
    ...
    TypeError: Tag is a phantom type, it has no instances.
    """
    def __new__(cls, *args, **kwargs):
        raise TypeError(messages.UNINHABITED.format(cls.__name__))


class Composable(ABC, Generic[T]):
    """
    Abstract class implementing the syntactic sugar :code:`>>` and :code:`<<`
    for forward and backward composition with some method :code:`then`.

    Example
    -------
    >>> class List(list, Composable):
    ...     def then(self, other):
    ...         return self + other
    >>> assert List([1, 2]) >> List([3]) == List([1, 2, 3])
    >>> assert List([3]) << List([1, 2]) == List([1, 2, 3])
    """
    @abstractmethod
    def then(self, other: Composable[T], *others: Composable[T]
             ) -> Composable[T]:
        """
        Sequential composition, to be instantiated.

        Parameters:
            other : The other composable object to compose sequentially.
        """

    __rshift__ = __llshift__ = lambda self, other: self.then(other)
    __lshift__ = __lrshift__ = lambda self, other: other.then(self)


class AxiomError(Exception):
    """ The gods of category theory are not happy. """
