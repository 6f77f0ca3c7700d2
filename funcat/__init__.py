# -*- coding: utf-8 -*-

""" funcat: functors and the writer monad as plain Python values. """

from funcat import (
    data,
    writer,
    functor,
    instances,
    laws,
    utils,
    config,
    messages,
)

from funcat.functor import Functor, compose, replace

__version__ = '0.1.0'
