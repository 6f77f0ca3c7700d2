# -*- coding: utf-8 -*-

"""
funcat error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
UNINHABITED = "{} is a phantom type, it has no instances."
IDENTITY_LAW = "{} does not preserve identity on {}: got {} instead."
COMPOSITION_LAW = "{} does not preserve composition on {}: {} != {}."
