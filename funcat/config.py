# -*- coding: utf-8 -*-

""" funcat configuration. """

# The log of a trivial writer, i.e. the unit of log concatenation.
EMPTY_LOG = ""

# Number of examples drawn by the property-based law tests.
LAW_SAMPLES = 100
