# -*- coding: utf-8 -*-

from .deferrable import Deferrable


def is_deferrable(value):
    """Check if an object can be used as a step of a pipeline.

    The combinators use this function to check the value returned by a
    continuation.

    Returns:
        boolean: True if the value implements the Deferrable interface.
            False if not.
    """
    return isinstance(value, Deferrable)
