# -*- coding: utf-8 -*-

from functools import wraps

from .promise import const, failure
from .util import is_deferrable


def wrap_deferrable(f):
    """Decorator who converts the result in a Deferrable object.

    If the function decorated returns a Deferrable, it's transmitted as is.
    Else, a new Promise is created with the returned value as result. If the
    function raises an exception, the Promise is rejected with it.

    It's a convenient way to use synchronous functions as actions of a
    ``chain()``.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            result = f(*args, **kwargs)
        except Exception as error:
            return failure(error)
        if is_deferrable(result):
            return result
        return const(result)

    return wrapper
