# -*- coding: utf-8 -*-
"""Combinators to compose asynchronous operations represented by Deferrables.

    >>> from deferchain import const, chain
    >>> p = const(5) >> (lambda x: const(x * 2))
    >>> p.result()
    10
"""

from .__version__ import __version__  # noqa

from .combinators import bind, chain, transform, transform_error
from .errors import (DeferchainError, NonExceptionRejection,
                     NotDeferrableError, TimeoutError)
from .outcome import Outcome
from .promise import (Deferrable, Deferred, Promise, const, failure,
                      is_deferrable, wrap_deferrable)

__all__ = ['bind', 'chain', 'transform', 'transform_error', 'Deferrable',
           'Deferred', 'Promise', 'const', 'failure', 'is_deferrable',
           'wrap_deferrable', 'Outcome', 'DeferchainError',
           'NonExceptionRejection', 'NotDeferrableError', 'TimeoutError']
