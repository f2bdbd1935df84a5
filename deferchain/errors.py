# -*- coding: utf-8 -*-
"""Errors raised by the deferchain package.

Failures produced by user code (a failing source, a raising continuation, a
rejected inner result, a raising error-mapping function) are never wrapped:
they are delivered as-is on the failure channel of the compound result. The
classes below only cover the package's own error conditions.
"""


class DeferchainError(Exception):
    """Base class for all deferchain errors."""
    pass


class TimeoutError(DeferchainError):
    """A blocking read could not get a settled result in the time allowed."""
    pass


class NotDeferrableError(DeferchainError, TypeError):
    """A value expected to be a Deferrable is not one.

    Raised synchronously when a combinator receives a non-deferrable source,
    and used as the rejection reason of a compound result when a continuation
    returns a plain value.

    Attributes:
        value: the offending object.
    """

    def __init__(self, value, message=None):
        self.value = value
        message = message or 'Expected a Deferrable, got %s' % repr(value)
        DeferchainError.__init__(self, message)


class NonExceptionRejection(DeferchainError):
    """Raised by a blocking read on a Promise rejected with a non-exception.

    Failure handlers still receive the original value; this error is only a
    carrier, to be raised by ``Promise.result()``.

    Attributes:
        reason: the value the Promise has been rejected with.
    """

    def __init__(self, reason):
        self.reason = reason
        DeferchainError.__init__(self, 'Promise rejected with %r' % (reason,))
