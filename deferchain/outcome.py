# -*- coding: utf-8 -*-

from collections import namedtuple


class Outcome(namedtuple('Outcome', ['succeeded', 'payload'])):
    """Result of a call to user code: either a value, or the error raised.

    The combinators never call a continuation or a mapping function directly;
    they use ``Outcome.of()``, then route the outcome to the right side of a
    compound result. An exception raised by user code thus becomes a value,
    and can't escape into the producer's control flow.
    """

    __slots__ = ()

    @classmethod
    def of(cls, func, *args, **kwargs):
        """Call ``func`` and capture its return value or its exception.

        Args:
            func (callable): the function to call.
            *args: positional arguments passed to ``func``.
            **kwargs: keyword arguments passed to ``func``.
        Returns:
            Outcome: a success containing the returned value, or an error
                containing the exception raised.
        """
        try:
            return cls.success(func(*args, **kwargs))
        except Exception as error:
            return cls.error_of(error)

    @classmethod
    def success(cls, value):
        return cls(True, value)

    @classmethod
    def error_of(cls, error):
        return cls(False, error)

    @property
    def value(self):
        """Value of a success; None for an error."""
        return self.payload if self.succeeded else None

    @property
    def error(self):
        """Exception of an error; None for a success."""
        return None if self.succeeded else self.payload

    def settle(self, resolve, reject):
        """Call ``resolve`` with the value, or ``reject`` with the error."""
        if self.succeeded:
            resolve(self.payload)
        else:
            reject(self.payload)

    def __repr__(self):
        if self.succeeded:
            return 'Outcome.success(%r)' % (self.payload,)
        return 'Outcome.error_of(%r)' % (self.payload,)
