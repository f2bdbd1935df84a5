# -*- coding: utf-8 -*-

import abc


class Deferrable(abc.ABC):
    """Interface of an object holding the eventual result of an async task.

    A Deferrable is settled exactly once, either with a value (success) or
    with an exception (failure). Consumers subscribe handlers to one side or
    the other; a handler subscribed after the settlement is called
    immediately, in the subscribing call.

    Implementations only have to provide the two subscription methods. The
    combinator methods (``bind()``, ``>>``, ``transform()`` and
    ``transform_error()``) are inherited from this class, and all return a
    new Deferrable.
    """

    @abc.abstractmethod
    def subscribe_success(self, handler):
        """Register a handler called with the value, on success.

        Args:
            handler (callable): takes the success value as only argument.
        """

    @abc.abstractmethod
    def subscribe_failure(self, handler):
        """Register a handler called with the error, on failure.

        Args:
            handler (callable): takes the exception as only argument.
        """

    def bind(self, continuation, lift_plain=False):
        """Pass the result of this operation to a continuation.

        See ``deferchain.combinators.bind()``.

        Args:
            continuation (callable): called with the success value of self.
                Must return a Deferrable.
            lift_plain (boolean, optional): accept a plain value returned by
                the continuation as the result.
        Returns:
            Deferrable: status of the compound operation.
        """
        from ..combinators import bind
        return bind(self, continuation, lift_plain=lift_plain)

    def __rshift__(self, continuation):
        """``source >> continuation`` is ``source.bind(continuation)``."""
        return self.bind(continuation)

    def transform(self, map_fn):
        """Transform the success value of this operation with ``map_fn``."""
        from ..combinators import transform
        return transform(self, map_fn)

    def transform_error(self, map_fn):
        """Transform the failure reason of this operation with ``map_fn``."""
        from ..combinators import transform_error
        return transform_error(self, map_fn)
