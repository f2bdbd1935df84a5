# -*- coding: utf-8 -*-

import logging
from threading import Condition

from ..errors import NonExceptionRejection, TimeoutError
from .deferrable import Deferrable

_logger = logging.getLogger(__name__)


class Promise(Deferrable):
    """It represents an operation expected to be completed in the future.

    A Promise is the consumer side of an asynchronous computation. It contains
    a value not yet known when the Promise is created, and allows to subscribe
    handlers who will be called as soon as the result is known.

    A Promise is settled only once. Later attempts to fulfill or reject it are
    ignored (and logged).

    All calls to the methods are thread-safe. Handlers are executed in the
    thread settling the Promise, or directly in the subscribing call if the
    Promise is already settled.
    """

    PENDING = 'pending'
    FULFILLED = 'fulfilled'
    REJECTED = 'rejected'

    def __init__(self, executor, _name=None, _previous=None):
        """Constructor of the Promise.

        Generate the two settlement callbacks, then call the `executor`.
        It means the executor will be fully executed before the constructor
        returns.
        If the executor raises an exception, it's caught and the Promise is
        rejected with this exception.

        Args:
            executor (callable): Takes 2 callable arguments:
                The first one, `on_fulfilled()` should be called when the
                Promise is fulfilled (ie the task is done) and must accept the
                result's value as its only argument.
                The second, `on_rejected()`, should be called when an error
                occurs. Its argument must be an instance of `Exception`.
            _name (str): if set, name used when converted to text.
            _previous (Promise): if set, Promise this one depends on. Only
                used when converted to text.
        """

        self._state = self.PENDING
        self._result = None
        self._error = None
        self._condition = Condition()
        self._name = _name or getattr(executor, '__name__', '???')
        self._previous = _previous

        self._callbacks = []
        self._errbacks = []

        def on_fulfilled(result):
            with self._condition:
                if self._state != self.PENDING:
                    _logger.warning('Try to fulfill Promise %r already '
                                    'settled. New result will be ignored: %r',
                                    self, result)
                    return
                self._result = result
                self._state = self.FULFILLED
                callbacks = self._callbacks

                # Free the references
                self._callbacks = None
                self._errbacks = None

                self._condition.notify_all()

            for callback in callbacks:
                self._exec_callback(callback, result)

        def on_rejected(error):
            with self._condition:
                if self._state != self.PENDING:
                    _logger.warning('Try to reject Promise %r already '
                                    'settled. New error will be ignored: %r',
                                    self, error)
                    return
                if not isinstance(error, BaseException):
                    # The non-exception value is propagated like any error.
                    _logger.warning('Promise %r rejected with non-exception '
                                    'value: %r', self, error)
                self._error = error
                self._state = self.REJECTED
                errbacks = self._errbacks

                self._callbacks = None
                self._errbacks = None

                self._condition.notify_all()

            for errback in errbacks:
                self._exec_callback(errback, error, is_errback=True)

        try:
            executor(on_fulfilled, on_rejected)
        except Exception as error:
            on_rejected(error)

    @property
    def state(self):
        """One of PENDING, FULFILLED or REJECTED."""
        with self._condition:
            return self._state

    def result(self, timeout=None):
        """Wait for the result and returns it as soon as it's available.

        This is a blocking call, intended for tests and scripts. Code running
        in the reactor should subscribe handlers instead.

        Args:
            timeout (float, optional): if set, maximum time to wait the promise
                to be fulfilled. By default, it can wait indefinitely.
        Returns:
            *: value encapsulated, defined by the operation.
        Raises:
            TimeoutError: if the promise is not settled within the delay.
            NonExceptionRejection: if the promise is rejected with a value
                who is not an exception.
            *: If the promise is rejected, the rejection cause is raised.
        """
        with self._condition:
            if self._state == self.PENDING:
                self._condition.wait(timeout)

            if self._state == self.PENDING:
                raise TimeoutError()
            elif self._state == self.REJECTED:
                if not isinstance(self._error, BaseException):
                    raise NonExceptionRejection(self._error)
                raise self._error
            else:
                return self._result

    def exception(self, timeout=None):
        """Wait for the promise rejection and returns its error.

        Args:
            timeout (float, optional): if set, maximum time to wait the promise
                to be settled. By default, it can wait indefinitely.
        Returns:
            Exception: the error causing the rejection of the Promise.
            None: if the promise is fulfilled.
        Raises:
            TimeoutError: if the promise is not settled within the delay.
        """
        with self._condition:
            if self._state == self.PENDING:
                self._condition.wait(timeout)

            if self._state == self.PENDING:
                raise TimeoutError()
            else:
                return self._error

    def subscribe_success(self, handler):
        execute_now = False
        result = None

        with self._condition:
            if self._state == self.PENDING:
                self._callbacks.append(handler)
            elif self._state == self.FULFILLED:
                execute_now = True
                result = self._result

        if execute_now:
            self._exec_callback(handler, result)

    def subscribe_failure(self, handler):
        execute_now = False
        error = None

        with self._condition:
            if self._state == self.PENDING:
                self._errbacks.append(handler)
            elif self._state == self.REJECTED:
                execute_now = True
                error = self._error

        if execute_now:
            self._exec_callback(handler, error, is_errback=True)

    def safeguard(self):
        """Log the error of this Promise, with the most details possible.

        A rejected pipeline with no failure handler is silently ignored.
        Calling `safeguard()` on the last Promise of the pipeline ensures the
        error will be logged as ERROR, with its traceback.

        Returns:
            Promise: self, to allow call chaining.
        """
        def guard(error):
            if isinstance(error, BaseException):
                _logger.error('[SAFEGUARD] %r', self,
                              exc_info=(type(error), error,
                                        error.__traceback__))
            else:
                _logger.error('[SAFEGUARD] %r: %r', self, error)

        self.subscribe_failure(guard)
        return self

    def __repr__(self):
        return 'Promise(%s)' % self._inner_print()

    def _inner_print(self):
        with self._condition:
            if self._state == self.REJECTED:
                state = 'R'
            elif self._state == self.FULFILLED:
                state = 'F'
            else:
                state = 'P'

        if isinstance(self._previous, Promise):
            return '%s -> %s %s' % (self._previous._inner_print(), self._name,
                                    state)
        return '%s %s' % (self._name, state)

    @staticmethod
    def _exec_callback(callback, value, is_errback=False):
        try:
            callback(value)
        except Exception:
            if is_errback:
                _logger.exception('Promise failure handler raised an '
                                  'exception!')
            else:
                _logger.exception('Promise success handler raised an '
                                  'exception!')


def const(value):
    """Create a Promise already fulfilled with the value.

    Unlike a "resolve" helper, a Deferrable passed as value is not unwrapped:
    the Promise is fulfilled with the Deferrable object itself.

    Args:
        value: result of the Promise.
    Returns:
        Promise: new Promise already fulfilled.
    """
    return Promise(lambda ok, error: ok(value), _name='CONST')


def failure(reason):
    """Create a Promise rejected for the reason specified.

    Args:
        reason (Exception): error set to the Promise.
    Returns:
        Promise: new Promise already rejected.
    """
    return Promise(lambda ok, error: error(reason), _name='FAILURE')
