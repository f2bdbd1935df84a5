# -*- coding: utf-8 -*-
"""Combinators building higher-level asynchronous operations.

They compose simpler asynchronous operations, without having to manually
wire handlers together and remember to propagate errors correctly.

Example: perform a sequence of database queries and transform the result::

    def product_names_for_username(username):
        return chain(
            lambda _: db.query('SELECT id FROM users WHERE name=?', username),
            lambda user_id: db.query('SELECT name FROM products '
                                     'WHERE user_id = ?', user_id),
        ).transform(', '.join)

    status = product_names_for_username('bob')
    status.subscribe_success(print)
    status.subscribe_failure(lambda error: print('Oh no! %s' % error))

If both queries complete successfully, the success handler receives the
string "Car, Spoon, Coffee". If either query went wrong, the failure handler
receives the error that occurred. The caller doesn't have to know that two
separate queries were made.
"""

from functools import reduce
import inspect
import logging

from .common.log import HIDEBUG
from .errors import NotDeferrableError
from .outcome import Outcome
from .promise import Deferred, const, is_deferrable

_logger = logging.getLogger(__name__)


def _name_of(func):
    return getattr(func, '__name__', None) or repr(func)


def _check_source(source):
    if not is_deferrable(source):
        raise NotDeferrableError(source, 'The source of a combinator must be '
                                         'a Deferrable, got %r' % (source,))


def bind(source, continuation, lift_plain=False):
    """Pass the success value of ``source`` to ``continuation``.

    ``continuation`` is expected to return another Deferrable representing
    the status of a second operation. The returned compound Deferrable is
    settled exactly once:

    - if ``source`` fails, with the same error; ``continuation`` is never
      called.
    - if ``continuation`` raises an exception, with this exception.
    - if ``continuation`` returns something else than a Deferrable, with a
      ``NotDeferrableError`` (unless ``lift_plain`` is set, in which case
      the plain value is the result).
    - otherwise, as the inner Deferrable: with its value or its error.

    Nested binds can be rewritten as a flat sequence::

        bind(a, lambda x: bind(b(x), lambda y: c(y)))

    has the same behavior as ``a >> b >> c``, without the nesting, and without
    the risk of inadvertent variable capture by the nested lambdas.

    Args:
        source (Deferrable): first operation.
        continuation (callable): called with the success value of
            ``source``. Must return a Deferrable.
        lift_plain (boolean, optional): if True, a plain value returned by
            ``continuation`` is used as the result, as if it were wrapped by
            ``const()``.
    Returns:
        Promise: status of the compound operation. It's returned immediately,
            possibly before any handler has fired.
    Raises:
        NotDeferrableError: if ``source`` is not a Deferrable.
        TypeError: if ``continuation`` is not callable.
    """
    _check_source(source)
    if not callable(continuation):
        raise TypeError('The continuation must be callable, got %r'
                        % (continuation,))

    name = _name_of(continuation)
    df = Deferred(_name=name, _previous=source)

    def on_inner(inner):
        if is_deferrable(inner):
            inner.subscribe_success(df.resolve)
            inner.subscribe_failure(df.reject)
        elif lift_plain:
            df.resolve(inner)
        else:
            _logger.debug('Continuation %s returned a non-deferrable value: '
                          '%r', name, inner)
            df.reject(NotDeferrableError(
                inner, 'Continuation %s must return a Deferrable, got %r'
                       % (name, inner)))

    def on_success(value):
        _logger.log(HIDEBUG, 'Call continuation %s with %r', name, value)
        outcome = Outcome.of(continuation, value)
        if not outcome.succeeded:
            _logger.debug('Continuation %s raised %r', name, outcome.error)
        outcome.settle(on_inner, df.reject)

    source.subscribe_failure(df.reject)
    source.subscribe_success(on_success)
    return df.promise


def transform(source, map_fn):
    """Transform the success value of ``source`` by invoking ``map_fn``.

    If ``source`` fails, ``map_fn`` is not called and the returned Deferrable
    fails with the same error. If ``map_fn`` raises, the returned Deferrable
    fails with the raised exception.

    Args:
        source (Deferrable): operation whose result is transformed.
        map_fn (callable): takes the success value, returns the new value.
    Returns:
        Promise: succeeds with the transformed value.
    """
    if not callable(map_fn):
        raise TypeError('The transform function must be callable, got %r'
                        % (map_fn,))

    def lift(value):
        return const(map_fn(value))

    lift.__name__ = 'transform(%s)' % _name_of(map_fn)
    return bind(source, lift)


def transform_error(source, map_fn):
    """Transform the failure reason of ``source`` by invoking ``map_fn``.

    A new Deferrable is returned; ``source`` is left untouched.
    If ``source`` succeeds, the new Deferrable succeeds with the same value,
    and ``map_fn`` is never called. If ``source`` fails, the new Deferrable
    fails with the value returned by ``map_fn``, or with the exception raised
    by ``map_fn``.

    Args:
        source (Deferrable): operation whose error is transformed.
        map_fn (callable): takes the error, returns the new error.
    Returns:
        Promise: fails with the transformed error.
    """
    _check_source(source)
    if not callable(map_fn):
        raise TypeError('The error transform function must be callable, got '
                        '%r' % (map_fn,))

    df = Deferred(_name='transform_error(%s)' % _name_of(map_fn),
                  _previous=source)

    def on_failure(error):
        # Both the mapped error and the error raised by map_fn are failures.
        Outcome.of(map_fn, error).settle(df.reject, df.reject)

    source.subscribe_success(df.resolve)
    source.subscribe_failure(on_failure)
    return df.promise


def _accepts_seed(action):
    try:
        inspect.signature(action).bind(None)
    except TypeError:
        return False
    except ValueError:
        # No signature available (some builtins): assume it takes one.
        return True
    return True


def _starting_action(action):
    """Let the first action of a chain take either no argument, or one."""
    if not callable(action) or _accepts_seed(action):
        return action

    def start(_):
        return action()

    start.__name__ = _name_of(action)
    return start


def chain(*actions, lift_plain=False):
    """Execute a sequence of asynchronous operations.

    Each operation may depend on the result of the previous one. It's a left
    fold of ``bind()`` over the actions, seeded with ``const(None)``.

    The first action has no previous result: it can be written without
    argument (``lambda: query()``), or with one argument, which will receive
    None.

    Args:
        *actions (callable): functions who perform an operation and return a
            Deferrable.
        lift_plain (boolean, optional): passed to each ``bind()``.
    Returns:
        Promise: succeeds with the result of the last action if all of the
            chained operations succeeded. Fails with the first error
            encountered; the remaining actions are not called.
    """
    if actions:
        actions = (_starting_action(actions[0]),) + actions[1:]

    def step(source, action):
        return bind(source, action, lift_plain=lift_plain)

    return reduce(step, actions, const(None))
