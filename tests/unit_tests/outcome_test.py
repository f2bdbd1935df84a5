# -*- coding: utf-8 -*-

from deferchain.outcome import Outcome


class TestOutcome(object):

    def test_of_returning_function(self):
        outcome = Outcome.of(lambda x, y: x + y, 2, y=3)
        assert outcome.succeeded
        assert outcome.value == 5
        assert outcome.error is None

    def test_of_raising_function(self):
        error = ValueError('bad')

        def func():
            raise error

        outcome = Outcome.of(func)
        assert not outcome.succeeded
        assert outcome.error is error
        assert outcome.value is None

    def test_settle(self):
        resolved = []
        rejected = []

        Outcome.success(1).settle(resolved.append, rejected.append)
        error = KeyError()
        Outcome.error_of(error).settle(resolved.append, rejected.append)

        assert resolved == [1]
        assert rejected == [error]

    def test_repr(self):
        assert repr(Outcome.success(1)) == 'Outcome.success(1)'
        assert repr(Outcome.error_of(None)) == 'Outcome.error_of(None)'
