# -*- coding: utf-8 -*-

import pytest

from deferchain.promise import Promise, const, wrap_deferrable


class TestDecorator(object):

    def test_wrap_sync_function(self):
        @wrap_deferrable
        def f(x):
            return x * 3

        p = f(30)
        assert isinstance(p, Promise)
        assert p.result(0.001) == 90

    def test_wrap_function_returning_promise(self):
        inner = const(40)

        @wrap_deferrable
        def f(x):
            return inner

        p = f(30)
        assert p is inner

    def test_wrap_function_with_exception(self):
        class MyException(Exception):
            pass

        @wrap_deferrable
        def f(x):
            raise MyException()

        p = f(30)
        assert isinstance(p, Promise)
        with pytest.raises(MyException):
            p.result(0.001)

    def test_wrapper_keeps_function_name(self):
        @wrap_deferrable
        def compute_total(x):
            return x

        assert compute_total.__name__ == 'compute_total'
