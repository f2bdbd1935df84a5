# -*- coding: utf-8 -*-

from .promise import Promise


class Deferred(object):
    """Producer side of an asynchronous task.

    A Deferred is the "creator" side of an async task, whereas a Promise
    represents the asynchronous value from the "consumer" side. The producer
    keeps the Deferred, and hands out only its Promise.

    Attributes:
        promise (Promise): the Promise associated to the Deferred.
        resolve (function): fulfill the Promise with a value.
        reject (function): reject the Promise with an exception.
    """

    def __init__(self, *args, **kwargs):
        self.promise = Promise(self._executor, *args, **kwargs)

    def _executor(self, resolve, reject):
        self.resolve = resolve
        self.reject = reject
