# -*- coding: utf-8 -*-

from .decorators import wrap_deferrable
from .deferrable import Deferrable
from .deferred import Deferred
from .promise import Promise, const, failure
from .util import is_deferrable

__all__ = ['Deferrable', 'Deferred', 'Promise', 'const', 'failure',
           'is_deferrable', 'wrap_deferrable']
