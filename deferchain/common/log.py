# -*- coding: utf-8 -*-

"""Log levels of the deferchain modules.

deferchain is a library: it never adds handlers nor formatters to the
``logging`` module. Applications keep their own logging setup, and can use
the functions below to tune the verbosity of deferchain, either directly or
from the config file with ``apply_config()``.
"""

import logging

from . import config

# Level used to trace each step of the combinators. Below DEBUG.
HIDEBUG = 5
logging.addLevelName(HIDEBUG, 'HIDEBUG')


def set_logs_level(levels):
    """Configure a fine-grained log levels for the different modules.

    Args:
        levels (dict): A dict associating a module name and a log level. A log
            level can be a number or a str representing one of the logging
            levels (DEBUG, WARNING, ...). The level name will be converted to
            uppercase.
            Invalids values will be ignored.

    Example:

        >>> # Trace each step of the combinators, but only them.
        >>> set_logs_level({'deferchain': 'info',
        ...                 'deferchain.combinators': 'hidebug'})
    """
    for (module, level) in levels.items():
        try:
            if isinstance(level, str):
                level = level.upper()
                if level.isdigit():
                    level = int(level)
            logging.getLogger(module).setLevel(level)
        except (TypeError, ValueError):
            logger = logging.getLogger(__name__)
            logger.warning('Invalid log level "%s" for logger "%s". '
                           'Will be ignored.',
                           level, module)


def set_debug_mode(debug):
    """Set, or unset the debug log level.

    Args:
        debug (boolean): if True, the deferchain log level will be set to
            DEBUG. If False, it will be set to INFO.
    """
    if debug:
        logging.getLogger('deferchain').setLevel(logging.DEBUG)
    else:
        logging.getLogger('deferchain').setLevel(logging.INFO)


def apply_config():
    """Set the log levels from the config entries.

    The entry ``debug_mode`` is applied first, then ``log_levels``.
    """
    set_debug_mode(config.get('debug_mode'))
    set_logs_level(config.get('log_levels'))
