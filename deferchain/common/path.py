# -*- coding: utf-8 -*-
"""Helpers function to find deferchain path folders."""

import errno
import logging
import os

import appdirs

_logger = logging.getLogger(__name__)


_appdirs = appdirs.AppDirs(appname='deferchain', appauthor=False)


def _ensure_dir_exists(dir_path):
    """Try to create the folder if it not exists.

    If an error occurs, a warning log is sent and the error is ignored.
    """
    try:
        os.makedirs(dir_path)
        _logger.debug('Created missing folder "%s"', dir_path)
    except OSError as e:
        if e.errno == errno.EEXIST and os.path.isdir(dir_path):
            pass
        else:
            _logger.warning('Unable to create the missing folder "%s"',
                            dir_path, exc_info=True)


def get_config_dir():
    """Returns the directory path containing deferchain config files.

    The ``DEFERCHAIN_CONFIG_DIR`` environment variable, if set, overrides the
    per-user default location.
    """
    config_dir = os.environ.get('DEFERCHAIN_CONFIG_DIR') or \
        _appdirs.user_config_dir
    _ensure_dir_exists(config_dir)
    return config_dir


def main():
    print('config dir: %s' % get_config_dir())


if __name__ == "__main__":
    main()
