# -*- coding: utf-8 -*-

"""Manages settings and config file.

Settings are loaded from a configuration file, ``deferchain.ini``, in the
per-user config directory. If they don't exist, default values are provided.
When an option is set, the config file is updated.

The module can be used without calling ``load()``: in this case, only the
default values (and the values set at runtime) are used.
"""

import configparser
import logging
import os.path

from . import path as deferchain_path

_logger = logging.getLogger(__name__)


# Default config dict. Values not present in this dict are not valid.
# Each entry contains the type expected, and the default value.
_default_config = {
    'debug_mode': {'type': bool, 'default': False},
    'log_levels': {'type': dict, 'default': {}}
}

# Actual config parser
_config_parser = configparser.ConfigParser()
_config_parser.add_section('config')


def _get_config_file_path():
    return os.path.join(deferchain_path.get_config_dir(), 'deferchain.ini')


def load():
    """Find and load the config file."""
    config_file_path = _get_config_file_path()

    if not _config_parser.read(config_file_path):
        _logger.warning('Unable to load config file: %s', config_file_path)


def reset():
    """Forget all the values loaded or set. Defaults are used again."""
    _config_parser.remove_section('config')
    _config_parser.add_section('config')


def _parse_dict(key, dict_str):
    # Dict entries are in the form 'key=value;key2=value2'
    result = {}
    for pair in filter(None, dict_str.split(';')):
        try:
            (k, v) = pair.split('=')
            result[k.strip()] = v.strip()
        except ValueError:
            _logger.warning('Unable to parse pair key=value for "%s": "%s"',
                            key, pair)
    return result


def get(key):
    """Find and return a configuration entry

    If the entry is not specified in the config file, or if its value is
    invalid, the default value is returned.

    Args:
        key (string): the entry key.
    Returns:
        The corresponding value found.
    Raises:
        KeyError: if the config entry doesn't exists.
    """
    if key not in _default_config:
        raise KeyError(key)
    entry_type = _default_config[key]['type']
    try:
        if entry_type is bool:
            return _config_parser.getboolean('config', key)
        elif entry_type is int:
            return _config_parser.getint('config', key)
        elif entry_type is dict:
            return _parse_dict(key, _config_parser.get('config', key))
        else:
            return _config_parser.get('config', key)
    except configparser.NoOptionError:
        return _default_config[key]['default']
    except ValueError:
        _logger.warning('Invalid value for config entry "%s". The default '
                        'value will be used.', key)
        return _default_config[key]['default']


def set(key, value):
    """Set a configuration entry, and save it in the config file.

    Args:
        key (string): the entry key.
        value: the new value to set. It will be converted to string. A dict
            is converted into the 'key=value;key2=value2' format.
    Raises:
        KeyError: if the config entry is not valid.
    """
    if key not in _default_config:
        raise KeyError(key)
    if isinstance(value, dict):
        value = ';'.join('%s=%s' % item for item in sorted(value.items()))
    _config_parser.set('config', key, str(value))
    config_file_path = _get_config_file_path()
    try:
        with open(config_file_path, 'w') as config_file:
            _config_parser.write(config_file)
        _logger.debug('Config file modified.')
    except IOError:
        _logger.warning('Unable to write in the config file', exc_info=True)


def main():
    logging.basicConfig()
    load()
    debug_mode = get('debug_mode')
    print('"debug_mode" config is %s (type %s).'
          % (debug_mode, type(debug_mode)))
    try:
        get('foo')
    except KeyError:
        print("The key foo doesn't exists, as expected")


if __name__ == "__main__":
    main()
