# -*- coding: utf-8 -*-

import pytest

from deferchain.common import config


@pytest.fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Keep the config file of the tests away from the user's config."""
    monkeypatch.setenv('DEFERCHAIN_CONFIG_DIR', str(tmpdir))
    config.reset()
    yield tmpdir
    config.reset()
