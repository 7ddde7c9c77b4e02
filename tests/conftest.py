import os

import pytest

from numcodec.conf import DEFAULT_SETTINGS_FILEPATH

os.environ['NUMCODEC_CONFIG_YAML'] = os.environ.get('NUMCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)


@pytest.fixture
def reset_settings(monkeypatch):
    """Forget the loaded settings so a test can load a different file, the previous ones are restored afterwards."""
    from numcodec.conf import get_settings
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
