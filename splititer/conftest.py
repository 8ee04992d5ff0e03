import pytest

from splititer.core import config


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path, monkeypatch):
    """Point the configuration folder to an empty temporary directory,
    and discard any configuration read by a previous test."""
    config_dir = tmp_path / "splititer_config"
    monkeypatch.setenv("SPLITITER_CONFIG_DIR", str(config_dir))
    config.reset_configuration()
    try:
        yield config_dir
    finally:
        config.reset_configuration()
