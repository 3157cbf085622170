# test/test_config.py

"""
Tests for config.py helpers.

A bad LOG_LEVEL must not stop the app from booting.
"""

import logging

import config


def test_known_log_level_is_kept_and_uppercased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config._get_log_level("LOG_LEVEL") == "DEBUG"


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    level = config._get_log_level("LOG_LEVEL", "INFO")

    assert level == "INFO"
    # basicConfig accepts it
    assert isinstance(logging.getLevelName(level), int)


def test_missing_log_level_uses_default(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert config._get_log_level("LOG_LEVEL", "WARNING") == "WARNING"


def test_pool_timeout_parses_float(monkeypatch):
    monkeypatch.setenv("DB_POOL_TIMEOUT", "2.5")
    assert config._get_float("DB_POOL_TIMEOUT", 30.0) == 2.5

    monkeypatch.setenv("DB_POOL_TIMEOUT", "soon")
    assert config._get_float("DB_POOL_TIMEOUT", 30.0) == 30.0


def test_env_file_is_loaded_only_by_config():
    import app

    assert hasattr(config, "load_dotenv")
    assert not hasattr(app, "load_dotenv")
