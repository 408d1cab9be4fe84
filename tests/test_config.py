"""Tests for environment driven configuration."""

from __future__ import annotations

import logging

from civicfolio.config import BaseConfig, TestConfig
from civicfolio.desktop.context import create_store


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("CIVICFOLIO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("CIVICFOLIO_DEV_MODE", "no")
    monkeypatch.setenv("CIVICFOLIO_LOAD_BASELINE", "0")
    monkeypatch.setenv("CIVICFOLIO_LOG_LEVEL", "debug")

    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DEV_MODE is False
    assert config.LOAD_BASELINE is False
    assert config.LOG_LEVEL == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(config, monkeypatch):
    monkeypatch.setenv("CIVICFOLIO_LOG_LEVEL", "chatty")

    assert BaseConfig().LOG_LEVEL == logging.INFO


def test_test_config_is_quiet(config):
    assert isinstance(config, TestConfig)
    assert config.DEV_MODE is False
    assert config.TESTING is True


def test_export_dir_is_created(config):
    assert config.export_dir.is_dir()
    assert config.export_dir.parent == config.DATA_DIR


def test_store_starts_empty_when_baseline_disabled(config):
    config.LOAD_BASELINE = False

    store = create_store(config)

    assert store.current().actions == []
    store.reset_to_baseline()
    assert store.current().actions == []


def test_store_starts_from_seed_by_default(config):
    assert len(create_store(config).current().actions) == 5
