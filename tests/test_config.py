"""Tests for syllabus_extractor.config — .env loading and log level."""

import logging
import os

from syllabus_extractor.config import LOG_LEVEL_ENV, get_log_level, load_env_file


def test_load_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SYLLABUS_TEST_KEY", raising=False)
    env = tmp_path / ".env"
    env.write_text("# comment\n\nSYLLABUS_TEST_KEY = hello\nnot a pair\n", encoding="utf-8")
    assert load_env_file(env) == 1
    assert os.environ["SYLLABUS_TEST_KEY"] == "hello"
    monkeypatch.delenv("SYLLABUS_TEST_KEY")


def test_existing_env_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("SYLLABUS_TEST_KEY", "from-shell")
    env = tmp_path / ".env"
    env.write_text("SYLLABUS_TEST_KEY=from-file\n", encoding="utf-8")
    load_env_file(env)
    assert os.environ["SYLLABUS_TEST_KEY"] == "from-shell"


def test_missing_env_file(tmp_path):
    assert load_env_file(tmp_path / ".env") == 0


def test_log_level_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_log_level() == logging.INFO


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_log_level() == logging.DEBUG


def test_log_level_invalid_falls_back(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "LOUD")
    assert get_log_level() == logging.INFO
