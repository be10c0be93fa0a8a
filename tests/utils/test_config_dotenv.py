import importlib
import sys
import builtins
import types
import logging
import os
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("siteindexer.config", None)
    return importlib.import_module("siteindexer.config")


def test_missing_dotenv_logs_warning(monkeypatch, caplog):
    orig_import = builtins.__import__

    def fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name == "dotenv" or name.startswith("dotenv."):
            raise ImportError
        return orig_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    caplog.set_level(logging.WARNING)
    cfg = _reload_config()
    assert "python-dotenv not available" in caplog.text

    # environment fallback works
    monkeypatch.setenv("USER_AGENT", "X-Agent")
    cfg = _reload_config()
    assert cfg.get_str_env("USER_AGENT", "IndexerBot") == "X-Agent"


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("USER_AGENT=FromFile")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("CRAWL_DELAY=2.5")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CRAWL_DELAY", raising=False)

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        p = Path(".env")
        for line in p.read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                monkeypatch.setenv(k, v)
        return True

    fake = types.SimpleNamespace(load_dotenv=fake_load)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    cfg = _reload_config()
    assert cfg.get_float_env("CRAWL_DELAY", 0.5) == 2.5
    assert os.environ["CRAWL_DELAY"] == "2.5"


def test_invalid_numbers_fall_back_to_default(monkeypatch, caplog):
    cfg = _reload_config()
    monkeypatch.setenv("FETCH_MAX_ATTEMPTS", "three")
    monkeypatch.setenv("CRAWL_DELAY", "soon")
    monkeypatch.setenv("SITEINDEXER_SITES_FILE", "")
    assert cfg.get_int_env("FETCH_MAX_ATTEMPTS", 3) == 3
    assert cfg.get_float_env("CRAWL_DELAY", 0.5) == 0.5
    assert cfg.get_optional_int_env("FETCH_MAX_ATTEMPTS") is None
    assert cfg.get_optional_str_env("SITEINDEXER_SITES_FILE") is None
    assert "Invalid FETCH_MAX_ATTEMPTS" in caplog.text
