import importlib
import logging

import noteful.__main__ as entry


def test_main_runs_uvicorn_with_env_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(entry, "configure_logging", lambda level: calls.append(("logging", level)))
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    entry.main()

    assert calls[0] == ("logging", "DEBUG")
    args, kwargs = calls[1]
    assert args == ("noteful.main:app",)
    assert kwargs == {"host": "127.0.0.1", "port": 9001, "log_level": "debug"}


def test_main_defaults(monkeypatch):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))
    monkeypatch.setattr(entry, "configure_logging", lambda level: None)
    for name in ("HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # unparsable port falls back to the default
    monkeypatch.setenv("PORT", "not-a-port")

    entry.main()

    assert calls == [{"host": "0.0.0.0", "port": 8080, "log_level": "info"}]


def test_importing_the_app_leaves_root_logging_alone():
    import noteful.main

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    importlib.reload(noteful.main)

    assert root.handlers == handlers
    assert root.level == level
