import logging

import uvicorn

from webgl_static import __main__ as launcher


def _capture_run(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_main_uses_settings(monkeypatch):
    calls = _capture_run(monkeypatch)
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")
    launcher.main()
    assert calls == [("webgl_static.main:app", {"host": "0.0.0.0", "port": 9000})]


def test_main_falls_back_on_bad_port(monkeypatch, caplog):
    calls = _capture_run(monkeypatch)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("PORT", "eighty")
    with caplog.at_level(logging.WARNING):
        launcher.main()
    assert calls == [("webgl_static.main:app", {"host": "127.0.0.1", "port": 8000})]
    assert any("Invalid PORT 'eighty'" in r.getMessage() for r in caplog.records)
