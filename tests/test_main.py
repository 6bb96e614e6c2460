from app import main
from app.core.config import settings


def test_run_starts_uvicorn(monkeypatch):
    """run() lance uvicorn sur l'app avec HOST/PORT de la config"""
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(settings, "HOST", "127.0.0.1")
    monkeypatch.setattr(settings, "PORT", 9000)
    
    main.run()
    
    assert calls == [(("app.main:app",), {"host": "127.0.0.1", "port": 9000})]
