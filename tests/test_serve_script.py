import importlib.util
import sys
import types
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "serve.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("serve_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_args_defaults() -> None:
    args = _load_script().parse_args([])
    assert args.host == "127.0.0.1"
    assert args.port == 8000
    assert args.reload is False


def test_main_runs_app_with_uvicorn(monkeypatch) -> None:
    captured: dict = {}
    fake_uvicorn = types.ModuleType("uvicorn")
    fake_uvicorn.run = lambda app, **kwargs: captured.update(app=app, **kwargs)
    monkeypatch.setitem(sys.modules, "uvicorn", fake_uvicorn)

    _load_script().main(["--host", "0.0.0.0", "--port", "9001"])

    assert captured["app"] == "json_prompt.api.app:app"
    assert captured["host"] == "0.0.0.0"
    assert captured["port"] == 9001
    assert captured["reload"] is False
    assert captured["reload_dirs"] is None
