#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _bootstrap_pythonpath() -> None:
    import sys

    src = _repo_root() / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the prompt converter page and /convert endpoint.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind.")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes (development only).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    _bootstrap_pythonpath()

    import uvicorn

    uvicorn.run(
        "json_prompt.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        reload_dirs=[str(_repo_root() / "src")] if args.reload else None,
    )


if __name__ == "__main__":
    main()
