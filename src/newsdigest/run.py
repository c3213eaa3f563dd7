"""Run the API with uvicorn: ``python -m newsdigest.run``."""
from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true")
    args = p.parse_args()
    uvicorn.run("newsdigest.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
