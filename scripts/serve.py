from __future__ import annotations

import argparse
import logging
import os, sys

# Ensure repo root is on sys.path when running from scripts/
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import uvicorn


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="YAML config path (sets MINESWEEPER_CONFIG)")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(message)s', datefmt='%H:%M:%S')
    if args.config:
        os.environ["MINESWEEPER_CONFIG"] = os.path.abspath(args.config)

    from webui.app import app

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
