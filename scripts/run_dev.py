"""
Development server launcher.

Loads the .env file and runs the API with uvicorn, reloading on changes.

Usage:
    python scripts/run_dev.py [--host 127.0.0.1] [--port 8000] [--sqlite]

``--sqlite`` points the app at ./airpass.db (creating the tables) so the
API can be tried without a Postgres server.
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the AirPass API in development mode.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--sqlite", action="store_true", help="use a local SQLite file instead of Postgres")
    parser.add_argument("--no-reload", action="store_true")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    if args.sqlite:
        # Must be set before app.core.config is imported
        os.environ["DATABASE_URL_OVERRIDE"] = f"sqlite:///{project_root / 'airpass.db'}"
        os.environ.setdefault("LOG_JSON", "false")

        from app.db.init_db import init_db

        init_db()

    import uvicorn

    print(f"AirPass API on http://{args.host}:{args.port} (docs at /docs)")
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=not args.no_reload, log_level="info")
