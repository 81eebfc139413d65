"""
Database connectivity check.

Connects with the configured DATABASE_URL and reports which of the
application tables are missing.

Usage:
    python scripts/check_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

import app.db.base  # noqa: F401
from app.db.session import engine

if __name__ == "__main__":
    print("=" * 60)
    print(f"Checking database ({engine.url.render_as_string(hide_password=True)})")
    print("=" * 60)

    try:
        existing = set(inspect(engine).get_table_names())
    except SQLAlchemyError as e:
        print(f"Connection failed: {e}")
        sys.exit(1)

    missing = [name for name in SQLModel.metadata.tables if name not in existing]
    for name in SQLModel.metadata.tables:
        print(f"  {'missing' if name in missing else 'ok':8} {name}")

    if missing:
        print("Run `alembic upgrade head` to create the missing tables.")
        sys.exit(1)
    print("=" * 60)
