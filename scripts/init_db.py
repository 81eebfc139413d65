"""
Database initialization script.

Run this script to create database tables (e.g. for a local SQLite
database set through DATABASE_URL_OVERRIDE).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging(settings)
    print("=" * 50)
    print("AirPass Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except Exception as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
