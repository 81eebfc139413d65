"""
One-off repair: clear profile ``user_id`` links that point at no user.

Usage:
    python scripts/fix_invalid_user_ids.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import engine
from app.services.maintenance_service import MaintenanceService

if __name__ == "__main__":
    configure_logging(settings)
    with Session(engine) as session:
        result = MaintenanceService(session).fix_invalid_user_ids()
    print(f"Fixed {result['fixed_count']} of {result['total_profiles']} profiles")
