import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy.exc import SQLAlchemyError

from orderdesk.config import get_settings
from orderdesk.core.errors import OrderDeskError
from orderdesk.core.logging import setup_logging
from orderdesk.database import Database
from orderdesk.services.inventory_service import sync_inventory


def parse_args():
    parser = argparse.ArgumentParser(
        description="Create inventory rows for catalog products that have none."
    )
    parser.add_argument(
        "--expand-variants",
        action="store_true",
        help="Also create rows for missing declared color/size combinations.",
    )
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    database.create_all()
    try:
        with database.session() as db:
            created = sync_inventory(db, expand_variants=args.expand_variants)
    except (SQLAlchemyError, OrderDeskError) as exc:
        raise SystemExit(f"Sync failed: {exc}") from exc
    finally:
        database.dispose()

    print(f"Inventory rows created: {created}")


if __name__ == "__main__":
    main()
