import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import delete, select

from orderdesk.config import get_settings
from orderdesk.core.logging import setup_logging
from orderdesk.database import Database
from orderdesk.models import Client, CompanySettings, InventoryItem, Order, OrderItem, Product, ProductAsset
from orderdesk.schemas.client import ClientCreate
from orderdesk.schemas.inventory import InventoryCreate
from orderdesk.schemas.order import OrderCreate
from orderdesk.schemas.product import ProductCreate
from orderdesk.services.client_service import create_client
from orderdesk.services.inventory_service import create_inventory_item
from orderdesk.services.order_service import create_order
from orderdesk.services.product_service import create_product


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample clients, products and orders.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    database.create_all()

    with database.session() as db:
        if args.reset:
            for model in (OrderItem, Order, InventoryItem, ProductAsset, Product, Client, CompanySettings):
                db.execute(delete(model))
            db.commit()

        has_client = db.execute(select(Client.id).limit(1)).first()
        if has_client:
            print("Seed skipped: clients already exist.")
            return

        acme = create_client(
            db,
            ClientCreate(
                name="Acme Sports Club",
                contact_person="Jana Weber",
                email="orders@acme-sports.example",
                city="Berlin",
                country="Germany",
            ),
        )
        create_client(db, ClientCreate(name="Northside Cafe", email="hello@northside.example"))

        tee = create_product(
            db,
            ProductCreate(
                name="Classic Tee",
                category="T-Shirts",
                base_price=12.5,
                fabric="Cotton",
                gsm="180",
                available_colors=["Black", "White"],
                available_sizes=["S", "M", "L"],
            ),
        )
        create_product(db, ProductCreate(name="Canvas Tote", category="Bags", base_price=6.0))

        for row in tee.inventory:
            row.quantity = 25
        db.commit()

        create_inventory_item(
            db,
            InventoryCreate(name="Plastisol Ink White", category="Supplies", quantity=4, min_quantity=5),
        )

        create_order(
            db,
            OrderCreate(
                client_id=acme.id,
                items=[
                    {
                        "product_id": tee.id,
                        "color": "Black",
                        "size": "M",
                        "quantity": 20,
                        "branding": {"method": "print", "position": "front"},
                    },
                    {
                        "product_id": tee.id,
                        "color": "White",
                        "size": "L",
                        "quantity": 5,
                        "branding": {"method": "embroidery", "position": "back"},
                    },
                ],
            ),
        )
        print("Seed data created.")
    database.dispose()


if __name__ == "__main__":
    main()
