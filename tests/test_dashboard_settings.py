import unittest

from orderdesk.config import Settings
from orderdesk.database import Database
from orderdesk.schemas.client import ClientCreate
from orderdesk.schemas.inventory import InventoryCreate
from orderdesk.schemas.order import OrderCreate
from orderdesk.schemas.product import ProductCreate
from orderdesk.schemas.settings import CompanySettingsUpdate
from orderdesk.services.client_service import create_client
from orderdesk.services.dashboard_service import dashboard_stats
from orderdesk.services.inventory_service import create_inventory_item
from orderdesk.services.order_service import create_order, update_order_status
from orderdesk.services.product_service import create_product
from orderdesk.services.settings_service import get_company_settings, update_company_settings


class DashboardServiceTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_all()
        self.db = self.database.session_factory()

    def tearDown(self):
        self.db.close()
        self.database.dispose()

    def test_empty_store_has_zero_counts(self):
        result = dashboard_stats(self.db)
        self.assertEqual(result.stats.total_orders, 0)
        self.assertEqual(result.stats.low_stock_items, 0)
        self.assertEqual(result.recent_orders, [])

    def test_counts_by_status_and_low_stock(self):
        client = create_client(self.db, ClientCreate(name="Acme"))
        tote = create_product(self.db, ProductCreate(name="Tote"))
        create_inventory_item(self.db, InventoryCreate(name="Ink", quantity=50, min_quantity=5))

        line = {"product_id": tote.id, "quantity": 2, "branding": {"method": "print", "position": "front"}}
        orders = [create_order(self.db, OrderCreate(client_id=client.id, items=[line])) for _ in range(7)]
        update_order_status(self.db, orders[0].id, "confirmed")
        update_order_status(self.db, orders[1].id, "production")
        update_order_status(self.db, orders[2].id, "done")

        result = dashboard_stats(self.db)
        stats = result.stats
        self.assertEqual(stats.total_orders, 7)
        self.assertEqual(stats.drafts, 4)
        self.assertEqual(stats.confirmed, 1)
        self.assertEqual(stats.in_production, 1)
        self.assertEqual(stats.completed, 1)
        self.assertEqual(stats.total_clients, 1)
        # the tote's provisioned row starts at 0 against a minimum of 10
        self.assertEqual(stats.low_stock_items, 1)
        self.assertEqual(len(result.recent_orders), 5)

        dumped = result.model_dump(by_alias=True)
        self.assertEqual(dumped["stats"]["totalOrders"], 7)
        self.assertEqual(dumped["recentOrders"][0]["clientName"], "Acme")
        self.assertEqual(dumped["recentOrders"][0]["itemsCount"], 2)


class CompanySettingsServiceTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_all()
        self.db = self.database.session_factory()
        self.app_settings = Settings(DEFAULT_COMPANY_NAME="Print Shop", DEFAULT_COMPANY_EMAIL="info@example.com")

    def tearDown(self):
        self.db.close()
        self.database.dispose()

    def test_defaults_when_nothing_saved(self):
        current = get_company_settings(self.db, self.app_settings)
        self.assertTrue(current.is_default)
        self.assertEqual(current.company_name, "Print Shop")
        self.assertEqual(current.email, "info@example.com")
        self.assertIsNone(current.id)

    def test_update_creates_then_edits_single_record(self):
        created = update_company_settings(
            self.db,
            CompanySettingsUpdate(company_name="Stitch & Print", city="Hamburg"),
            self.app_settings,
        )
        self.assertFalse(created.is_default)
        self.assertIsNotNone(created.id)

        edited = update_company_settings(self.db, CompanySettingsUpdate(vat_id="DE123"), self.app_settings)
        self.assertEqual(edited.id, created.id)
        self.assertEqual(edited.company_name, "Stitch & Print")
        self.assertEqual(edited.city, "Hamburg")
        self.assertEqual(edited.vat_id, "DE123")

    def test_first_save_without_name_uses_default_name(self):
        saved = update_company_settings(self.db, CompanySettingsUpdate(phone="+49 40 1234"), self.app_settings)
        self.assertEqual(saved.company_name, "Print Shop")


if __name__ == "__main__":
    unittest.main()
