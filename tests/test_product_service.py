import unittest

from orderdesk.core.errors import NotFoundError
from orderdesk.database import Database
from orderdesk.models.inventory import InventoryItem
from orderdesk.schemas.product import ProductAssetUpsert, ProductCreate, ProductUpdate
from orderdesk.services.product_service import (
    archive_product,
    create_product,
    create_products,
    get_product,
    list_products,
    to_product_read,
    update_product,
    upsert_product_asset,
)


class ProductServiceTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_all()
        self.db = self.database.session_factory()

    def tearDown(self):
        self.db.close()
        self.database.dispose()

    def test_create_provisions_every_declared_variant(self):
        product = create_product(
            self.db,
            ProductCreate(
                name="Classic Tee",
                base_price=12.5,
                available_colors=["Black", "White"],
                available_sizes=["S", "M"],
            ),
        )
        rows = self.db.query(InventoryItem).filter_by(product_id=product.id).all()
        self.assertEqual(len(rows), 4)
        self.assertEqual(
            {(row.color, row.size) for row in rows},
            {("Black", "S"), ("Black", "M"), ("White", "S"), ("White", "M")},
        )
        for row in rows:
            self.assertEqual(row.quantity, 0)
            self.assertEqual(row.min_quantity, 10)
            self.assertEqual(row.category, "General")
            self.assertTrue(row.name.startswith("Classic Tee / "))

    def test_create_without_variants_provisions_one_plain_row(self):
        product = create_product(self.db, ProductCreate(name="Canvas Tote", category="Bags"))
        rows = self.db.query(InventoryItem).filter_by(product_id=product.id).all()
        self.assertEqual(len(rows), 1)
        self.assertIsNone(rows[0].color)
        self.assertIsNone(rows[0].size)
        self.assertEqual(rows[0].category, "Bags")
        self.assertEqual(rows[0].name, "Canvas Tote")

    def test_read_model_derives_stock_fields(self):
        product = create_product(
            self.db,
            ProductCreate(name="Hoodie", available_sizes=["M", "L"]),
        )
        product.inventory[0].quantity = 30
        product.inventory[1].quantity = 2
        self.db.commit()

        read = to_product_read(get_product(self.db, product.id))
        self.assertEqual(read.stock, 32)
        self.assertTrue(read.is_low_stock)
        self.assertEqual(read.inventory_count, 2)
        self.assertEqual(read.tracking, "in_stock")
        self.assertCountEqual(read.selectable_sizes, ["M", "L"])

        dumped = read.model_dump(by_alias=True)
        self.assertIn("isLowStock", dumped)
        self.assertIn("inventoryCount", dumped)
        self.assertIn("product_assets", dumped)

    def test_batch_create_returns_products_in_input_order(self):
        products = create_products(
            self.db,
            [ProductCreate(name="Zip Hoodie"), ProductCreate(name="Apron", available_colors=["Red"])],
        )
        self.assertEqual([product.name for product in products], ["Zip Hoodie", "Apron"])
        self.assertEqual(self.db.query(InventoryItem).count(), 2)

    def test_archive_hides_product_from_default_listing(self):
        product = create_product(self.db, ProductCreate(name="Cap"))
        archive_product(self.db, product.id)

        self.assertEqual(list_products(self.db), [])
        archived = list_products(self.db, include_archived=True)
        self.assertEqual([item.id for item in archived], [product.id])
        self.assertTrue(archived[0].is_archived)

    def test_update_normalizes_declared_lists(self):
        product = create_product(self.db, ProductCreate(name="Polo"))
        updated = update_product(
            self.db,
            product.id,
            ProductUpdate(available_colors=[" Navy ", "Navy", ""], base_price=20),
        )
        self.assertEqual(updated.available_colors, ["Navy"])
        self.assertEqual(updated.base_price, 20)

    def test_missing_product_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            get_product(self.db, "missing")
        with self.assertRaises(NotFoundError):
            archive_product(self.db, "missing")

    def test_asset_upsert_replaces_existing_view(self):
        product = create_product(self.db, ProductCreate(name="Tee"))
        first = upsert_product_asset(
            self.db,
            product.id,
            ProductAssetUpsert(view="front", base_image="https://cdn.example.com/a.png"),
        )
        second = upsert_product_asset(
            self.db,
            product.id,
            ProductAssetUpsert(view="front", base_image="https://cdn.example.com/b.png"),
        )
        self.assertEqual(first.id, second.id)
        self.assertEqual(second.base_image, "https://cdn.example.com/b.png")

        other = upsert_product_asset(
            self.db,
            product.id,
            ProductAssetUpsert(view="front", color="Black", base_image="https://cdn.example.com/c.png"),
        )
        self.assertNotEqual(other.id, first.id)


if __name__ == "__main__":
    unittest.main()
