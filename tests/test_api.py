import unittest

import jwt
from fastapi.testclient import TestClient

from orderdesk.config import Settings
from orderdesk.main import create_app

SECRET = "api-test-secret-with-enough-bytes-0123456789"


class OrderDeskApiTest(unittest.TestCase):
    def setUp(self):
        settings = Settings(
            DATABASE_URL="sqlite://",
            JWT_SECRET=SECRET,
            AUTH_REQUIRED=True,
            LOG_LEVEL="WARNING",
            DEFAULT_COMPANY_NAME="Print Shop",
        )
        self.client = TestClient(create_app(settings))
        self.client.__enter__()
        token = jwt.encode({"sub": "user-1", "email": "ops@example.com"}, SECRET, algorithm="HS256")
        self.headers = {"Authorization": f"Bearer {token}"}

    def tearDown(self):
        self.client.__exit__(None, None, None)

    def _post(self, path, payload):
        return self.client.post(path, json=payload, headers=self.headers)

    def _seed_order(self):
        client = self._post("/clients", {"name": "Acme Sports Club"}).json()
        product = self._post(
            "/products",
            {"name": "Classic Tee", "available_colors": ["Black"], "available_sizes": ["S", "M"]},
        ).json()
        response = self._post(
            "/orders",
            {
                "clientId": client["id"],
                "items": [
                    {
                        "productId": product["id"],
                        "color": "Black",
                        "size": "M",
                        "quantity": 12,
                        "branding": {"method": "print", "position": "front"},
                    }
                ],
            },
        )
        self.assertEqual(response.status_code, 201)
        return client, product, response.json()

    def test_health_needs_no_token(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_missing_token_is_401_and_bad_token_is_403(self):
        response = self.client.get("/clients")
        self.assertEqual(response.status_code, 401)
        self.assertIn("error", response.json())

        bad = jwt.encode({"sub": "x"}, "some-other-secret-with-enough-bytes-0000", algorithm="HS256")
        response = self.client.get("/clients", headers={"Authorization": f"Bearer {bad}"})
        self.assertEqual(response.status_code, 403)

    def test_product_payload_uses_derived_camel_case_fields(self):
        response = self._post(
            "/products",
            {"name": "Classic Tee", "available_colors": ["Black", "White"], "available_sizes": ["S", "M"]},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["inventoryCount"], 4)
        self.assertEqual(body["stock"], 0)
        self.assertTrue(body["isLowStock"])
        self.assertEqual(body["tracking"], "out_of_stock")
        self.assertEqual(body["product_assets"], [])

        listing = self.client.get("/inventory", headers=self.headers).json()
        self.assertEqual(len(listing), 4)
        self.assertTrue(all(row["isLowStock"] for row in listing))
        self.assertEqual(listing[0]["product"]["name"], "Classic Tee")

    def test_order_flow(self):
        client, _product, order = self._seed_order()
        self.assertEqual(order["status"], "draft")
        self.assertEqual(order["customer_name"], "Acme Sports Club")
        self.assertEqual(order["items"][0]["product_name"], "Classic Tee")

        response = self.client.patch(
            f"/orders/{order['id']}/status",
            json={"status": "production"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "id": order["id"], "status": "production"})

        summaries = self.client.get("/orders", headers=self.headers).json()
        self.assertEqual(summaries[0]["clientName"], "Acme Sports Club")
        self.assertEqual(summaries[0]["itemsCount"], 12)

        client_orders = self.client.get(f"/clients/{client['id']}/orders", headers=self.headers).json()
        self.assertEqual([row["id"] for row in client_orders], [order["id"]])

        stats = self.client.get("/dashboard/stats", headers=self.headers).json()
        self.assertEqual(stats["stats"]["inProduction"], 1)
        self.assertEqual(stats["stats"]["totalClients"], 1)

    def test_invalid_status_is_400_and_leaves_order_untouched(self):
        _client, _product, order = self._seed_order()
        response = self.client.patch(
            f"/orders/{order['id']}/status",
            json={"status": "shipped"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

        current = self.client.get(f"/orders/{order['id']}", headers=self.headers).json()
        self.assertEqual(current["status"], "draft")

    def test_bad_variant_is_400_with_details(self):
        client, product, _order = self._seed_order()
        response = self._post(
            "/orders",
            {
                "clientId": client["id"],
                "items": [
                    {
                        "productId": product["id"],
                        "color": "Pink",
                        "size": "M",
                        "quantity": 1,
                        "branding": {"method": "print", "position": "front"},
                    }
                ],
            },
        )
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["details"]["field"], "color")
        self.assertEqual(body["details"]["allowed"], ["Black"])

    def test_order_without_items_is_rejected(self):
        client = self._post("/clients", {"name": "Acme"}).json()
        response = self._post("/orders", {"clientId": client["id"], "items": []})
        self.assertEqual(response.status_code, 400)

    def test_client_with_orders_cannot_be_deleted(self):
        client, _product, order = self._seed_order()
        response = self.client.delete(f"/clients/{client['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertIn("existing orders", response.json()["error"])

        self.assertEqual(self.client.delete(f"/orders/{order['id']}", headers=self.headers).status_code, 200)
        response = self.client.delete(f"/clients/{client['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f"/clients/{client['id']}", headers=self.headers).status_code, 404)

    def test_batch_import_requires_an_array(self):
        response = self._post("/products/batch", {"name": "Loose Tee"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "validation_failure")

        products = self.client.get("/products?include_archived=true", headers=self.headers).json()
        self.assertEqual(products, [])
        self.assertEqual(self.client.get("/inventory", headers=self.headers).json(), [])

    def test_batch_import_creates_every_product(self):
        response = self._post("/products/batch", [{"name": "Tee"}, {"name": "Cap", "available_sizes": ["S", "M"]}])
        self.assertEqual(response.status_code, 201)
        self.assertEqual([row["name"] for row in response.json()], ["Tee", "Cap"])
        self.assertEqual(response.json()[1]["inventoryCount"], 2)

    def test_product_delete_archives(self):
        product = self._post("/products", {"name": "Cap"}).json()
        response = self.client.delete(f"/products/{product['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 204)

        self.assertEqual(self.client.get("/products", headers=self.headers).json(), [])
        archived = self.client.get("/products?include_archived=true", headers=self.headers).json()
        self.assertTrue(archived[0]["is_archived"])

    def test_inventory_sync_route(self):
        response = self.client.post("/inventory/sync", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["created"], 0)

    def test_inventory_quantity_patch(self):
        item = self._post("/inventory", {"name": "White ink", "quantity": 1, "min_quantity": 5}).json()
        self.assertTrue(item["isLowStock"])

        response = self.client.patch(
            f"/inventory/{item['id']}/quantity",
            json={"quantity": 20},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["quantity"], 20)
        self.assertFalse(response.json()["isLowStock"])

        response = self.client.patch(
            f"/inventory/{item['id']}/quantity",
            json={"quantity": -3},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)

    def test_settings_roundtrip(self):
        current = self.client.get("/settings", headers=self.headers).json()
        self.assertTrue(current["is_default"])
        self.assertEqual(current["company_name"], "Print Shop")

        response = self.client.put(
            "/settings",
            json={"company_name": "Stitch Co", "city": "Hamburg"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        saved = self.client.get("/settings", headers=self.headers).json()
        self.assertFalse(saved["is_default"])
        self.assertEqual(saved["company_name"], "Stitch Co")

    def test_unknown_order_is_404(self):
        response = self.client.get("/orders/missing", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Order not found")


if __name__ == "__main__":
    unittest.main()
