"""
Tests for the Flask JSON API
"""
import unittest

from app import create_app
from config import Settings
from core.cafe import CampusCafe
from database.storage import MemoryStorage


class TestCafeApi(unittest.TestCase):
    """Test cases for the HTTP adapter"""

    def setUp(self):
        settings = Settings(storage_backend="memory", secret_key="test-secret")
        self.cafe = CampusCafe(settings, storage=MemoryStorage())
        self.app = create_app(self.cafe)
        self.app.config["TESTING"] = True

        self.admin = self.app.test_client()
        self.admin.post('/api/login', json={"role": "admin", "username": "admin", "password": "CBIT23"})

        self.student = self.app.test_client()
        self.student.post('/api/login', json={"role": "student", "roll_number": "S123", "password": "pw"})

    def _place_order(self, client=None):
        client = client or self.student
        client.post('/api/cart', json={"menu_item_id": "1", "quantity": 2})
        response = client.post('/api/orders', json={
            "customer_name": "Asha",
            "customer_contact": "9876543210"
        })
        self.assertEqual(response.status_code, 201)
        return response.get_json()["order"]

    def test_health(self):
        response = self.app.test_client().get('/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["status"], "ok")

    def test_menu_is_public(self):
        response = self.app.test_client().get('/api/menu')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["total_found"], 8)

    def test_bad_login(self):
        response = self.app.test_client().post(
            '/api/login', json={"role": "admin", "username": "admin", "password": "wrong"}
        )
        self.assertEqual(response.status_code, 401)

    def test_menu_management_requires_admin(self):
        payload = {"name": "Cold Coffee", "price": 55, "category": "coffee"}

        self.assertEqual(self.app.test_client().post('/api/menu', json=payload).status_code, 401)
        self.assertEqual(self.student.post('/api/menu', json=payload).status_code, 403)

        response = self.admin.post('/api/menu', json=payload)
        self.assertEqual(response.status_code, 201)
        item_id = response.get_json()["item"]["id"]

        self.assertEqual(self.admin.post(f'/api/menu/{item_id}/toggle').status_code, 200)
        available = self.app.test_client().get('/api/menu?available=true').get_json()
        self.assertNotIn(item_id, [item["id"] for item in available["items"]])

        self.assertEqual(self.admin.patch(f'/api/menu/{item_id}', json={"price": 60}).status_code, 200)
        self.assertEqual(self.admin.delete(f'/api/menu/{item_id}').status_code, 200)
        self.assertEqual(self.admin.patch('/api/menu/missing', json={"price": 1}).status_code, 404)

    def test_add_menu_item_validation(self):
        response = self.admin.post('/api/menu', json={"name": "", "price": 10})
        self.assertEqual(response.status_code, 400)

    def test_cart_endpoints(self):
        self.student.post('/api/cart', json={"menu_item_id": "6", "quantity": 3})
        cart = self.student.get('/api/cart').get_json()
        self.assertEqual(cart["summary"]["total_amount"], 45)

        self.student.patch('/api/cart/6', json={"quantity": 0})
        self.assertEqual(self.student.get('/api/cart').get_json()["cart_items"], [])

        bad = self.student.post('/api/cart', json={"menu_item_id": "6", "quantity": "lots"})
        self.assertEqual(bad.status_code, 400)

        self.assertEqual(self.app.test_client().get('/api/cart').status_code, 401)

    def test_checkout_requires_contact(self):
        self.student.post('/api/cart', json={"menu_item_id": "1"})
        response = self.student.post('/api/orders', json={"customer_name": "Asha"})
        self.assertEqual(response.status_code, 400)

    def test_students_only_see_their_orders(self):
        order = self._place_order()

        other = self.app.test_client()
        other.post('/api/login', json={"role": "student", "roll_number": "S999", "password": "pw"})
        self.assertEqual(other.get('/api/orders').get_json()["total_found"], 0)
        self.assertEqual(other.get(f'/api/orders/{order["id"]}').status_code, 404)

        mine = self.student.get('/api/orders').get_json()
        self.assertEqual([o["id"] for o in mine["orders"]], [order["id"]])
        self.assertEqual(self.admin.get('/api/orders').get_json()["total_found"], 1)

    def test_admin_drives_order_lifecycle(self):
        order = self._place_order()
        self.assertEqual(order["total"], 90)

        self.assertEqual(self.student.post(f'/api/orders/{order["id"]}/advance').status_code, 403)

        for expected in ("preparing", "ready", "completed"):
            response = self.admin.post(f'/api/orders/{order["id"]}/advance')
            self.assertEqual(response.get_json()["order"]["status"], expected)

        self.assertEqual(self.admin.post(f'/api/orders/{order["id"]}/advance').status_code, 409)
        self.assertEqual(self.admin.post(f'/api/orders/{order["id"]}/cancel').status_code, 409)

    def test_status_patch_and_stats(self):
        order = self._place_order()

        response = self.admin.patch(f'/api/orders/{order["id"]}', json={"status": "ready"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.admin.patch(f'/api/orders/{order["id"]}', json={"status": "lost"}).status_code, 400)
        self.assertEqual(self.admin.patch('/api/orders/missing', json={"status": "ready"}).status_code, 404)

        stats = self.admin.get('/api/orders/stats').get_json()
        self.assertEqual(stats["stats"]["ready"], 1)
        self.assertEqual(stats["total_orders"], 1)

    def test_non_text_fields_are_bad_requests(self):
        response = self.admin.post('/api/menu', json={"name": 123, "price": 10})
        self.assertEqual(response.status_code, 400)

        self.student.post('/api/cart', json={"menu_item_id": "1"})
        response = self.student.post('/api/orders', json={"customer_name": 5, "customer_contact": "98765"})
        self.assertEqual(response.status_code, 400)

    def test_non_text_credentials_are_unauthorized(self):
        client = self.app.test_client()
        response = client.post('/api/login', json={"role": "admin", "username": "admin", "password": 123})
        self.assertEqual(response.status_code, 401)

        response = client.post('/api/login', json={"role": "student", "roll_number": 160123, "password": "pw"})
        self.assertEqual(response.status_code, 401)

    def test_availability_string_flags(self):
        response = self.admin.patch('/api/menu/1', json={"available": "false"})
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.get_json()["item"]["available"])

        available = self.app.test_client().get('/api/menu?available=true').get_json()
        self.assertNotIn("1", [item["id"] for item in available["items"]])

        self.assertEqual(self.admin.patch('/api/menu/1', json={"available": "maybe"}).status_code, 400)

    def test_non_object_json_body(self):
        response = self.app.test_client().post('/api/login', json=[1])
        self.assertEqual(response.status_code, 401)

        response = self.admin.patch('/api/menu/1', json=[1])
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["item"]["name"], "Cappuccino")

    def test_logout(self):
        self.student.post('/api/logout')
        self.assertEqual(self.student.get('/api/me').status_code, 401)


if __name__ == '__main__':
    unittest.main()
