"""
Tests for data models and the order status lifecycle
"""
import unittest

from models.menu_item import MenuItem, MenuCategory
from models.order import Order, OrderLineItem, OrderStatus
from models.cart import CartItem
from models.user import Credentials, Principal, UserRole


def make_item(**overrides):
    data = {
        "id": "1",
        "name": "Cappuccino",
        "description": "Rich espresso with steamed milk and foam",
        "price": 45,
        "category": "coffee",
        "available": True
    }
    data.update(overrides)
    return MenuItem.from_dict(data)


class TestMenuItem(unittest.TestCase):
    """Test cases for MenuItem"""

    def test_from_dict_fills_defaults(self):
        item = MenuItem.from_dict({"id": 7, "name": "Samosa", "price": 15})
        self.assertEqual(item.id, "7")
        self.assertEqual(item.description, "")
        self.assertEqual(item.category, "coffee")
        self.assertTrue(item.available)

    def test_copy_is_independent(self):
        item = make_item()
        snapshot = item.copy()
        item.price = 99
        self.assertEqual(snapshot.price, 45)

    def test_category_values(self):
        self.assertEqual(MenuCategory.values(), ["coffee", "tea", "snacks", "meals"])


class TestOrderStatus(unittest.TestCase):
    """Test cases for the fulfillment lifecycle"""

    def test_forward_chain(self):
        self.assertIs(OrderStatus.PENDING.next_status(), OrderStatus.PREPARING)
        self.assertIs(OrderStatus.PREPARING.next_status(), OrderStatus.READY)
        self.assertIs(OrderStatus.READY.next_status(), OrderStatus.COMPLETED)
        self.assertIsNone(OrderStatus.COMPLETED.next_status())
        self.assertIsNone(OrderStatus.CANCELLED.next_status())

    def test_terminal_states(self):
        terminal = [status for status in OrderStatus if status.is_terminal]
        self.assertEqual(terminal, [OrderStatus.COMPLETED, OrderStatus.CANCELLED])

    def test_cancel_allowed_only_from_non_terminal(self):
        for status in (OrderStatus.PENDING, OrderStatus.PREPARING, OrderStatus.READY):
            self.assertTrue(status.can_transition_to(OrderStatus.CANCELLED))
        self.assertFalse(OrderStatus.COMPLETED.can_transition_to(OrderStatus.CANCELLED))
        self.assertFalse(OrderStatus.CANCELLED.can_transition_to(OrderStatus.CANCELLED))

    def test_skipping_steps_is_not_a_legal_transition(self):
        self.assertFalse(OrderStatus.PENDING.can_transition_to(OrderStatus.READY))
        self.assertFalse(OrderStatus.PREPARING.can_transition_to(OrderStatus.PENDING))


class TestOrderModels(unittest.TestCase):
    """Test cases for order line items and orders"""

    def test_line_item_computes_subtotal_from_snapshot(self):
        item = make_item()
        line = OrderLineItem.from_menu_item(item, 2)
        self.assertEqual(line.subtotal, 90)

        item.name = "Renamed"
        self.assertEqual(line.menu_item.name, "Cappuccino")

    def test_order_dict_round_trip(self):
        line = OrderLineItem.from_menu_item(make_item(), 3)
        order = Order(
            id="o1", customer_id="S123", customer_name="Asha", customer_contact="9999999999",
            items=[line], total=line.subtotal, status=OrderStatus.READY,
            created_at="2024-01-01T10:00:00.000+00:00", updated_at="2024-01-01T10:05:00.000+00:00"
        )
        data = order.to_dict()
        self.assertEqual(data["status"], "ready")
        self.assertEqual(data["items"][0]["menu_item"]["name"], "Cappuccino")
        self.assertEqual(Order.from_dict(data), order)


class TestCartAndUser(unittest.TestCase):
    """Test cases for cart items and principals"""

    def test_cart_line_total(self):
        self.assertEqual(CartItem(menu_item=make_item(price=20), quantity=3).line_total, 60)

    def test_credentials_from_dict(self):
        credentials = Credentials.from_dict({"role": "admin", "username": "admin", "password": "x"})
        self.assertIs(credentials.role, UserRole.ADMIN)
        self.assertIsNone(credentials.roll_number)

    def test_principal_round_trip(self):
        principal = Principal(id="S1", name="Student S1", role=UserRole.STUDENT, roll_number="S1")
        self.assertEqual(Principal.from_dict(principal.to_dict()), principal)
        self.assertFalse(principal.is_admin)


if __name__ == '__main__':
    unittest.main()
