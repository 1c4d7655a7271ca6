"""
Default catalog written on first access to an empty menu store
"""
from typing import List

from models.menu_item import MenuItem, MenuCategory, DEFAULT_IMAGE


DEFAULT_MENU = [
    ("1", "Cappuccino", "Rich espresso with steamed milk and foam", 45, MenuCategory.COFFEE),
    ("2", "Latte", "Smooth espresso with steamed milk", 50, MenuCategory.COFFEE),
    ("3", "Black Coffee", "Pure coffee for the purists", 35, MenuCategory.COFFEE),
    ("4", "Masala Tea", "Traditional spiced tea", 20, MenuCategory.TEA),
    ("5", "Green Tea", "Healthy and refreshing", 25, MenuCategory.TEA),
    ("6", "Samosa", "Crispy vegetable samosa", 15, MenuCategory.SNACKS),
    ("7", "Sandwich", "Grilled veg sandwich", 40, MenuCategory.SNACKS),
    ("8", "Biryani", "Aromatic rice with vegetables", 80, MenuCategory.MEALS),
]


def default_menu_items() -> List[MenuItem]:
    # 매번 새 객체를 만들어 반환 (공유 상태 방지)
    return [
        MenuItem(
            id=item_id,
            name=name,
            description=description,
            price=price,
            category=category.value,
            image=DEFAULT_IMAGE,
            available=True
        )
        for item_id, name, description, price, category in DEFAULT_MENU
    ]
