"""
Cart related data models
"""
from dataclasses import dataclass
from typing import Dict, Any
from .menu_item import MenuItem


@dataclass
class CartItem:
    """Cart item data model"""
    menu_item: MenuItem
    quantity: int

    @property
    def line_total(self) -> float:
        return self.menu_item.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "menu_item": self.menu_item.to_dict(),
            "quantity": self.quantity,
            "line_total": self.line_total
        }


@dataclass
class CartSummary:
    """Cart summary data model"""
    total_items: int
    total_quantity: int
    total_amount: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_items": self.total_items,
            "total_quantity": self.total_quantity,
            "total_amount": self.total_amount
        }
