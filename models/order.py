"""
Order related data models
"""
from dataclasses import dataclass
from typing import List, Optional, Dict, Any
from enum import Enum
from .menu_item import MenuItem


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    def next_status(self) -> Optional["OrderStatus"]:
        """Forward successor in the fulfillment lifecycle, None when terminal"""
        return _FORWARD.get(self)

    def can_transition_to(self, other: "OrderStatus") -> bool:
        """True for the forward step, or a cancel from a non-terminal status"""
        if self.is_terminal:
            return False
        return other is OrderStatus.CANCELLED or other is self.next_status()


_FORWARD = {
    OrderStatus.PENDING: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.READY,
    OrderStatus.READY: OrderStatus.COMPLETED,
}


@dataclass(frozen=True)
class OrderLineItem:
    """Order line item: a snapshot of the menu item at order time"""
    menu_item: MenuItem
    quantity: int
    subtotal: float

    @classmethod
    def from_menu_item(cls, menu_item: MenuItem, quantity: int) -> "OrderLineItem":
        """Copy the menu item and compute the subtotal"""
        return cls(
            menu_item=menu_item.copy(),
            quantity=quantity,
            subtotal=menu_item.price * quantity
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "menu_item": self.menu_item.to_dict(),
            "quantity": self.quantity,
            "subtotal": self.subtotal
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderLineItem":
        return cls(
            menu_item=MenuItem.from_dict(data["menu_item"]),
            quantity=int(data["quantity"]),
            subtotal=data["subtotal"]
        )


@dataclass
class Order:
    """Order data model"""
    id: str
    customer_id: str
    customer_name: str
    customer_contact: str
    items: List[OrderLineItem]
    total: float
    status: OrderStatus
    created_at: str
    updated_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "customer_contact": self.customer_contact,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            id=str(data["id"]),
            customer_id=data["customer_id"],
            customer_name=data.get("customer_name", ""),
            customer_contact=data.get("customer_contact", ""),
            items=[OrderLineItem.from_dict(item) for item in data.get("items", [])],
            total=data["total"],
            status=OrderStatus(data["status"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"]
        )
