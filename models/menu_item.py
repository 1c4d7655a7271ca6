"""
Menu item data models
"""
from dataclasses import dataclass, fields, replace
from typing import Dict, Any
from enum import Enum


DEFAULT_IMAGE = "/api/placeholder/200/150"


class MenuCategory(Enum):
    COFFEE = "coffee"
    TEA = "tea"
    SNACKS = "snacks"
    MEALS = "meals"

    @classmethod
    def values(cls):
        return [category.value for category in cls]


@dataclass
class MenuItem:
    """Menu item data model"""
    id: str
    name: str
    description: str
    price: float
    category: str
    image: str = DEFAULT_IMAGE
    available: bool = True

    @classmethod
    def field_names(cls):
        """Names of all fields, including id"""
        return [f.name for f in fields(cls)]

    def copy(self) -> "MenuItem":
        """Return an independent copy (used for order snapshots)"""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "image": self.image,
            "available": self.available
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuItem":
        """Build from a stored dictionary"""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            price=data["price"],
            category=data.get("category", MenuCategory.COFFEE.value),
            image=data.get("image", DEFAULT_IMAGE),
            available=bool(data.get("available", True))
        )
