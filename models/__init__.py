"""
Models package for the campus cafe
Contains data models and type definitions
"""

from .menu_item import MenuItem, MenuCategory
from .cart import CartItem, CartSummary
from .order import Order, OrderLineItem, OrderStatus
from .user import Credentials, Principal, UserRole

__all__ = [
    'MenuItem', 'MenuCategory',
    'CartItem', 'CartSummary',
    'Order', 'OrderLineItem', 'OrderStatus',
    'Credentials', 'Principal', 'UserRole'
]
