"""
Services package for the campus cafe
Contains business logic services
"""

from .menu_service import MenuService
from .cart_service import CartService
from .order_service import OrderService
from .auth_service import AuthService, CredentialVerifier, StaticCredentialVerifier

__all__ = [
    'MenuService', 'CartService', 'OrderService',
    'AuthService', 'CredentialVerifier', 'StaticCredentialVerifier'
]
