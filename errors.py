"""
Error types shared by the stores and services
"""
from typing import Optional


class CafeError(Exception):
    """Base class for all cafe errors"""


class NotFoundError(CafeError):
    """Raised when a menu item or order id does not exist"""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found: {item_id}")


class ValidationError(CafeError):
    """Raised when a required field is missing or invalid"""


class InvalidTransitionError(ValidationError):
    """Raised when an order status change breaks the lifecycle"""

    def __init__(self, current: str, requested: Optional[str] = None):
        self.current = current
        self.requested = requested
        if requested is None:
            message = f"Order in status '{current}' cannot advance any further"
        else:
            message = f"Cannot move order from '{current}' to '{requested}'"
        super().__init__(message)


class StorageError(CafeError):
    """Raised when the persistence backend is unavailable or corrupt"""


class AuthenticationError(CafeError):
    """Raised when credentials are rejected"""
