"""
Database package for the campus cafe
Contains storage backends and repository classes
"""

from .connection import DatabaseConnection
from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage, SqliteStorage, create_storage
from .repository import MenuRepository, OrderRepository

__all__ = [
    'DatabaseConnection',
    'KeyValueStorage', 'MemoryStorage', 'JsonFileStorage', 'SqliteStorage', 'create_storage',
    'MenuRepository', 'OrderRepository'
]
