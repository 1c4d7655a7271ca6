"""
Key-value persistence backends

Every store keeps its whole collection as one JSON text blob under a single
key. Backends only need get/set of that text.
"""
import json
import os
import sqlite3
import tempfile
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from errors import StorageError
from logging_config import get_logger
from .connection import DatabaseConnection

log = get_logger(__name__)


class KeyValueStorage(ABC):
    # 블롭 단위 읽기/쓰기 인터페이스

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None if nothing was stored"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the blob stored under key"""


class MemoryStorage(KeyValueStorage):
    # 테스트용 인메모리 저장소

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage(KeyValueStorage):
    # 하나의 JSON 파일에 모든 키를 저장 (키 -> 블롭 문자열)

    def __init__(self, file_path: str):
        self.file_path = file_path
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        # 파일이 없으면 빈 저장소로 간주
        if not os.path.exists(self.file_path):
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.file_path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self.file_path}")
        return data

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value

            # 임시 파일에 쓴 뒤 교체하여 부분 쓰기를 방지
            directory = os.path.dirname(os.path.abspath(self.file_path))
            tmp_path = None
            try:
                fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                os.replace(tmp_path, self.file_path)
            except (OSError, TypeError, ValueError) as e:
                # 실패한 임시 파일은 남기지 않음
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise StorageError(f"Cannot write {self.file_path}: {e}") from e


class SqliteStorage(KeyValueStorage):
    # SQLite KV_Store 테이블을 사용하는 저장소

    def __init__(self, db_connection: DatabaseConnection):
        # DatabaseConnection 인스턴스 주입
        self.db = db_connection

    def get(self, key: str) -> Optional[str]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            try:
                cursor.execute("SELECT store_value FROM KV_Store WHERE store_key = ?", (key,))
                result = cursor.fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Cannot read key {key}: {e}") from e

            return result[0] if result else None

    def set(self, key: str, value: str) -> None:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            try:
                # 기존 키가 있으면 덮어쓰기 (upsert)
                cursor.execute("""
                INSERT INTO KV_Store (store_key, store_value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(store_key) DO UPDATE SET
                    store_value = excluded.store_value,
                    updated_at = excluded.updated_at
                """, (key, value))

                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise StorageError(f"Cannot write key {key}: {e}") from e


def create_storage(backend: str, db_path: str = "cafe.db",
                   json_path: str = "cafe_data.json") -> KeyValueStorage:
    # 설정값에 따라 저장소 구현 선택
    if backend == "memory":
        storage = MemoryStorage()
    elif backend == "json":
        storage = JsonFileStorage(json_path)
    elif backend == "sqlite":
        storage = SqliteStorage(DatabaseConnection(db_path))
    else:
        raise ValueError(f"Unknown storage backend: {backend}")

    log.info("Using %s storage backend", backend)
    return storage
