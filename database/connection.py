"""
Database connection management
"""
import sqlite3
from contextlib import contextmanager
from typing import Generator

from errors import StorageError


class DatabaseConnection:
    # SQLite 데이터베이스 연결을 관리하는 클래스

    def __init__(self, db_path: str = "cafe.db"):
        # 데이터베이스 파일 경로 설정 및 초기화
        self.db_path = db_path
        self.init_database()

    def init_database(self):
        # 컬렉션 블롭을 저장할 키-값 테이블 생성
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
            CREATE TABLE IF NOT EXISTS KV_Store (
                store_key TEXT PRIMARY KEY,
                store_value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # 컨텍스트 매니저를 사용하여 데이터베이스 연결 자동 관리
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        try:
            yield conn
        finally:
            conn.close()
