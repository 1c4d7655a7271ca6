"""
Application settings loaded from environment variables (.env supported)
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    # "true", "1", "yes" 등을 True로 해석
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime configuration"""
    storage_backend: str = "sqlite"
    db_path: str = "cafe.db"
    json_path: str = "cafe_data.json"
    menu_key: str = "cafe_menu_items"
    orders_key: str = "cafe_orders"
    admin_username: str = "admin"
    admin_password: str = "CBIT23"
    enforce_status_lifecycle: bool = False
    secret_key: str = "your-secret-key-here"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment"""
        return cls(
            storage_backend=os.getenv("CAFE_STORAGE_BACKEND", "sqlite").lower(),
            db_path=os.getenv("CAFE_DB_PATH", "cafe.db"),
            json_path=os.getenv("CAFE_JSON_PATH", "cafe_data.json"),
            menu_key=os.getenv("CAFE_MENU_KEY", "cafe_menu_items"),
            orders_key=os.getenv("CAFE_ORDERS_KEY", "cafe_orders"),
            admin_username=os.getenv("CAFE_ADMIN_USERNAME", "admin"),
            admin_password=os.getenv("CAFE_ADMIN_PASSWORD", "CBIT23"),
            enforce_status_lifecycle=_env_bool("CAFE_ENFORCE_LIFECYCLE", False),
            secret_key=os.getenv("SECRET_KEY", "your-secret-key-here"),
            port=int(os.getenv("PORT", 5000)),
            debug=_env_bool("DEBUG", False),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None
        )
