"""
Main CampusCafe class - orchestrates all services
"""
import threading
from typing import Any, Dict, Optional, Union

from config import Settings
from database.storage import KeyValueStorage, create_storage
from database.repository import MenuRepository, OrderRepository
from models.order import OrderStatus
from models.user import Credentials
from services.menu_service import MenuService
from services.cart_service import CartService
from services.order_service import OrderService
from services.auth_service import AuthService, CredentialVerifier, StaticCredentialVerifier


class CampusCafe:
    # 메인 카페 클래스 - 모든 서비스를 조율하는 중앙 관리자

    def __init__(self, settings: Optional[Settings] = None,
                 storage: Optional[KeyValueStorage] = None,
                 verifier: Optional[CredentialVerifier] = None):
        self.settings = settings or Settings.from_env()

        # 저장소 초기화 (주입되지 않으면 설정에 따라 생성)
        self.storage = storage or create_storage(
            self.settings.storage_backend, self.settings.db_path, self.settings.json_path
        )

        # 리포지토리 레이어 초기화 (데이터 접근 계층)
        # 두 저장소는 같은 storage를 쓰므로 하나의 잠금을 공유
        self.lock = threading.RLock()
        self.menu_repo = MenuRepository(self.storage, self.settings.menu_key, lock=self.lock)
        self.order_repo = OrderRepository(self.storage, self.settings.orders_key, lock=self.lock)

        # 서비스 레이어 초기화 (비즈니스 로직 계층)
        self.menu_service = MenuService(self.menu_repo)
        self.cart_service = CartService(self.menu_service)
        self.order_service = OrderService(
            self.order_repo, self.cart_service, self.settings.enforce_status_lifecycle
        )
        self.auth_service = AuthService(verifier or StaticCredentialVerifier(
            self.settings.admin_username, self.settings.admin_password
        ))

    # === 인증 ===
    def login(self, credentials: Union[Credentials, Dict[str, Any]]) -> Dict[str, Any]:
        return self.auth_service.login(credentials)

    # === 메뉴 관련 메서드들 ===
    def list_menu(self, available_only: bool = False) -> Dict[str, Any]:
        return self.menu_service.list_menu(available_only)

    def add_menu_item(self, name: str, price: Any, description: str = "",
                      category: str = "coffee", available: bool = True,
                      image: Optional[str] = None) -> Dict[str, Any]:
        return self.menu_service.add_menu_item(name, price, description, category, available, image)

    def update_menu_item(self, item_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self.menu_service.update_menu_item(item_id, updates)

    def toggle_availability(self, item_id: str) -> Dict[str, Any]:
        return self.menu_service.toggle_availability(item_id)

    def delete_menu_item(self, item_id: str) -> Dict[str, Any]:
        return self.menu_service.delete_menu_item(item_id)

    # === 장바구니 관련 메서드들 ===
    def add_to_cart(self, session_id: str, menu_item_id: str, quantity: int = 1) -> Dict[str, Any]:
        return self.cart_service.add_to_cart(session_id, menu_item_id, quantity)

    def update_cart_quantity(self, session_id: str, menu_item_id: str, quantity: int) -> Dict[str, Any]:
        return self.cart_service.update_quantity(session_id, menu_item_id, quantity)

    def remove_from_cart(self, session_id: str, menu_item_id: str) -> Dict[str, Any]:
        return self.cart_service.remove_item(session_id, menu_item_id)

    def get_cart_details(self, session_id: str) -> Dict[str, Any]:
        return self.cart_service.get_cart_details(session_id)

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        return self.cart_service.clear_cart(session_id)

    # === 주문 관련 메서드들 ===
    def place_order(self, session_id: str, customer_id: str, customer_name: str,
                    customer_contact: str) -> Dict[str, Any]:
        return self.order_service.place_order(session_id, customer_id, customer_name, customer_contact)

    def list_orders(self) -> Dict[str, Any]:
        return self.order_service.list_orders()

    def list_customer_orders(self, customer_id: str) -> Dict[str, Any]:
        return self.order_service.list_customer_orders(customer_id)

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.get_order(order_id)

    def update_order_status(self, order_id: str, status: Union[str, OrderStatus]) -> Dict[str, Any]:
        return self.order_service.update_status(order_id, status)

    def advance_order(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.advance_order(order_id)

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.cancel_order(order_id)

    def get_order_stats(self) -> Dict[str, Any]:
        return self.order_service.get_order_stats()
