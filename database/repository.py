"""
Database repository classes

Both stores read the whole collection, modify it in memory and write it back
as one blob, so every operation either fully applies or leaves the stored
collection untouched. Each operation runs under the store's lock; stores that
share a storage instance should share one lock (see core.cafe).
"""
import json
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from errors import NotFoundError, StorageError, ValidationError
from logging_config import get_logger
from models.menu_item import MenuItem
from models.order import Order, OrderLineItem, OrderStatus
from .seed import default_menu_items
from .storage import KeyValueStorage

log = get_logger(__name__)


def utc_now() -> str:
    # ISO-8601 UTC 타임스탬프 (밀리초 단위)
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def new_id() -> str:
    return str(uuid.uuid4())


class _CollectionRepository:
    # 하나의 키에 JSON 배열로 저장되는 컬렉션의 공통 읽기/쓰기

    def __init__(self, storage: KeyValueStorage, key: str, lock=None):
        # KeyValueStorage 인스턴스 주입, 읽기-수정-쓰기 전체를 감싸는 잠금
        self.storage = storage
        self.key = key
        self.lock = lock or threading.RLock()

    def _default_records(self) -> List[Dict[str, Any]]:
        return []

    def _load_records(self) -> List[Dict[str, Any]]:
        raw = self.storage.get(self.key)

        # 최초 접근 시 기본 데이터로 초기화
        if raw is None:
            records = self._default_records()
            self._save_records(records)
            return records

        try:
            records = json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Corrupt data under key {self.key}: {e}") from e

        if not isinstance(records, list):
            raise StorageError(f"Expected a list under key {self.key}")
        return records

    def _save_records(self, records: List[Dict[str, Any]]):
        self.storage.set(self.key, json.dumps(records, ensure_ascii=False))


class MenuRepository(_CollectionRepository):
    # 메뉴(카탈로그) 데이터 접근 계층

    REQUIRED_FIELDS = ("name", "price")

    def __init__(self, storage: KeyValueStorage, key: str = "cafe_menu_items", lock=None):
        super().__init__(storage, key, lock)

    def _default_records(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in default_menu_items()]

    def _load_items(self) -> List[MenuItem]:
        try:
            return [MenuItem.from_dict(record) for record in self._load_records()]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Invalid menu record: {e}") from e

    def _save_items(self, items: List[MenuItem]):
        self._save_records([item.to_dict() for item in items])

    def _check_fields(self, fields: Dict[str, Any]):
        # 알 수 없는 필드명은 거부
        unknown = set(fields) - set(MenuItem.field_names())
        if unknown:
            raise ValidationError(f"Unknown menu item fields: {', '.join(sorted(unknown))}")

    def list_all(self) -> List[MenuItem]:
        # 전체 메뉴 조회 (삽입 순서 유지, 최초 접근 시 기본 메뉴 저장)
        with self.lock:
            return self._load_items()

    def get(self, item_id: str) -> MenuItem:
        # 메뉴 ID로 단일 항목 조회
        with self.lock:
            for item in self._load_items():
                if item.id == item_id:
                    return item
        raise NotFoundError("Menu item", item_id)

    def create(self, fields: Dict[str, Any]) -> MenuItem:
        # 새 메뉴 항목 생성 (ID는 항상 새로 발급)
        self._check_fields(fields)
        missing = [name for name in self.REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise ValidationError(f"Missing menu item fields: {', '.join(missing)}")

        with self.lock:
            items = self._load_items()
            existing_ids = {item.id for item in items}

            item_id = new_id()
            while item_id in existing_ids:
                item_id = new_id()

            record = dict(fields)
            record["id"] = item_id
            new_item = MenuItem.from_dict(record)

            items.append(new_item)
            self._save_items(items)

        log.info("Created menu item %s (%s)", new_item.id, new_item.name)
        return new_item

    def update(self, item_id: str, updates: Dict[str, Any]) -> MenuItem:
        # 전달된 필드만 기존 항목에 병합
        self._check_fields(updates)

        with self.lock:
            items = self._load_items()

            for index, item in enumerate(items):
                if item.id == item_id:
                    merged = item.to_dict()
                    merged.update({k: v for k, v in updates.items() if k != "id"})
                    items[index] = MenuItem.from_dict(merged)
                    self._save_items(items)
                    log.info("Updated menu item %s: %s", item_id, sorted(updates))
                    return items[index]

        raise NotFoundError("Menu item", item_id)

    def delete(self, item_id: str) -> None:
        # 항목 삭제 (없는 ID여도 오류 없음)
        with self.lock:
            items = self._load_items()
            remaining = [item for item in items if item.id != item_id]

            if len(remaining) != len(items):
                self._save_items(remaining)
                log.info("Deleted menu item %s", item_id)


class OrderRepository(_CollectionRepository):
    # 주문 데이터 접근 계층 (생성, 조회, 상태 변경)

    def __init__(self, storage: KeyValueStorage, key: str = "cafe_orders",
                 clock: Optional[Callable[[], str]] = None, lock=None):
        super().__init__(storage, key, lock)
        self.clock = clock or utc_now

    def _load_orders(self) -> List[Order]:
        try:
            return [Order.from_dict(record) for record in self._load_records()]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Invalid order record: {e}") from e

    def _save_orders(self, orders: List[Order]):
        self._save_records([order.to_dict() for order in orders])

    def list_all(self) -> List[Order]:
        # 전체 주문 조회 (생성 순서)
        with self.lock:
            return self._load_orders()

    def list_by_customer(self, customer_id: str) -> List[Order]:
        # 고객 ID가 정확히 일치하는 주문만 조회
        with self.lock:
            return [order for order in self._load_orders() if order.customer_id == customer_id]

    def get(self, order_id: str) -> Order:
        # 주문 ID로 단일 주문 조회
        with self.lock:
            for order in self._load_orders():
                if order.id == order_id:
                    return order
        raise NotFoundError("Order", order_id)

    def create(self, customer_id: str, customer_name: str, customer_contact: str,
               line_items: List[OrderLineItem], total: float) -> Order:
        # 새로운 주문 생성 (초기 상태는 pending)
        with self.lock:
            orders = self._load_orders()
            existing_ids = {order.id for order in orders}

            order_id = new_id()
            while order_id in existing_ids:
                order_id = new_id()

            now = self.clock()
            new_order = Order(
                id=order_id,
                customer_id=customer_id,
                customer_name=customer_name,
                customer_contact=customer_contact,
                items=list(line_items),
                total=total,
                status=OrderStatus.PENDING,
                created_at=now,
                updated_at=now
            )

            orders.append(new_order)
            self._save_orders(orders)

        log.info("Created order %s for customer %s (total %s)", order_id, customer_id, total)
        return new_order

    def update_status(self, order_id: str, new_status: OrderStatus) -> Order:
        # 주문 상태 덮어쓰기 (전이 규칙은 서비스 계층에서 처리)
        with self.lock:
            orders = self._load_orders()

            for order in orders:
                if order.id == order_id:
                    previous = order.status
                    order.status = new_status
                    order.updated_at = self.clock()
                    self._save_orders(orders)
                    log.info("Order %s status %s -> %s", order_id, previous.value, new_status.value)
                    return order

        raise NotFoundError("Order", order_id)
