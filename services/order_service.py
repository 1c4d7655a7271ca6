"""
Order service - handles checkout and order status management
"""
from typing import Any, Dict, List, Union

from errors import CafeError, InvalidTransitionError, ValidationError
from logging_config import get_logger
from models.cart import CartItem
from models.order import Order, OrderLineItem, OrderStatus
from database.repository import OrderRepository
from .cart_service import CartService
from .results import error_result

log = get_logger(__name__)


def build_line_items(cart_items: List[CartItem]) -> List[OrderLineItem]:
    # 장바구니 항목을 주문 항목 스냅샷으로 변환
    return [OrderLineItem.from_menu_item(item.menu_item, item.quantity) for item in cart_items]


def parse_status(status: Union[str, OrderStatus]) -> OrderStatus:
    if isinstance(status, OrderStatus):
        return status
    try:
        return OrderStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown order status: {status}")


class OrderService:
    # 주문 관련 비즈니스 로직을 처리하는 서비스 클래스

    def __init__(self, order_repository: OrderRepository, cart_service: CartService,
                 enforce_status_lifecycle: bool = False):
        # OrderRepository와 CartService 인스턴스 주입
        self.order_repo = order_repository
        self.cart_service = cart_service
        self.enforce_status_lifecycle = enforce_status_lifecycle

    def place_order(self, session_id: str, customer_id: str, customer_name: str,
                    customer_contact: str) -> Dict[str, Any]:
        # 장바구니 내용을 바탕으로 최종 주문 처리
        try:
            # 이름과 연락처는 공백이 아닌 문자열이어야 함
            if not all(isinstance(value, str) and value.strip() for value in (customer_name, customer_contact)):
                raise ValidationError("Please enter your name and mobile number")

            cart_items = self.cart_service.get_cart(session_id)
            if not cart_items:
                raise ValidationError("Please add items to your cart first")

            line_items = build_line_items(cart_items)
            total = sum(line.subtotal for line in line_items)

            order = self.order_repo.create(
                customer_id, customer_name.strip(), customer_contact.strip(), line_items, total
            )

            # 주문 성공 후에만 장바구니 비우기
            self.cart_service.clear_cart(session_id)

            return {
                "success": True,
                "order": order.to_dict(),
                "message": "Your order has been placed successfully"
            }

        except CafeError as e:
            log.warning("Placing order for %s failed: %s", customer_id, e)
            return error_result(e, "Failed to place order")

    def list_orders(self) -> Dict[str, Any]:
        # 전체 주문 조회 (관리자용)
        try:
            orders = self.order_repo.list_all()
            return {
                "success": True,
                "orders": [order.to_dict() for order in orders],
                "total_found": len(orders)
            }

        except CafeError as e:
            log.warning("Listing orders failed: %s", e)
            return error_result(e, "Failed to load orders")

    def list_customer_orders(self, customer_id: str) -> Dict[str, Any]:
        # 특정 고객의 주문 내역 조회
        try:
            orders = self.order_repo.list_by_customer(customer_id)
            return {
                "success": True,
                "orders": [order.to_dict() for order in orders],
                "total_found": len(orders)
            }

        except CafeError as e:
            log.warning("Listing orders of %s failed: %s", customer_id, e)
            return error_result(e, "Failed to load orders")

    def get_order(self, order_id: str) -> Dict[str, Any]:
        # 주문 상세 정보 조회
        try:
            order = self.order_repo.get(order_id)
            return {
                "success": True,
                "order": order.to_dict()
            }

        except CafeError as e:
            log.warning("Loading order %s failed: %s", order_id, e)
            return error_result(e, "Failed to load order")

    def _change_status(self, order: Order, new_status: OrderStatus) -> Dict[str, Any]:
        updated = self.order_repo.update_status(order.id, new_status)
        return {
            "success": True,
            "order": updated.to_dict(),
            "message": f"Order {new_status.value}" if new_status.is_terminal
            else f"Order status changed to {new_status.value}"
        }

    def update_status(self, order_id: str, status: Union[str, OrderStatus]) -> Dict[str, Any]:
        # 주문 상태 직접 변경 (설정에 따라 전이 규칙 검사)
        try:
            new_status = parse_status(status)

            if self.enforce_status_lifecycle:
                # 상태 확인과 변경 사이에 다른 요청이 끼어들지 않도록 잠금 유지
                with self.order_repo.lock:
                    order = self.order_repo.get(order_id)
                    if not order.status.can_transition_to(new_status):
                        raise InvalidTransitionError(order.status.value, new_status.value)
                    return self._change_status(order, new_status)

            updated = self.order_repo.update_status(order_id, new_status)
            return {
                "success": True,
                "order": updated.to_dict(),
                "message": f"Order status changed to {new_status.value}"
            }

        except CafeError as e:
            log.warning("Updating status of order %s failed: %s", order_id, e)
            return error_result(e, "Failed to update order status")

    def advance_order(self, order_id: str) -> Dict[str, Any]:
        # 현재 상태의 다음 단계로 진행 (pending -> preparing -> ready -> completed)
        try:
            with self.order_repo.lock:
                order = self.order_repo.get(order_id)
                next_status = order.status.next_status()
                if next_status is None:
                    raise InvalidTransitionError(order.status.value)
                return self._change_status(order, next_status)

        except CafeError as e:
            log.warning("Advancing order %s failed: %s", order_id, e)
            return error_result(e, "Failed to update order status")

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        # 완료/취소되지 않은 주문 취소
        try:
            with self.order_repo.lock:
                order = self.order_repo.get(order_id)
                if order.status.is_terminal:
                    raise InvalidTransitionError(order.status.value, OrderStatus.CANCELLED.value)
                return self._change_status(order, OrderStatus.CANCELLED)

        except CafeError as e:
            log.warning("Cancelling order %s failed: %s", order_id, e)
            return error_result(e, "Failed to cancel order")

    def get_order_stats(self) -> Dict[str, Any]:
        # 상태별 주문 수 집계 (관리자 대시보드용)
        try:
            orders = self.order_repo.list_all()
            counts = {status.value: 0 for status in OrderStatus}
            for order in orders:
                counts[order.status.value] += 1

            return {
                "success": True,
                "stats": counts,
                "total_orders": len(orders)
            }

        except CafeError as e:
            log.warning("Computing order stats failed: %s", e)
            return error_result(e, "Failed to load order statistics")
