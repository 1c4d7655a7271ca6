"""
Cart service - handles per-session cart operations

Carts live in memory only and are never persisted; each line holds a copy of
the menu item taken when it was first added.
"""
from typing import Any, Dict, List

from errors import CafeError, NotFoundError, ValidationError
from logging_config import get_logger
from models.cart import CartItem, CartSummary
from .menu_service import MenuService
from .results import error_result

log = get_logger(__name__)


class CartService:
    # 장바구니 관련 비즈니스 로직을 처리하는 서비스 클래스

    def __init__(self, menu_service: MenuService):
        # MenuService 인스턴스 주입, 세션별 장바구니 초기화
        self.menu_service = menu_service
        self._carts: Dict[str, List[CartItem]] = {}

    def get_cart(self, session_id: str) -> List[CartItem]:
        # 세션의 장바구니 항목 목록 (복사본)
        return list(self._carts.get(session_id, []))

    def summarize(self, cart_items: List[CartItem]) -> CartSummary:
        # 총 수량과 총액 계산
        return CartSummary(
            total_items=len(cart_items),
            total_quantity=sum(item.quantity for item in cart_items),
            total_amount=sum(item.line_total for item in cart_items)
        )

    def _find_line(self, session_id: str, menu_item_id: str) -> CartItem:
        for line in self._carts.get(session_id, []):
            if line.menu_item.id == menu_item_id:
                return line
        raise NotFoundError("Cart item", menu_item_id)

    def add_to_cart(self, session_id: str, menu_item_id: str, quantity: int = 1) -> Dict[str, Any]:
        # 장바구니에 상품 추가 (이미 있으면 수량 증가)
        try:
            if quantity < 1:
                raise ValidationError("Quantity must be at least 1")

            menu_item = self.menu_service.get_menu_item(menu_item_id)
            if not menu_item.available:
                raise ValidationError(f"{menu_item.name} is currently unavailable")

            cart = self._carts.setdefault(session_id, [])
            for line in cart:
                if line.menu_item.id == menu_item_id:
                    line.quantity += quantity
                    break
            else:
                line = CartItem(menu_item=menu_item.copy(), quantity=quantity)
                cart.append(line)

            return {
                "success": True,
                "cart_item": line.to_dict(),
                "summary": self.summarize(cart).to_dict(),
                "message": f"{menu_item.name} added to cart"
            }

        except CafeError as e:
            log.warning("Adding %s to cart failed: %s", menu_item_id, e)
            return error_result(e, "Failed to add item to cart")

    def update_quantity(self, session_id: str, menu_item_id: str, quantity: int) -> Dict[str, Any]:
        # 수량 변경 (0 이하이면 장바구니에서 제거)
        try:
            line = self._find_line(session_id, menu_item_id)

            if quantity <= 0:
                self._carts[session_id].remove(line)
                message = f"{line.menu_item.name} removed from cart"
            else:
                line.quantity = quantity
                message = f"{line.menu_item.name} quantity set to {quantity}"

            return {
                "success": True,
                "summary": self.summarize(self.get_cart(session_id)).to_dict(),
                "message": message
            }

        except CafeError as e:
            log.warning("Updating cart item %s failed: %s", menu_item_id, e)
            return error_result(e, "Failed to update cart")

    def remove_item(self, session_id: str, menu_item_id: str) -> Dict[str, Any]:
        # 특정 상품을 장바구니에서 제거
        return self.update_quantity(session_id, menu_item_id, 0)

    def get_cart_details(self, session_id: str) -> Dict[str, Any]:
        # 세션의 현재 장바구니 내용과 총액 정보 조회
        cart_items = self.get_cart(session_id)
        message = f"Your cart has {len(cart_items)} item(s)" if cart_items else "Your cart is empty"

        return {
            "success": True,
            "cart_items": [item.to_dict() for item in cart_items],
            "summary": self.summarize(cart_items).to_dict(),
            "message": message
        }

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        # 장바구니 전체 비우기
        removed = self._carts.pop(session_id, [])
        return {
            "success": True,
            "removed_items": len(removed),
            "message": "Cart cleared"
        }
