"""
Menu service - handles catalog browsing and admin menu management
"""
from typing import Any, Dict, Optional

from errors import CafeError, ValidationError
from logging_config import get_logger
from models.menu_item import MenuItem, MenuCategory, DEFAULT_IMAGE
from database.repository import MenuRepository
from .results import error_result

log = get_logger(__name__)


def _parse_price(value: Any) -> float:
    # 폼 입력(문자열 포함)을 가격으로 변환
    if value is None or (isinstance(value, str) and not value.strip()) or isinstance(value, bool):
        raise ValidationError("Please fill in all required fields")
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid price: {value}")
    if price < 0:
        raise ValidationError("Price cannot be negative")
    return price


def _check_category(category: str) -> str:
    if category not in MenuCategory.values():
        raise ValidationError(
            f"Invalid category '{category}'. Choose one of: {', '.join(MenuCategory.values())}"
        )
    return category


TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def _parse_text(value: Any, message: str, allow_empty: bool = False) -> str:
    # JSON 입력은 문자열만 허용 (숫자 등은 검증 오류)
    if value is None and allow_empty:
        return ""
    if not isinstance(value, str):
        raise ValidationError(message)
    value = value.strip()
    if not value and not allow_empty:
        raise ValidationError(message)
    return value


def _parse_bool(value: Any) -> bool:
    # 실제 bool 또는 "true"/"false" 형태의 문자열만 허용
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise ValidationError(f"Invalid availability flag: {value!r}")


class MenuService:
    # 메뉴 관련 비즈니스 로직을 처리하는 서비스 클래스

    def __init__(self, menu_repository: MenuRepository):
        # MenuRepository 인스턴스 주입
        self.menu_repo = menu_repository

    def get_menu_item(self, item_id: str) -> MenuItem:
        # 메뉴 ID로 항목 조회 (없으면 NotFoundError)
        return self.menu_repo.get(item_id)

    def list_menu(self, available_only: bool = False) -> Dict[str, Any]:
        # 메뉴 목록 조회 (학생 화면에서는 판매 가능한 항목만)
        try:
            items = self.menu_repo.list_all()
            if available_only:
                items = [item for item in items if item.available]

            return {
                "success": True,
                "items": [item.to_dict() for item in items],
                "total_found": len(items)
            }

        except CafeError as e:
            log.warning("Listing menu failed: %s", e)
            result = error_result(e, "Failed to load menu")
            result.update({"items": [], "total_found": 0})
            return result

    def add_menu_item(self, name: str, price: Any, description: str = "",
                      category: str = MenuCategory.COFFEE.value, available: bool = True,
                      image: Optional[str] = None) -> Dict[str, Any]:
        # 새 메뉴 항목 추가 (이름과 가격은 필수)
        try:
            item = self.menu_repo.create({
                "name": _parse_text(name, "Please fill in all required fields"),
                "description": _parse_text(description, "Description must be text", allow_empty=True),
                "price": _parse_price(price),
                "category": _check_category(category),
                "image": _parse_text(image, "Image must be text", allow_empty=True) or DEFAULT_IMAGE,
                "available": _parse_bool(available)
            })

            return {
                "success": True,
                "item": item.to_dict(),
                "message": f"{item.name} has been added to the menu"
            }

        except CafeError as e:
            log.warning("Adding menu item failed: %s", e)
            return error_result(e, "Failed to add menu item")

    def update_menu_item(self, item_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        # 메뉴 항목 부분 수정
        try:
            updates = dict(updates)
            if "name" in updates:
                updates["name"] = _parse_text(updates["name"], "Name cannot be empty")
            if "description" in updates:
                updates["description"] = _parse_text(
                    updates["description"], "Description must be text", allow_empty=True
                )
            if "image" in updates:
                updates["image"] = _parse_text(updates["image"], "Image must be text")
            if "price" in updates:
                updates["price"] = _parse_price(updates["price"])
            if "category" in updates:
                _check_category(updates["category"])
            if "available" in updates:
                updates["available"] = _parse_bool(updates["available"])

            item = self.menu_repo.update(item_id, updates)

            return {
                "success": True,
                "item": item.to_dict(),
                "message": f"{item.name} has been updated"
            }

        except CafeError as e:
            log.warning("Updating menu item %s failed: %s", item_id, e)
            return error_result(e, "Failed to update menu item")

    def toggle_availability(self, item_id: str) -> Dict[str, Any]:
        # 판매 가능 여부 전환 (조회와 저장을 하나의 잠금 안에서 처리)
        try:
            with self.menu_repo.lock:
                item = self.menu_repo.get(item_id)
                updated = self.menu_repo.update(item_id, {"available": not item.available})

            state = "available" if updated.available else "unavailable"
            return {
                "success": True,
                "item": updated.to_dict(),
                "message": f"{updated.name} is now {state}"
            }

        except CafeError as e:
            log.warning("Toggling availability of %s failed: %s", item_id, e)
            return error_result(e, "Failed to update item availability")

    def delete_menu_item(self, item_id: str) -> Dict[str, Any]:
        # 메뉴 항목 삭제 (기존 주문의 스냅샷에는 영향 없음)
        try:
            self.menu_repo.delete(item_id)
            return {
                "success": True,
                "message": "Menu item has been removed"
            }

        except CafeError as e:
            log.warning("Deleting menu item %s failed: %s", item_id, e)
            return error_result(e, "Failed to delete menu item")
