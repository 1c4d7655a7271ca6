"""
Helpers for building service result dictionaries
"""
from typing import Any, Dict

from errors import (
    AuthenticationError, CafeError, InvalidTransitionError, NotFoundError, ValidationError
)


def failure(error: str, error_type: str) -> Dict[str, Any]:
    return {
        "success": False,
        "error": error,
        "error_type": error_type
    }


def error_result(error: CafeError, fallback_message: str) -> Dict[str, Any]:
    # 오류 종류별 결과 생성 (저장소 오류의 내부 상세는 노출하지 않음)
    if isinstance(error, InvalidTransitionError):
        return failure(str(error), "invalid_transition")
    if isinstance(error, ValidationError):
        return failure(str(error), "validation")
    if isinstance(error, NotFoundError):
        return failure(f"{error.kind} not found", "not_found")
    if isinstance(error, AuthenticationError):
        return failure("Invalid credentials", "authentication")
    return failure(fallback_message, "storage")
