"""
Auth service - pluggable credential verification

The default verifier accepts one fixed admin account and any student roll
number with a non-empty password. Swap in another CredentialVerifier for real
authentication; nothing else depends on how credentials are checked.
"""
import hmac
from abc import ABC, abstractmethod
from typing import Any, Dict, Union

from errors import AuthenticationError, CafeError
from logging_config import get_logger
from models.user import Credentials, Principal, UserRole
from .results import error_result

log = get_logger(__name__)


class CredentialVerifier(ABC):
    # 자격 증명 검증 인터페이스

    @abstractmethod
    def verify(self, credentials: Credentials) -> Principal:
        """Return the authenticated principal or raise AuthenticationError"""


class StaticCredentialVerifier(CredentialVerifier):
    # 고정 관리자 계정 + 학번/비밀번호 형식만 확인하는 기본 구현

    def __init__(self, admin_username: str = "admin", admin_password: str = "CBIT23"):
        self.admin_username = admin_username
        self.admin_password = admin_password

    def verify(self, credentials: Credentials) -> Principal:
        fields = (credentials.username, credentials.password, credentials.roll_number)
        if any(value is not None and not isinstance(value, str) for value in fields):
            raise AuthenticationError("Invalid credentials")

        if credentials.role is UserRole.ADMIN:
            username_ok = hmac.compare_digest(credentials.username or "", self.admin_username)
            password_ok = hmac.compare_digest(credentials.password or "", self.admin_password)
            if username_ok and password_ok:
                return Principal(id="admin", name="Admin", role=UserRole.ADMIN)
            raise AuthenticationError("Invalid admin credentials")

        roll_number = (credentials.roll_number or "").strip()
        if roll_number and credentials.password:
            return Principal(
                id=roll_number,
                name=f"Student {roll_number}",
                role=UserRole.STUDENT,
                roll_number=roll_number
            )
        raise AuthenticationError("Roll number and password are required")


class AuthService:
    # 로그인 처리 서비스

    def __init__(self, verifier: CredentialVerifier):
        self.verifier = verifier

    def login(self, credentials: Union[Credentials, Dict[str, Any]]) -> Dict[str, Any]:
        # 자격 증명을 검증하고 사용자 정보 반환
        try:
            if isinstance(credentials, dict):
                credentials = Credentials.from_dict(credentials)
        except ValueError as e:
            log.warning("Malformed login request: %s", e)
            return error_result(AuthenticationError("Invalid credentials"), "Login failed")

        try:
            principal = self.verifier.verify(credentials)
            log.info("User %s logged in as %s", principal.id, principal.role.value)
            return {
                "success": True,
                "user": principal.to_dict(),
                "message": f"Welcome, {principal.name}"
            }

        except CafeError as e:
            log.warning("Login rejected for role %s: %s", credentials.role.value, e)
            return error_result(e, "Login failed")
