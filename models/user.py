"""
User and credential data models
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum


class UserRole(Enum):
    STUDENT = "student"
    ADMIN = "admin"


@dataclass
class Credentials:
    """Login credentials submitted by the presentation layer"""
    role: UserRole
    password: str
    username: Optional[str] = None
    roll_number: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Credentials":
        # 문자열이 아닌 값은 ValueError (로그인 실패로 처리됨)
        for field_name in ("password", "username", "roll_number"):
            value = data.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string")
        return cls(
            role=UserRole(data.get("role", UserRole.STUDENT.value)),
            password=data.get("password") or "",
            username=data.get("username"),
            roll_number=data.get("roll_number")
        )


@dataclass
class Principal:
    """Authenticated user"""
    id: str
    name: str
    role: UserRole
    roll_number: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "roll_number": self.roll_number
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Principal":
        return cls(
            id=data["id"],
            name=data["name"],
            role=UserRole(data["role"]),
            roll_number=data.get("roll_number")
        )
