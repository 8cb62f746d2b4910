from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class UserProfile:
    """Profile document stored by the remote service, keyed by account id."""

    account_id: str
    email: str
    name: str
    role: str
    student_number: str = ""
    department: str = ""

    @classmethod
    def from_document(cls, account_id: str, doc: Mapping[str, Any]) -> "UserProfile":
        return cls(
            account_id=account_id,
            email=str(doc.get("email") or ""),
            name=str(doc.get("name") or ""),
            role=str(doc.get("role") or ""),
            student_number=str(doc.get("student_number") or ""),
            department=str(doc.get("department") or ""),
        )

    def to_document(self) -> dict[str, str]:
        return {
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "student_number": self.student_number,
            "department": self.department,
        }
