from __future__ import annotations

import json
from pathlib import Path

import structlog

from ..core.constants import (
    DEFAULT_CREDENTIALS_NAMESPACE,
    KEY_REMEMBER_ME,
    KEY_USER_EMAIL,
    KEY_USER_PASSWORD,
)
from .model import SavedCredentials
from .store import CredentialStore

logger = structlog.get_logger(__name__)


class JsonFileCredentialStore(CredentialStore):
    """Credential store backed by a JSON file.

    The file holds one object per namespace so several apps can share it:
    {"attendance_prefs": {"user_email": ..., "user_password": ..., "remember_me": true}}
    """

    def __init__(self, path: str | Path, *, namespace: str = DEFAULT_CREDENTIALS_NAMESPACE):
        self._path = Path(path)
        self._namespace = namespace

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("credentials_file_unreadable", path=str(self._path))
            return {}
        return data if isinstance(data, dict) else {}

    def _write_section(self, section: dict) -> None:
        data = self._read_all()
        data[self._namespace] = section
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def save(self, email: str, password: str) -> None:
        self._write_section({KEY_USER_EMAIL: email, KEY_USER_PASSWORD: password, KEY_REMEMBER_ME: True})

    def clear(self) -> None:
        section = dict(self._read_all().get(self._namespace) or {})
        section.pop(KEY_USER_EMAIL, None)
        section.pop(KEY_USER_PASSWORD, None)
        section[KEY_REMEMBER_ME] = False
        self._write_section(section)

    def load(self) -> SavedCredentials:
        section = self._read_all().get(self._namespace)
        if not isinstance(section, dict):
            return SavedCredentials()
        return SavedCredentials(
            email=str(section.get(KEY_USER_EMAIL) or ""),
            password=str(section.get(KEY_USER_PASSWORD) or ""),
            remember_me=bool(section.get(KEY_REMEMBER_ME, False)),
        )
