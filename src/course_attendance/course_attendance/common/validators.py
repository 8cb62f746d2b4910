from __future__ import annotations

from ..core.constants import MSG_FILL_ALL_FIELDS
from ..core.exceptions import ValidationError


def require_all_filled(*values: str | None) -> None:
    """Reject the request when any required field is empty."""
    for value in values:
        if not value:
            raise ValidationError(MSG_FILL_ALL_FIELDS)
