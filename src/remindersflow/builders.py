# Request building — outbound request descriptors and field normalization.
# Created: 2026-03-02

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from urllib.parse import quote

from remindersflow.errors import MissingRequiredFieldError

PRIORITY_VALUES: dict[str, int] = {"none": 0, "low": 1, "medium": 5, "high": 9}

_UUID_RE = re.compile(
    r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$"
)
_PATH_PARAM_RE = re.compile(r"\{(\w+)\}")


@dataclass
class OperationRequest:
    """One outbound call to the Reminders API.

    ``url_template`` holds ``{name}`` placeholders that are filled from
    ``path_params`` with every character percent-encoded, so list names such
    as ``"Work/Home"`` stay inside a single path segment.
    """

    method: str
    url_template: str
    path_params: dict[str, str] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None

    @property
    def path(self) -> str:
        def substitute(match: re.Match[str]) -> str:
            return quote(str(self.path_params[match.group(1)]), safe="")

        return _PATH_PARAM_RE.sub(substitute, self.url_template)


# ---------------------------------------------------------------------------
# Field normalization
# ---------------------------------------------------------------------------


def extract_list_identifier(value: Any) -> str:
    """Collapse a list selector into the plain name/UUID string.

    Accepts ``"Shopping"``, ``{"mode": "list", "value": "Shopping"}`` or
    ``{"name": "Shopping"}``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return value.get("value") or value.get("name") or value.get("uuid") or ""
    return ""


def map_priority(value: Any) -> int | None:
    """Priority for a write body; ``None`` means leave the field out."""
    if value is None or value == "" or value == "none":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in PRIORITY_VALUES:
            return PRIORITY_VALUES[word] or None
        if word.isdigit():
            return int(word)
    return value


def priority_filter_value(value: Any) -> Any:
    """Priority for a search filter, where ``none`` is a real value (0)."""
    if isinstance(value, str) and value.strip().lower() in PRIORITY_VALUES:
        return PRIORITY_VALUES[value.strip().lower()]
    return value


def split_list(value: Any) -> list[str]:
    """Normalize ``"Work, Personal"`` or ``["Work", "Personal"]`` to a trimmed list."""
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, Iterable):
        items = value
    else:
        items = [value]
    return [str(item).strip() for item in items if str(item).strip()]


def split_int_list(value: Any) -> list[int]:
    """Like ``split_list`` but for numbers; a bare number becomes a one-item list."""
    if isinstance(value, bool):
        return []
    if isinstance(value, int):
        return [value]
    return [int(item) for item in split_list(value)]


def parse_bool(value: Any, default: bool = False) -> bool:
    """Read a flag that may arrive as a JSON boolean or as ``"true"``/``"false"`` text."""
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def format_bool(value: Any) -> str:
    """Query-string booleans are the literal strings ``true``/``false``."""
    return "true" if parse_bool(value) else "false"


def normalize_date(value: Any) -> str | None:
    """Pass ISO strings through; render ``date``/``datetime`` objects as ISO-8601."""
    if value is None or value == "":
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(_UUID_RE.match(value))


def sparse(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is ``None`` or an empty string."""
    return {k: v for k, v in fields.items() if v is not None and v != ""}


def query_params(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Sparse query dict with booleans rendered as ``true``/``false``."""
    return {k: format_bool(v) if isinstance(v, bool) else v for k, v in sparse(fields).items()}


def require(value: Any, field_name: str, operation: str) -> Any:
    if value is None or value == "" or value == {} or value == []:
        raise MissingRequiredFieldError(field_name, operation)
    return value
