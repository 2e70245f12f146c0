import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_logger = logging.getLogger("audit")


def _email_hash(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    h = hashlib.sha256(email.lower().encode()).hexdigest()
    return h[:12]


def _jsonable(value: Any) -> Any:
    # UUIDs, Decimals, dates and enums are written as their string form
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(getattr(value, "value", value))


def audit(event: str, *, email: Optional[str] = None, user_id: Any = None, **fields: Any) -> None:
    """Emit one JSON line on the `audit` logger.

    Never include passwords or tokens. Email is hashed to limit PII exposure.
    """
    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
    }
    if email:
        payload["email_hash"] = _email_hash(email)
    if user_id:
        payload["user_id"] = str(user_id)
    for key, value in fields.items():
        payload[key] = _jsonable(value)
    _logger.info(json.dumps(payload, ensure_ascii=False))
