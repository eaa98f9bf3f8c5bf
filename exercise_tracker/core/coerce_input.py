"""Input Coercion — turns raw form/JSON/query values into typed domain values.

Invariants:
    - Pure functions: no IO, no clock reads (callers pass `today`)
    - Required-field failures raise FieldValidationError naming the field
    - Malformed user ids raise ResourceNotFoundError (an id that cannot exist is absent)
    - Filter values (from/to/limit) never raise: unusable values come back as None

Design Decisions:
    - Form bodies deliver every value as a string: duration accepts "30", 30 and 30.0,
      rejects booleans, fractions and negatives (ADR: explicit coercion, no NaN propagation)
    - Dates accept yyyy-mm-dd or an ISO-8601 datetime whose date part is kept
    - Lenient filters: clients historically sent arbitrary from/to/limit strings
"""

from datetime import date, datetime
from uuid import UUID

from exercise_tracker.core.domain_types import LogQuery, UserId
from exercise_tracker.core.errors import FieldValidationError, ResourceNotFoundError

USERNAME_MAX_LENGTH = 255
MAX_DURATION = 2_147_483_647  # 32-bit INTEGER column


def parse_user_id(raw: str) -> UserId:
    """Parse a path id into a UserId; malformed ids are reported as not found."""
    try:
        return UserId(UUID(str(raw)))
    except ValueError:
        raise ResourceNotFoundError("User", str(raw))


def coerce_username(raw: object) -> str:
    username = _require_text(raw, "username")
    if len(username) > USERNAME_MAX_LENGTH:
        raise FieldValidationError(
            f"Username must be at most {USERNAME_MAX_LENGTH} characters", "username",
        )
    return username


def coerce_description(raw: object) -> str:
    return _require_text(raw, "description")


def coerce_duration(raw: object) -> int:
    """Coerce duration to whole non-negative minutes."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise FieldValidationError("Duration is required", "duration")
    value = _to_int(raw)
    if value is None or value < 0 or value > MAX_DURATION:
        raise FieldValidationError(
            "Duration must be a non-negative integer", "duration",
        )
    return value


def coerce_exercise_date(raw: object, today: date) -> date:
    """Resolve the exercise date: parsed when supplied, `today` when omitted."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return today
    parsed = parse_date(raw) if isinstance(raw, str) else None
    if parsed is None:
        raise FieldValidationError("Invalid date", "date")
    return parsed


def parse_date(raw: str) -> date | None:
    """Parse yyyy-mm-dd or ISO-8601 datetime text. Returns None when unparseable."""
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_filter_date(raw: str | None) -> date | None:
    """Log filter bound: parsed date, or None when absent or unparseable."""
    if raw is None or not raw.strip():
        return None
    return parse_date(raw)


def parse_limit(raw: object) -> int | None:
    """Positive integer cap, or None for absent/non-numeric/non-positive values."""
    if raw is None or isinstance(raw, bool):
        return None
    value = _to_int(raw)
    if value is None or value <= 0:
        return None
    return value


def build_log_query(
    user_id: UserId,
    raw_from: str | None = None,
    raw_to: str | None = None,
    raw_limit: str | None = None,
) -> tuple[LogQuery, list[str]]:
    """Build the log filter. Returns (query, names of supplied-but-ignored params)."""
    ignored: list[str] = []
    date_from = parse_filter_date(raw_from)
    if date_from is None and _supplied(raw_from):
        ignored.append("from")
    date_to = parse_filter_date(raw_to)
    if date_to is None and _supplied(raw_to):
        ignored.append("to")
    limit = parse_limit(raw_limit)
    if limit is None and _supplied(raw_limit):
        ignored.append("limit")
    query = LogQuery(
        user_id=user_id, date_from=date_from, date_to=date_to, limit=limit,
    )
    return query, ignored


# ─── Helpers ────────────────────────────────────────────────────

def _require_text(raw: object, field: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise FieldValidationError(f"{field.capitalize()} is required", field)
    return raw.strip()


def _to_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _supplied(raw: str | None) -> bool:
    return raw is not None and bool(raw.strip())
