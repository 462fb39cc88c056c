"""Shared field conversions for API schemas"""

import json
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

# Wire field names are camelCase (companyName, startDate, ...)
CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


def decode_equipment(value: Optional[str]) -> List[str]:
    """
    Decode the stored/wire equipment string into a list of names.

    Raises:
        ValueError: If the value is not a JSON array of strings
    """
    if not value:
        return []
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"equipment must be a JSON array: {e}") from e
    if not isinstance(decoded, list) or not all(isinstance(item, str) for item in decoded):
        raise ValueError("equipment must be a JSON array of strings")
    return decoded


def encode_equipment(names: List[str]) -> str:
    """Encode a list of equipment names into its wire/stored form"""
    return json.dumps(list(names), ensure_ascii=False)


def normalize_equipment(value: Any) -> str:
    """Accept a JSON string or a list and return the canonical JSON string"""
    if value is None or value == "":
        return "[]"
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise ValueError("equipment must contain only strings")
        return encode_equipment(list(value))
    if isinstance(value, str):
        return encode_equipment(decode_equipment(value))
    raise ValueError("equipment must be a JSON array string or a list")


def parse_optional_date(value: Any) -> Optional[date]:
    """
    Parse a wire date. Empty or missing values become None and a full
    ISO-8601 datetime string is truncated to its date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if "T" in value:
            value = value.split("T", 1)[0]
        return date.fromisoformat(value)
    raise ValueError("date must be an ISO-8601 string")
