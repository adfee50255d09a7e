import json
import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


def parse_json_list(value: Any, field: str = "field", record_id: Any = None) -> List[Any]:
    """
    Decode a JSON-encoded list column. Anything unparseable or not a list
    becomes [] so one bad record never fails a whole result set.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    if not isinstance(value, str) or not value.strip():
        return []

    try:
        parsed = json.loads(value)
    except ValueError as e:
        logger.warning(f"Malformed {field} on record {record_id}: {e}")
        return []

    if not isinstance(parsed, list):
        logger.warning(f"Expected a list for {field} on record {record_id}")
        return []
    return parsed


def parse_list_fields(record: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    parsed = dict(record)
    for field in fields:
        parsed[field] = parse_json_list(record.get(field), field, record.get("id"))
    return parsed
