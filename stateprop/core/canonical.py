"""
Canonical serialization for diagnostic reports.

All failure reports render subjects and action sequences through these
functions so the same value always produces the same text. serialize()
never raises: anything JSON cannot express falls back to repr().
"""

import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested structures to canonical form.

    Rules:
    - dict keys sorted by their string form
    - tuples converted to lists
    - sets converted to lists sorted by canonical text
    - recursive normalization

    Objects outside these containers are returned untouched and rendered
    later by the JSON fallback.
    """
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((canonicalize(x) for x in obj), key=_sort_key)
    return obj


def _sort_key(item: Any) -> str:
    return json.dumps(item, sort_keys=True, default=repr)


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string.

    Guarantees:
    - sort_keys=True (secondary safety)
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - canonical preprocessing via canonicalize()
    - unknown objects rendered with repr()

    Raises:
        ValueError: On circular references
    """
    canon = canonicalize(obj)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=repr)


def serialize(value: Any) -> str:
    """
    Render a value for a failure report.

    Same output as canonical_json_str when the value is serializable,
    repr(value) otherwise.
    """
    try:
        return canonical_json_str(value)
    except (TypeError, ValueError, RecursionError):
        return repr(value)
