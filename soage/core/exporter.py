"""Export utilities for lookup results."""

import json
from pathlib import Path

from soage.models.result import LookupResult


def to_dict(result: LookupResult) -> dict:
    """
    Convert LookupResult to its API response payload.

    Args:
        result: LookupResult to convert

    Returns:
        The single profile dict, or {"users": [...], "note": ...} when several
        users matched
    """
    if result.is_multiple:
        return {
            "users": [u.model_dump(mode="json") for u in result.users],
            "note": result.note,
        }
    return result.profile.model_dump(mode="json")


def to_json(result: LookupResult, indent: int = 2) -> str:
    """
    Convert LookupResult to a JSON response string.

    Args:
        result: LookupResult to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return json.dumps(to_dict(result), indent=indent, ensure_ascii=False)


def save_json(
    result: LookupResult,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a LookupResult payload to a JSON file.

    Args:
        result: LookupResult to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(result, indent=indent), encoding="utf-8")
    return path
