"""
Muscle group normalization.

exercises.muscle_groups has been stored in several shapes over time: a
Postgres text[] (returned by PostgREST as a list), a JSON-encoded array in a
text column, a Postgres array literal, or a bare label. Snapshots only ever
carry the normalized primary muscle group.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

UNKNOWN_MUSCLE_GROUP = "NA"


def _first_label(values: Any) -> str:
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip().lower()
    return UNKNOWN_MUSCLE_GROUP


def normalize_muscle_group(raw: Any) -> str:
    """
    Normalize a raw muscle_groups value to a lowercase primary label.

    Args:
        raw: Value as read from the exercises table

    Returns:
        The first muscle group, lowercased, or "NA" when absent or unparseable

    Examples:
        >>> normalize_muscle_group(["Chest", "Triceps"])
        'chest'
        >>> normalize_muscle_group('["Back"]')
        'back'
        >>> normalize_muscle_group("{Shoulders,Arms}")
        'shoulders'
        >>> normalize_muscle_group(None)
        'NA'
    """
    if raw is None:
        return UNKNOWN_MUSCLE_GROUP

    if isinstance(raw, (list, tuple)):
        return _first_label(raw)

    if not isinstance(raw, str):
        logger.debug(f"Unsupported muscle_groups type: {type(raw).__name__}")
        return UNKNOWN_MUSCLE_GROUP

    text = raw.strip()
    if not text:
        return UNKNOWN_MUSCLE_GROUP

    try:
        decoded = json.loads(text)
    except ValueError:
        pass
    else:
        if isinstance(decoded, (list, tuple)):
            return _first_label(decoded)
        if isinstance(decoded, str):
            return normalize_muscle_group(decoded)
        # Numbers, objects, booleans: not a label
        return UNKNOWN_MUSCLE_GROUP

    # Postgres array literal, e.g. {Chest,"Upper Back"}
    if text.startswith("{") and text.endswith("}"):
        items = [item.strip().strip('"') for item in text[1:-1].split(",")]
        return _first_label(items)

    return text.lower()
