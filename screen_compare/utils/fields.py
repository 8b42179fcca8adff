from __future__ import annotations
import math
import re
from typing import Dict, Optional

from screen_compare.utils.typing import NUMERIC_FIELDS, RawValue, ScreenSpec

# longer text is a field error, never cut down to fit
MAX_RAW_LENGTH = 64

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

FIELD_LABELS = {
    "diagonal": "Diagonal",
    "aspect_x": "Aspect X",
    "aspect_y": "Aspect Y",
}

def sanitize_input(text: RawValue) -> str:
    if text is None:
        return ""
    return str(text).strip()

def is_too_long(raw: RawValue) -> bool:
    return isinstance(raw, str) and len(sanitize_input(raw)) > MAX_RAW_LENGTH

def is_hex_color(value: RawValue) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value))

def parse_number(raw: RawValue) -> Optional[float]:
    """
    Parse a raw field value into a float.
    Returns None when the value is missing, too long, or is not a number at all.
    NaN and negatives parse fine; rejecting them is a value check, not a parse check.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    text = sanitize_input(raw)
    if not text or len(text) > MAX_RAW_LENGTH:
        return None
    try:
        return float(text)
    except ValueError:
        return None

def coerce(raw: RawValue) -> RawValue:
    """Value to store for a numeric field: the parsed float, or the raw text verbatim."""
    value = parse_number(raw)
    if value is not None:
        return value
    return None if raw is None else str(raw)

def is_positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0

def presence_errors(spec: ScreenSpec) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name in NUMERIC_FIELDS:
        raw = getattr(spec, name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            errors[name] = f"{FIELD_LABELS[name]} is required"
        elif is_too_long(raw):
            errors[name] = f"{FIELD_LABELS[name]} is too long"
        elif parse_number(raw) is None:
            errors[name] = f"{FIELD_LABELS[name]} must be a number"
    return errors

def value_errors(spec: ScreenSpec) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name in NUMERIC_FIELDS:
        value = parse_number(getattr(spec, name))
        if value is not None and not is_positive(value):
            errors[name] = f"{FIELD_LABELS[name]} must be greater than 0"
    return errors

def field_errors(spec: ScreenSpec) -> Dict[str, str]:
    """All per-field problems for one entry, for highlighting in the editor."""
    errors = value_errors(spec)
    errors.update(presence_errors(spec))
    return errors
