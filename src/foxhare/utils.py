import re
from typing import Optional

# Leading-prefix patterns, matching what a C "%d" / "%lf" scan accepts
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_int(text: str) -> Optional[int]:
    """Parse the leading integer of a line, or None if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_float(text: str) -> Optional[float]:
    """Parse the leading number of a line, or None if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))
