"""Line-oriented field extractors for smartctl and parted text output."""
import re
from typing import Iterator, Optional

_BRACKETED = re.compile(r"\[(.*)\]")
_DIGITS = re.compile(r"[0-9]+")
_PARTITION_LINE = re.compile(r"^\s*[0-9]+")


def _lines_containing(text: str, needle: str, ignore_case: bool = True) -> Iterator[str]:
    if ignore_case:
        needle = needle.lower()
    for line in text.splitlines():
        haystack = line.lower() if ignore_case else line
        if needle in haystack:
            yield line


def label_field(text: str, label: str) -> Optional[str]:
    """Value of the first line mentioning ``label`` (case-insensitive).

    The value is the segment between the first and second colon, trimmed,
    so ``"Serial Number:    WD-1234"`` yields ``"WD-1234"``. Empty values
    are reported as None.
    """
    for line in _lines_containing(text, label):
        parts = line.split(":")
        if len(parts) < 2:
            continue
        value = " ".join(parts[1].split())
        return value or None
    return None


def prefixed_field(text: str, label: str) -> Optional[str]:
    """Like label_field, but the line must start with ``label``."""
    prefix = label.lower()
    for line in text.splitlines():
        if line.lower().startswith(prefix):
            parts = line.split(":")
            value = " ".join(parts[1].split()) if len(parts) > 1 else ""
            return value or None
    return None


def bracket_field(text: str, label: str) -> Optional[str]:
    """Bracketed value of the first line containing ``label`` (case-sensitive).

    ``"User Capacity:    1,000,204,886,016 bytes [1.00 TB]"`` yields
    ``"1.00 TB"``.
    """
    for line in _lines_containing(text, label, ignore_case=False):
        match = _BRACKETED.search(line)
        if match:
            value = " ".join(match.group(1).split())
            return value or None
        return None
    return None


def attribute_column(text: str, name: str, column: int = 10) -> Optional[str]:
    """Token in ``column`` (1-based) of the first attribute row named ``name``.

    A row matches when one of its whitespace-delimited tokens equals
    ``name``; for ``smartctl -A`` column 10 is RAW_VALUE.
    """
    for line in text.splitlines():
        tokens = line.split()
        if name not in tokens:
            continue
        if len(tokens) < column:
            return None
        return tokens[column - 1]
    return None


def parse_count(value: Optional[str]) -> Optional[int]:
    """Integer for a pure digit string, else None."""
    if value is None or not _DIGITS.fullmatch(value):
        return None
    return int(value)


def first_token(line: str) -> Optional[str]:
    tokens = line.split()
    return tokens[0] if tokens else None


def is_partition_line(line: str) -> bool:
    return bool(_PARTITION_LINE.match(line))
