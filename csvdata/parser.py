"""Parse CSV text into header-keyed records.

Only the simple quoting used by the data files is supported: a double quote
toggles "inside quotes" and is dropped, so a delimiter between quotes stays
part of the value. Unbalanced quotes never raise; the state simply carries to
the end of the line.
"""

import re

from csvdata.models import RawRecord

_RE_WRAPPING_QUOTES = re.compile(r'^"(.*)"$', re.DOTALL)


def _unquote(value: str) -> str:
    """Remove one wrapping quote pair, then trim."""
    return _RE_WRAPPING_QUOTES.sub(r"\1", value).strip()


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """Quote-aware split of one CSV line into raw field values."""
    values = []
    current = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(ch)

    # Last field has no trailing delimiter
    values.append("".join(current))
    return values


def parse_header(line: str, delimiter: str = ",") -> list[str]:
    """Split the header line. Header names are never quoted around delimiters."""
    return [_unquote(h) for h in line.split(delimiter)]


def parse_csv(text: str, delimiter: str = ",", skip_header: bool = True) -> list[RawRecord]:
    """Parse CSV text into a list of dicts keyed by the header row.

    Args:
        text: Raw CSV text, ``\\n``-separated.
        delimiter: Field delimiter (single character).
        skip_header: The first non-blank line is always the header. When True
            (default) row parsing starts after it; when False the header line
            is also parsed as a data row, which yields a record mapping every
            header to itself.

    Returns:
        One dict per data row, in source order. Rows shorter than the header
        are padded with ``""``. Empty input gives ``[]``.
    """
    if not text:
        return []

    lines = [ln for ln in text.split("\n") if ln.strip() != ""]
    if not lines:
        return []

    headers = parse_header(lines[0], delimiter)
    start = 1 if skip_header else 0

    records = []
    for line in lines[start:]:
        values = split_line(line, delimiter)
        record = {}
        for i, header in enumerate(headers):
            value = values[i] if i < len(values) else ""
            record[header] = _unquote(value)
        records.append(record)
    return records
