"""Status-line text for the external status display."""

from __future__ import annotations

from ..search.indexer import ScanResult


def describe_status(query: str, scan: ScanResult, index: int, direction: int = 1) -> str:
    """Summarize the current selection, e.g. ``"match 3/17"``.

    Truncated scans mark the total with ``+`` and name the budget that
    stopped them.
    """
    if not query:
        return ""
    total = len(scan.matches)
    if total == 0 or index < 0:
        if scan.truncated:
            return f"no match ({scan.truncation_reason})"
        return "no match"
    label = "match (prev)" if direction < 0 else "match"
    text = f"{label} {index + 1}/{total}"
    if scan.truncated:
        text += f"+ ({scan.truncation_reason})"
    return text
