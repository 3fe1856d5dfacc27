"""Default scan budgets and truncation reasons for match rebuilds."""

from __future__ import annotations

DEFAULT_NODE_CAP = 20_000
DEFAULT_SIZE_CAP = 2_000_000
DEFAULT_MATCH_CAP = 2_000
DEFAULT_TIME_BUDGET_MS = 60

TRUNCATED_NODE_CAP = "node cap"
TRUNCATED_SIZE_CAP = "size cap"
TRUNCATED_TIME_CAP = "time cap"
TRUNCATED_MATCH_CAP = "match cap"
TRUNCATION_REASONS = (
    TRUNCATED_NODE_CAP,
    TRUNCATED_SIZE_CAP,
    TRUNCATED_TIME_CAP,
    TRUNCATED_MATCH_CAP,
)

MUTATION_DEBOUNCE_SECONDS = 0.12
