"""Canonical ordering for unordered user pairs."""


def canonical_pair(first_id: str, second_id: str) -> tuple[str, str]:
    """Return the two ids sorted so (a, b) and (b, a) give the same key."""
    if first_id <= second_id:
        return first_id, second_id
    return second_id, first_id
