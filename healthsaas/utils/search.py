"""Client-side filtering for the lists the console has already fetched."""
from __future__ import annotations

from typing import Iterable, List

from healthsaas.models.domain import Household


def filter_households(households: Iterable[Household], term: str) -> List[Household]:
    """
    Case-insensitive substring match on code, location and head of household.

    An empty or blank term keeps every household.
    """
    needle = term.strip().lower()
    if not needle:
        return list(households)
    return [
        h for h in households
        if needle in h.code.lower() or needle in h.location.lower() or needle in h.head_name.lower()
    ]
