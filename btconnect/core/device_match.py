"""Search-string to paired-device matching logic."""

from __future__ import annotations

from collections.abc import Sequence
from difflib import SequenceMatcher

from btconnect.core.model import Device, MatchResult

DEFAULT_THRESHOLD = 0.6


def _substring_matches(query: str, devices: Sequence[Device]) -> list[Device]:
    return [device for device in devices if query in device.name.lower()]


def similarity(query: str, name: str) -> float:
    """Score ``query`` against ``name`` in ``[0, 1]``.

    Both strings are compared lowercased. The score is the best
    ``SequenceMatcher`` ratio against the whole name or any single word of
    it, so a misspelled word still scores well inside a long name.
    """
    query = query.lower()
    name = name.lower()
    if not query or not name:
        return 0.0
    candidates = [name, *name.split()]
    return max(SequenceMatcher(a=query, b=candidate).ratio() for candidate in candidates)


def resolve(
    query: str,
    devices: Sequence[Device],
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> MatchResult:
    if not 0.0 < threshold <= 1.0:
        raise ValueError(f"threshold must be in (0, 1], got {threshold}")

    lowered = query.lower()
    hits = _substring_matches(lowered, devices)
    if hits:
        return MatchResult(devices=tuple(hits), mode="substring")

    scored: list[tuple[float, Device]] = []
    for device in devices:
        score = similarity(lowered, device.name)
        if score >= threshold:
            scored.append((score, device))

    if not scored:
        return MatchResult(devices=(), mode="none")

    # sort() is stable, so equal scores keep their listing order.
    scored.sort(key=lambda item: item[0], reverse=True)
    return MatchResult(devices=tuple(device for _, device in scored), mode="fuzzy")
