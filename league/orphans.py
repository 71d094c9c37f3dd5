"""Detection and repair of results that name players missing from the roster."""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from rapidfuzz.distance import JaroWinkler

from league import DoublesResult, Mode, Result, SingleResult, result_matches_mode

log = logging.getLogger(__name__)

DEFAULT_SUGGESTION_THRESHOLD = 0.80


@dataclass(frozen=True)
class OrphanReference:
    """A player name in the result log that is not on the roster."""

    index: int                  # position in the result log
    name: str
    suggestion: Optional[str]   # closest roster name, if similar enough
    similarity: float = 0.0


def _normalize_key(value: str) -> str:
    return value.strip().upper()


def _named_players(result: Result) -> tuple[str, ...]:
    if isinstance(result, SingleResult):
        return (result.home, result.away)
    return (*result.team_a, *result.team_b, *result.sitting)


def suggest_name(
    name: str,
    roster: list[str],
    threshold: float = DEFAULT_SUGGESTION_THRESHOLD,
) -> tuple[Optional[str], float]:
    """Find the roster name most similar to ``name``.

    Args:
        name: Unknown player name.
        roster: Current roster.
        threshold: Minimum Jaro-Winkler similarity (0–1).

    Returns:
        (best roster name, similarity), or (None, best similarity) if no
        name reaches the threshold.
    """
    best_name: Optional[str] = None
    best_sim = 0.0
    key = _normalize_key(name)

    for candidate in roster:
        sim = JaroWinkler.similarity(key, _normalize_key(candidate))
        if sim > best_sim:
            best_name, best_sim = candidate, sim

    if best_sim < threshold:
        return None, round(best_sim, 4)
    return best_name, round(best_sim, 4)


def find_orphans(
    roster: list[str],
    results: list[Result],
    mode: Mode,
    threshold: float = DEFAULT_SUGGESTION_THRESHOLD,
) -> list[OrphanReference]:
    """List every unknown player reference in results of the current mode.

    Args:
        roster: Current roster.
        results: The result log.
        mode: Current match format.
        threshold: Minimum similarity for a rename suggestion.

    Returns:
        One OrphanReference per (result, unknown name), in log order.
    """
    known = set(roster)
    orphans: list[OrphanReference] = []

    for index, result in enumerate(results):
        if not result_matches_mode(result, mode):
            continue
        for name in _named_players(result):
            if name in known:
                continue
            suggestion, sim = suggest_name(name, roster, threshold)
            orphans.append(OrphanReference(
                index=index, name=name, suggestion=suggestion, similarity=sim,
            ))

    if orphans:
        log.info("%d verwaiste Spielerreferenzen gefunden", len(orphans))
    return orphans


def _rename(names: tuple[str, ...], old: str, new: str) -> tuple[str, ...]:
    return tuple(new if n == old else n for n in names)


def remap_player(results: list[Result], old: str, new: str) -> list[Result]:
    """Return a copy of the log with every reference to ``old`` renamed."""
    remapped: list[Result] = []
    for result in results:
        if isinstance(result, SingleResult):
            result = replace(
                result,
                home=new if result.home == old else result.home,
                away=new if result.away == old else result.away,
            )
        elif isinstance(result, DoublesResult):
            result = replace(
                result,
                team_a=_rename(result.team_a, old, new),
                team_b=_rename(result.team_b, old, new),
                sitting=_rename(result.sitting, old, new),
            )
        remapped.append(result)
    return remapped
