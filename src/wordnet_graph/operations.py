"""Set algebra over two networks, and walk-based path finding."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wordnet_graph.exceptions import ConflictError, SynsetNotFoundError
from wordnet_graph.models import Literal
from wordnet_graph.network import Network
from wordnet_graph.walk import BreadthFirstWalk

logger = logging.getLogger(__name__)


def diff(a: Network, b: Network) -> list[str]:
    """IDs present in both networks whose synsets differ in content."""
    return [
        s.id for s in a
        if s.id in b and b.get_synset_by_id(s.id) != s
    ]


def complement(a: Network, b: Network) -> list[str]:
    """IDs present in *a* but not in *b*. Only IDs are compared."""
    return [s.id for s in a if s.id not in b]


def intersection(a: Network, b: Network) -> list[str]:
    """IDs present in both networks with equal content."""
    return [
        s.id for s in a
        if s.id in b and b.get_synset_by_id(s.id) == s
    ]


def union(base: Network, addition: Network) -> Network:
    """Add the synsets of *addition* that *base* lacks. Mutates *base*.

    Pass ``base.copy()`` to keep the original intact.

    Raises:
        ConflictError: If both networks hold the same ID with different
            content. Synsets added before the conflict stay in *base*.
    """
    for synset in addition:
        existing = base.get_synset_by_id(synset.id)
        if existing is None:
            base.add_synset(synset, overwrite=True)
        elif existing != synset:
            raise ConflictError(
                f"Networks contain synset {synset.id!r} with different content",
                synset_id=synset.id,
            )
    return base


def merge(base: Network, addition: Network) -> Network:
    """Copy every synset of *addition* into *base*, overwriting. Mutates *base*."""
    for synset in addition:
        if synset.id in base:
            logger.debug("Merge overwrites synset %s", synset.id)
        base.add_synset(synset, overwrite=True)
    return base


def get_path(
    network: Network,
    source_id: str,
    target_id: str,
    allow_all_relations: bool,
    filtered_relations: Iterable[str] | None,
) -> list[str]:
    """Walk from *source_id* and record each visited ID until *target_id*.

    The returned list is the breadth-first visit order, cut right after the
    target. It is not a reconstructed shortest path. If the target is never
    reached, the whole reachable walk is returned; check with
    ``path_reaches``.

    Raises:
        RelationFilterError: If the filter leaves no relation to follow.
    """
    path: list[str] = []
    walk = BreadthFirstWalk(
        network, source_id, allow_all_relations, filtered_relations
    )
    while walk.has_more_synsets():
        synset_id = walk.next_synset()
        path.append(synset_id)
        if synset_id == target_id:
            break
    return path


def get_path_between_literals(
    network: Network,
    source: Literal,
    target: Literal,
    allow_all_relations: bool,
    filtered_relations: Iterable[str] | None,
) -> list[str]:
    """``get_path`` between the synsets two literals resolve to."""
    ids = []
    for literal in (source, target):
        synset = network.get_synset_from_literal(literal)
        if synset is None:
            raise SynsetNotFoundError(
                f"No synset holds literal {literal.literal!r} "
                f"(sense {literal.sense!r})"
            )
        ids.append(synset.id)
    return get_path(network, ids[0], ids[1], allow_all_relations, filtered_relations)


def path_reaches(path: list[str], target_id: str) -> bool:
    """True if a ``get_path`` result actually ended at *target_id*."""
    return bool(path) and path[-1] == target_id
