"""Edge-counting and information-content similarity measures.

All measures walk the network with ``operations.get_path``. The
information-content (IC) values must already be set on the synsets; this
module never computes them. Unset IC values (0.0) don't fail, but give
degenerate scores.
"""

from __future__ import annotations

from collections.abc import Iterable

from wordnet_graph.exceptions import (
    NoCommonSubsumerError,
    SimilarityError,
    SynsetNotFoundError,
    TargetUnreachableError,
)
from wordnet_graph.models import Synset
from wordnet_graph.network import Network
from wordnet_graph.operations import get_path, path_reaches


def distance(
    network: Network,
    source_id: str,
    target_id: str,
    allow_all_relations: bool,
    filtered_relations: Iterable[str] | None,
) -> int:
    """Number of edges from *source_id* to *target_id* on the walk.

    Raises:
        TargetUnreachableError: If the walk is exhausted before the target.
        RelationFilterError: If the filter leaves no relation to follow.
    """
    path = get_path(
        network, source_id, target_id, allow_all_relations, filtered_relations
    )
    if not path_reaches(path, target_id):
        raise TargetUnreachableError(
            f"{target_id!r} is not reachable from {source_id!r} "
            f"(visited {len(path)} synsets)"
        )
    return len(path) - 1


def hypernym_distance(network: Network, source_id: str, target_id: str) -> int:
    """``distance`` following only the hypernymy relations."""
    return distance(
        network, source_id, target_id,
        False, network.settings.hypernym_relations,
    )


def lowest_common_subsumer(
    network: Network,
    synset_id1: str,
    synset_id2: str,
    allow_all_relations: bool = False,
) -> str | None:
    """The first synset on the walk from *synset_id1* that the walk from
    *synset_id2* also reaches.

    Each walk runs toward the other synset, following either every relation
    or only the hypernymy ones. Returns None if the walks never meet.
    """
    filtered = None if allow_all_relations else network.settings.hypernym_relations
    s1_walk = get_path(
        network, synset_id1, synset_id2, allow_all_relations, filtered
    )
    s2_walk = get_path(
        network, synset_id2, synset_id1, allow_all_relations, filtered
    )
    s2_seen = set(s2_walk)
    for synset_id in s1_walk:
        if synset_id in s2_seen:
            return synset_id
    return None


def resnik(
    network: Network,
    synset_id1: str,
    synset_id2: str,
    allow_all_relations: bool = False,
) -> float:
    """Resnik similarity: IC of the lowest common subsumer."""
    lcs_id = lowest_common_subsumer(
        network, synset_id1, synset_id2, allow_all_relations
    )
    if lcs_id is None:
        raise NoCommonSubsumerError(
            f"{synset_id1!r} and {synset_id2!r} have no common subsumer"
        )
    return _require(network, lcs_id).information_content


def lin(
    network: Network,
    synset_id1: str,
    synset_id2: str,
    allow_all_relations: bool = False,
) -> float:
    """Lin similarity: 2 * Resnik / (IC(s1) + IC(s2)).

    Returns 0.0 when both IC values are zero.
    """
    ic_sum = (
        _require(network, synset_id1).information_content
        + _require(network, synset_id2).information_content
    )
    shared = resnik(network, synset_id1, synset_id2, allow_all_relations)
    if ic_sum == 0:
        return 0.0
    return 2 * shared / ic_sum


def jiang_conrath_distance(
    network: Network,
    synset_id1: str,
    synset_id2: str,
    allow_all_relations: bool = False,
) -> float:
    """Jiang-Conrath distance: IC(s1) + IC(s2) - 2 * Resnik."""
    ic_sum = (
        _require(network, synset_id1).information_content
        + _require(network, synset_id2).information_content
    )
    return ic_sum - 2 * resnik(
        network, synset_id1, synset_id2, allow_all_relations
    )


def jiang_conrath(
    network: Network,
    synset_id1: str,
    synset_id2: str,
    allow_all_relations: bool = False,
) -> float:
    """Jiang-Conrath similarity: the inverse of ``jiang_conrath_distance``.

    Raises:
        SimilarityError: If the distance is zero, e.g. comparing a synset
            with itself.
    """
    dist = jiang_conrath_distance(
        network, synset_id1, synset_id2, allow_all_relations
    )
    if dist == 0:
        raise SimilarityError(
            f"Jiang-Conrath distance between {synset_id1!r} and "
            f"{synset_id2!r} is zero"
        )
    return 1 / dist


def _require(network: Network, synset_id: str) -> Synset:
    synset = network.get_synset_by_id(synset_id)
    if synset is None:
        raise SynsetNotFoundError(f"Synset not found: {synset_id!r}")
    return synset
