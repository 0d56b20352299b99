"""Relation-filtered breadth-first walk over a synset network."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from wordnet_graph.exceptions import (
    RelationFilterError,
    SynsetNotFoundError,
    WalkExhaustedError,
)
from wordnet_graph.models import Literal
from wordnet_graph.relations import WILDCARD

if TYPE_CHECKING:
    from wordnet_graph.network import Network

_NO_RELATION_MSG = "No relation to analyse after applying restrictions"


class StepStatus(str, Enum):
    """Outcome of a single walk step."""

    OK = "ok"
    EXHAUSTED = "exhausted"
    FILTER_CONFLICT = "filter_conflict"


@dataclass(frozen=True, slots=True)
class WalkStep:
    """Tagged result of ``BreadthFirstWalk.step``."""

    status: StepStatus
    synset_id: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is StepStatus.OK


class BreadthFirstWalk:
    """Breadth-first traversal of a network, restricted by relation type.

    The meaning of *filtered_relations* depends on *allow_all_relations*:

    * ``True``: every relation is followed except the listed types. Listing
      the wildcard ``"*"`` leaves nothing to follow.
    * ``False``: only the listed types are followed. An empty list leaves
      nothing to follow.

    When nothing is left to follow, advancing the walk is a configuration
    error (``RelationFilterError``), not the end of the graph.

    Nodes are marked visited when enqueued, so each reachable synset is
    returned exactly once and cycles terminate. The walk is advanced one
    node at a time, which lets callers stop early or impose a step budget::

        walk = BreadthFirstWalk(network, source_id, False, ["hypernym"])
        while walk.has_more_synsets():
            synset_id = walk.next_synset()
            if synset_id == target_id:
                break
    """

    def __init__(
        self,
        network: Network,
        root: str | Literal,
        allow_all_relations: bool = True,
        filtered_relations: Iterable[str] | None = None,
    ) -> None:
        self.network = network
        self.allow_all_relations = allow_all_relations
        self.filtered_relations: tuple[str, ...] = tuple(filtered_relations or ())

        if isinstance(root, Literal):
            synset = network.get_synset_from_literal(root)
            if synset is None:
                raise SynsetNotFoundError(
                    f"No synset holds literal {root.literal!r} "
                    f"(sense {root.sense!r})"
                )
            self.root_literal: Literal | None = root
            self.root_id = synset.id
        else:
            self.root_literal = None
            self.root_id = root

        self._queue: deque[str] = deque([self.root_id])
        self._visited: set[str] = {self.root_id}

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self._queue:
            raise StopIteration
        return self.next_synset()

    def has_more_synsets(self) -> bool:
        return bool(self._queue)

    @property
    def visited(self) -> frozenset[str]:
        """IDs enqueued so far, including those still pending."""
        return frozenset(self._visited)

    def is_filtered(self, relation_type: str) -> bool:
        return relation_type in self.filtered_relations

    def _has_conflict(self) -> bool:
        if self.allow_all_relations:
            return self.is_filtered(WILDCARD)
        return not self.filtered_relations

    def step(self) -> WalkStep:
        """Advance by one node and report the outcome without raising.

        A filter conflict leaves the pending queue untouched.
        """
        if not self._queue:
            return WalkStep(StepStatus.EXHAUSTED)
        if self._has_conflict():
            return WalkStep(StepStatus.FILTER_CONFLICT, message=_NO_RELATION_MSG)

        synset_id = self._queue.popleft()
        for target_id in self._eligible_targets(synset_id):
            if target_id not in self._visited:
                self._visited.add(target_id)
                self._queue.append(target_id)
        return WalkStep(StepStatus.OK, synset_id=synset_id)

    def next_synset(self) -> str:
        """Dequeue the next synset ID, enqueueing its eligible neighbours.

        Raises:
            RelationFilterError: If the filter leaves no relation to follow.
            WalkExhaustedError: If there is nothing left to visit.
            SynsetNotFoundError: If the dequeued ID is not in the network.
        """
        result = self.step()
        if result.status is StepStatus.FILTER_CONFLICT:
            raise RelationFilterError(result.message)
        if result.status is StepStatus.EXHAUSTED:
            raise WalkExhaustedError(
                f"Walk from {self.root_id!r} has no more synsets"
            )
        return result.synset_id  # type: ignore[return-value]

    def _eligible_targets(self, synset_id: str) -> list[str]:
        if not self.allow_all_relations:
            targets: list[str] = []
            for rel in self.filtered_relations:
                targets.extend(self.network.get_related_synset_ids(synset_id, rel))
            return targets

        synset = self.network.get_synset_by_id(synset_id)
        if synset is None:
            raise SynsetNotFoundError(f"Synset not found: {synset_id!r}")
        targets = []
        for rel_type in synset.relation_types():
            if not self.is_filtered(rel_type):
                targets.extend(
                    self.network.get_related_synset_ids(synset_id, rel_type)
                )
        return targets
