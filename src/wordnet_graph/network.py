"""In-memory synset network: the graph data model for wordnet-graph."""

from __future__ import annotations

import copy as _copy
import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from wordnet_graph.config import DEFAULT_SETTINGS, Settings
from wordnet_graph.exceptions import SynsetNotFoundError
from wordnet_graph.models import (
    Literal,
    NetworkStats,
    PartOfSpeech,
    PosStats,
    Synset,
)
from wordnet_graph.relations import matches

logger = logging.getLogger(__name__)


class Network:
    """A WordNet-style dictionary held in memory.

    Synsets live in one insertion-ordered mapping keyed by ID, which serves
    both as the ordered synset sequence and as the O(1) ID index. A second
    mapping indexes word-forms to the IDs of the synsets holding them; it is
    kept in step with the first on every mutation.
    """

    def __init__(
        self,
        synsets: Iterable[Synset] | None = None,
        *,
        settings: Settings = DEFAULT_SETTINGS,
    ) -> None:
        self.settings = settings
        self._synsets: dict[str, Synset] = {}
        self._words: dict[str, list[str]] = {}
        # Word-forms each synset was indexed under, which may differ from its
        # current literals if they were edited in place.
        self._indexed: dict[str, tuple[str, ...]] = {}
        self._incremental_id: str | None = None

        if synsets is not None:
            for synset in synsets:
                # Bulk construction keeps the last synset seen for an ID.
                self.add_synset(synset, overwrite=True)
            logger.debug(
                "Built network with %d synsets, %d word-forms",
                len(self._synsets), len(self._words),
            )

    def __len__(self) -> int:
        return len(self._synsets)

    def __iter__(self) -> Iterator[Synset]:
        return iter(list(self._synsets.values()))

    def __contains__(self, synset_id: object) -> bool:
        return synset_id in self._synsets

    def __repr__(self) -> str:
        return f"<Network synsets={len(self._synsets)}>"

    @property
    def synsets(self) -> list[Synset]:
        """All synsets in insertion order."""
        return list(self._synsets.values())

    @property
    def ids(self) -> list[str]:
        """All synset IDs in insertion order."""
        return list(self._synsets)

    @property
    def words(self) -> list[str]:
        """All indexed word-forms."""
        return list(self._words)

    def copy(self, *, deep: bool = False) -> Network:
        """Return a network with its own indices.

        Synset objects are shared unless *deep* is true. Use this before
        ``union``/``merge`` when the original must stay untouched.
        """
        clone = Network(settings=self.settings)
        if deep:
            clone._synsets = {
                sid: _copy.deepcopy(s) for sid, s in self._synsets.items()
            }
        else:
            clone._synsets = dict(self._synsets)
        clone._words = {w: list(ids) for w, ids in self._words.items()}
        clone._indexed = dict(self._indexed)
        clone._incremental_id = self._incremental_id
        return clone

    def __copy__(self) -> Network:
        return self.copy()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_synset(self, synset: Synset, overwrite: bool = False) -> bool:
        """Add *synset*, replacing an existing one only if *overwrite*.

        Returns False (and leaves the network untouched) when the ID is
        taken and *overwrite* is false. A replaced synset is removed first;
        the new one is appended at the end of the ordering.
        """
        if synset.id in self._synsets:
            if not overwrite:
                return False
            self._discard(synset.id)
        self._synsets[synset.id] = synset
        self._index_words(synset)
        return True

    def add_synsets(
        self, synsets: Iterable[Synset], overwrite: bool = False
    ) -> int:
        """Add several synsets; returns how many were actually added."""
        added = sum(1 for s in synsets if self.add_synset(s, overwrite))
        logger.debug("Added %d synsets (overwrite=%s)", added, overwrite)
        return added

    def remove_synset(self, synset_id: str) -> Synset | None:
        """Remove and return a synset, or None if it isn't present."""
        if synset_id not in self._synsets:
            return None
        return self._discard(synset_id)

    def _discard(self, synset_id: str) -> Synset:
        old = self._synsets.pop(synset_id)
        for word in self._indexed.pop(synset_id, ()):
            ids = self._words.get(word)
            if ids is None:
                continue
            ids[:] = [i for i in ids if i != synset_id]
            if not ids:
                del self._words[word]
        return old

    def _index_words(self, synset: Synset) -> None:
        self._indexed[synset.id] = tuple(dict.fromkeys(synset.words))
        for word in self._indexed[synset.id]:
            ids = self._words.setdefault(word, [])
            if synset.id not in ids:
                ids.append(synset.id)

    # ------------------------------------------------------------------
    # ID generation
    # ------------------------------------------------------------------

    def get_new_id(self, prefix: str, suffix: str = "") -> str:
        """Return the ID following the highest numbered ``prefix<N>suffix``.

        Only IDs whose middle segment is all digits are considered. The
        result keeps the digit width of the highest match, or uses
        ``settings.id_width`` when nothing matches.
        """
        best: int | None = None
        width = self.settings.id_width
        for synset_id in self._synsets:
            digits = _digit_segment(synset_id, prefix, suffix)
            if digits is None:
                continue
            value = int(digits)
            if best is None or value > best:
                best = value
                width = len(digits)
        if best is None:
            return f"{prefix}{1:0{width}d}{suffix}"
        return f"{prefix}{best + 1:0{width}d}{suffix}"

    def get_new_incremental_id(self, prefix: str, suffix: str = "") -> str:
        """Like ``get_new_id`` but increments the last issued ID when possible.

        Repeated calls for the same prefix/suffix family cost O(1) instead
        of a full scan. Any other family falls back to ``get_new_id``.
        """
        last = self._incremental_id
        digits = (
            _digit_segment(last, prefix, suffix) if last is not None else None
        )
        if digits is None:
            self._incremental_id = self.get_new_id(prefix, suffix)
        else:
            self._incremental_id = (
                f"{prefix}{int(digits) + 1:0{len(digits)}d}{suffix}"
            )
        return self._incremental_id

    # ------------------------------------------------------------------
    # ID and relation queries
    # ------------------------------------------------------------------

    def get_synset_by_id(self, synset_id: str) -> Synset | None:
        return self._synsets.get(synset_id)

    def get_synsets_from_ids(self, ids: Iterable[str]) -> list[Synset]:
        """Resolve IDs to synsets in order, skipping unknown IDs."""
        found = []
        for synset_id in ids:
            synset = self._synsets.get(synset_id)
            if synset is not None:
                found.append(synset)
        return found

    def get_synsets_by_pos(self, pos: PartOfSpeech | str) -> list[Synset]:
        pos = PartOfSpeech(pos)
        return [s for s in self._synsets.values() if s.pos == pos]

    def get_related_synset_ids(
        self, synset_id: str, relation: str = "*"
    ) -> list[str]:
        """Target IDs of the outgoing relations of type *relation*.

        Raises:
            SynsetNotFoundError: If *synset_id* isn't in the network.
        """
        synset = self._synsets.get(synset_id)
        if synset is None:
            raise SynsetNotFoundError(f"Synset not found: {synset_id!r}")
        return [
            rel.target_id
            for rel in synset.relations
            if matches(rel.relation_type, relation)
        ]

    def get_related_synsets(
        self, synset_id: str, relation: str = "*"
    ) -> list[Synset]:
        """Like ``get_related_synset_ids`` but resolved to synsets."""
        related = []
        for target_id in self.get_related_synset_ids(synset_id, relation):
            target = self._synsets.get(target_id)
            if target is None:
                logger.warning(
                    "Relation %s -> %s points to a missing synset",
                    synset_id, target_id,
                )
                continue
            related.append(target)
        return related

    # ------------------------------------------------------------------
    # Literal queries
    # ------------------------------------------------------------------

    def _candidates(self, literal: Literal) -> Iterator[Synset]:
        for synset_id in self._words.get(literal.literal, ()):
            synset = self._synsets.get(synset_id)
            if synset is not None and literal in synset.literals:
                yield synset

    def get_synsets_from_literal(
        self, literal: Literal, pos: PartOfSpeech | str | None = None
    ) -> list[Synset]:
        """Synsets whose literals contain *literal*, optionally by POS."""
        if pos is not None:
            pos = PartOfSpeech(pos)
        return [
            s for s in self._candidates(literal) if pos is None or s.pos == pos
        ]

    def get_ids_from_literal(
        self, literal: Literal, pos: PartOfSpeech | str | None = None
    ) -> list[str]:
        return [s.id for s in self.get_synsets_from_literal(literal, pos)]

    def contains_literal(self, literal: Literal) -> bool:
        return next(self._candidates(literal), None) is not None

    def get_synset_from_literal(self, literal: Literal) -> Synset | None:
        """Resolve a literal to a single synset.

        With no sense tag, the first synset (in index order) holding the
        word-form wins. With a sense tag, the synset must hold a literal
        with that exact word-form and sense.
        """
        for synset in self._candidates(literal):
            if literal.sense is None:
                return synset
            if any(literal.matches_exactly(lit) for lit in synset.literals):
                return synset
        return None

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def stats(self) -> NetworkStats:
        """Count synsets, literals and relations, broken down by POS."""
        by_pos: dict[PartOfSpeech, PosStats] = {}
        total_literals = 0
        for pos in PartOfSpeech:
            members = self.get_synsets_by_pos(pos)
            literals = [
                (lit.literal, lit.sense) for s in members for lit in s.literals
            ]
            total_literals += len(literals)
            by_pos[pos] = PosStats(
                synsets=len(members),
                literals=len(literals),
                unique_literals=len(set(literals)),
                non_lexicalized=sum(1 for s in members if s.non_lexicalized),
            )

        unique = {
            (lit.literal, lit.sense)
            for s in self._synsets.values()
            for lit in s.literals
        }
        frequency = Counter(
            rel.relation_type
            for s in self._synsets.values()
            for rel in s.relations
        )
        return NetworkStats(
            total_synsets=len(self._synsets),
            by_pos=by_pos,
            total_literals=total_literals,
            unique_literals=len(unique),
            relation_count=sum(frequency.values()),
            relation_frequency=dict(frequency),
        )


def _digit_segment(synset_id: str, prefix: str, suffix: str) -> str | None:
    """The all-digit part between *prefix* and *suffix*, or None."""
    if not synset_id.startswith(prefix) or not synset_id.endswith(suffix):
        return None
    end = len(synset_id) - len(suffix)
    if end < len(prefix):
        return None
    middle = synset_id[len(prefix):end]
    if not (middle.isascii() and middle.isdigit()):
        return None
    return middle
