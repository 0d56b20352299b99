"""Domain model dataclasses and enums for wordnet-graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PartOfSpeech(str, Enum):
    """Part-of-speech tags for synsets."""

    NOUN = "n"
    VERB = "v"
    ADVERB = "r"
    ADJECTIVE = "a"

    @classmethod
    def from_tag(cls, tag: str) -> PartOfSpeech | None:
        """Map a one-letter tag to a member, or None for unknown tags.

        Adjective satellites ("s") fold into ADJECTIVE.
        """
        if tag == "s":
            return cls.ADJECTIVE
        try:
            return cls(tag)
        except ValueError:
            return None


class ValidationSeverity(str, Enum):
    """Severity level for validation results."""

    ERROR = "ERROR"
    WARNING = "WARNING"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class Literal:
    """A word-form with an optional sense tag.

    Equality is open on the sense: if either side has no sense tag, only the
    word-forms are compared. The hash therefore covers the word-form alone.
    """

    literal: str
    sense: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        if self.literal != other.literal:
            return False
        if self.sense is None or other.sense is None:
            return True
        return self.sense == other.sense

    def __hash__(self) -> int:
        return hash(self.literal)

    def matches_exactly(self, other: Literal) -> bool:
        """Strict comparison: word-form and sense tag both equal."""
        return self.literal == other.literal and self.sense == other.sense


@dataclass(frozen=True, slots=True)
class Relation:
    """A typed, directed relation between two synsets.

    The literal fields narrow the relation to a specific sense within the
    source or target synset; both are optional.
    """

    source_id: str
    target_id: str
    relation_type: str
    source_literal: str | None = None
    target_literal: str | None = None

    def __str__(self) -> str:
        return f"Relation [{self.source_id} {self.relation_type} {self.target_id}]"


@dataclass(slots=True)
class Synset:
    """A synset (set of synonymous literals sharing a concept).

    ``id`` must not be reassigned once the synset belongs to a Network; the
    network's indices are keyed on it. Replace the node through
    ``Network.add_synset(..., overwrite=True)`` instead.
    """

    id: str
    pos: PartOfSpeech | None = None
    literals: list[Literal] = field(default_factory=list)
    definition: str | None = None
    usage: list[str] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)
    non_lexicalized: bool = False
    domain: str | None = None
    sumo: str | None = None
    sumo_type: str | None = None
    sentiwn_p: str | None = None
    sentiwn_n: str | None = None
    sentiwn_o: str | None = None
    nl_literal: str | None = None
    stamp: str | None = field(default=None, compare=False)
    pwn20: list[str] = field(default_factory=list, compare=False)
    information_content: float = field(default=0.0, compare=False)

    def __str__(self) -> str:
        out = f"Synset: id={self.id}"
        if self.pos is not None:
            out += f", pos={self.pos.value}"
        if self.definition is not None:
            out += f", definition={self.definition}"
        if self.domain is not None:
            out += f", domain={self.domain}"
        for lit in self.literals:
            out += f"\n\tLiteral [literal={lit.literal}, sense={lit.sense}]"
        for rel in self.relations:
            out += f"\n\t{rel}"
        return out

    @property
    def words(self) -> list[str]:
        """Distinct word-forms of the synset's literals, in order."""
        return list(dict.fromkeys(lit.literal for lit in self.literals))

    def relation_types(self) -> list[str]:
        """Distinct outgoing relation types, in order of first appearance."""
        return list(dict.fromkeys(rel.relation_type for rel in self.relations))


@dataclass(frozen=True, slots=True)
class PosStats:
    """Per part-of-speech counters."""

    synsets: int
    literals: int
    unique_literals: int
    non_lexicalized: int


@dataclass(frozen=True, slots=True)
class NetworkStats:
    """Summary counters for a whole network."""

    total_synsets: int
    by_pos: dict[PartOfSpeech, PosStats]
    total_literals: int
    unique_literals: int
    relation_count: int
    relation_frequency: dict[str, int]

    def format(self) -> str:
        """Render the counters as an indented, human-readable report."""
        lines = ["Statistics:", f"\tTOTAL Synsets:\t{self.total_synsets}"]
        for pos, st in self.by_pos.items():
            label = pos.name.capitalize()
            lines.append(f"\t{label} Synsets:\t{st.synsets}")
            lines.append(f"\t\t{label} Literals:\t{st.literals}")
            lines.append(f"\t\t{label} Unique Literals:\t{st.unique_literals}")
            lines.append(
                f"\t\t{label} Non-lexicalized Synsets:\t{st.non_lexicalized}"
            )
        lines.append(f"\tTotal Literals:\t{self.total_literals}")
        lines.append(f"\tTotal Unique Literals:\t{self.unique_literals}")
        lines.append(f"\tNumber of relations:\t{self.relation_count}")
        lines.append("\tRelation Frequency table:")
        for rel, count in self.relation_frequency.items():
            lines.append(f"\t\t{rel}: {count}")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """A single validation finding (error or warning)."""

    rule_id: str
    severity: ValidationSeverity
    entity_type: str
    entity_id: str
    message: str
    details: dict[str, Any] | None
