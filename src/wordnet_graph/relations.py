"""Relation type constants and inverse mapping for wordnet-graph."""

from __future__ import annotations

# Matches every relation type in relation queries and walk filters.
WILDCARD = "*"

HYPERNYMY_RELATIONS: tuple[str, ...] = ("hypernym", "instance_hypernym")

# Relation names as used by RoWordNet / Princeton WordNet 2.0 style dumps.
SYNSET_RELATION_INVERSES: dict[str, str] = {
    # Asymmetric pairs
    "hypernym": "hyponym",
    "hyponym": "hypernym",
    "instance_hypernym": "instance_hyponym",
    "instance_hyponym": "instance_hypernym",
    "holo_member": "mero_member",
    "mero_member": "holo_member",
    "holo_part": "mero_part",
    "mero_part": "holo_part",
    "holo_portion": "mero_portion",
    "mero_portion": "holo_portion",
    "holo_substance": "mero_substance",
    "mero_substance": "holo_substance",
    "category_domain": "category_member",
    "category_member": "category_domain",
    "region_domain": "region_member",
    "region_member": "region_domain",
    "usage_domain": "usage_member",
    "usage_member": "usage_domain",
    "causes": "is_caused_by",
    "is_caused_by": "causes",
    "subevent": "is_subevent_of",
    "is_subevent_of": "subevent",
    "be_in_state": "state_of",
    "state_of": "be_in_state",
    # Symmetric (map to themselves)
    "near_antonym": "near_antonym",
    "similar_to": "similar_to",
    "verb_group": "verb_group",
    "also_see": "also_see",
    "eng_derivative": "eng_derivative",
}


def get_inverse(relation_type: str) -> str | None:
    """Get the inverse of a relation type, or None if it has no known inverse."""
    return SYNSET_RELATION_INVERSES.get(relation_type)


def is_symmetric(relation_type: str) -> bool:
    """Check if a relation type is symmetric (maps to itself)."""
    return SYNSET_RELATION_INVERSES.get(relation_type) == relation_type


def matches(relation_type: str, wanted: str) -> bool:
    """True if *relation_type* satisfies the query *wanted* (or the wildcard)."""
    return wanted == WILDCARD or relation_type == wanted
