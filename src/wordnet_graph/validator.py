"""Structural validation for wordnet-graph networks.

The network itself never checks relation targets; these rules are an
opt-in pass for loaders and editors that want to report problems.
"""

from __future__ import annotations

from wordnet_graph.models import Synset, ValidationResult, ValidationSeverity
from wordnet_graph.network import Network
from wordnet_graph.relations import get_inverse


def validate_all(network: Network) -> list[ValidationResult]:
    """Run all validation rules."""
    results: list[ValidationResult] = []
    for synset in network:
        results.extend(_synset_rules(synset))
    results.extend(validate_relations(network))
    return results


def validate_synset(network: Network, synset_id: str) -> list[ValidationResult]:
    """Validate a specific synset and its outgoing relations."""
    synset = network.get_synset_by_id(synset_id)
    if synset is None:
        return []
    results = _synset_rules(synset)
    results.extend(_relation_rules(network, synset))
    return results


def validate_relations(network: Network) -> list[ValidationResult]:
    """Check all relations for issues."""
    results: list[ValidationResult] = []
    for synset in network:
        results.extend(_relation_rules(network, synset))
    return results


# ------------------------------------------------------------------
# Individual rule implementations
# ------------------------------------------------------------------

def _finding(
    rule_id: str,
    severity: ValidationSeverity,
    synset_id: str,
    message: str,
    details: dict | None = None,
) -> ValidationResult:
    return ValidationResult(
        rule_id=rule_id,
        severity=severity,
        entity_type="synset",
        entity_id=synset_id,
        message=message,
        details=details,
    )


def _synset_rules(synset: Synset) -> list[ValidationResult]:
    results = []

    # VAL-SYN-001: lexicalization flag contradicts literals
    if synset.non_lexicalized and synset.literals:
        results.append(_finding(
            "VAL-SYN-001", ValidationSeverity.WARNING, synset.id,
            "Synset is marked non-lexicalized but has literals",
            {"literals": len(synset.literals)},
        ))
    elif not synset.non_lexicalized and not synset.literals:
        results.append(_finding(
            "VAL-SYN-001", ValidationSeverity.WARNING, synset.id,
            "Synset has no literals but is not marked non-lexicalized",
        ))

    # VAL-SYN-002: missing or blank definition
    if synset.definition is None or not synset.definition.strip():
        results.append(_finding(
            "VAL-SYN-002", ValidationSeverity.WARNING, synset.id,
            "Synset has no definition",
        ))

    # VAL-SYN-003: duplicate literals
    seen: set[tuple[str, str | None]] = set()
    for lit in synset.literals:
        key = (lit.literal, lit.sense)
        if key in seen:
            results.append(_finding(
                "VAL-SYN-003", ValidationSeverity.WARNING, synset.id,
                f"Duplicate literal {lit.literal!r} (sense {lit.sense!r})",
            ))
        seen.add(key)

    return results


def _relation_rules(network: Network, synset: Synset) -> list[ValidationResult]:
    results = []
    for rel in synset.relations:
        details = {"relation_type": rel.relation_type, "target_id": rel.target_id}

        # VAL-REL-001: relation recorded on the wrong synset
        if rel.source_id != synset.id:
            results.append(_finding(
                "VAL-REL-001", ValidationSeverity.ERROR, synset.id,
                f"Relation source {rel.source_id!r} does not match its synset",
                details,
            ))

        # VAL-REL-002: self-loop
        if rel.target_id == synset.id:
            results.append(_finding(
                "VAL-REL-002", ValidationSeverity.WARNING, synset.id,
                f"Self-referential {rel.relation_type} relation",
                details,
            ))
            continue

        target = network.get_synset_by_id(rel.target_id)

        # VAL-REL-003: dangling target
        if target is None:
            results.append(_finding(
                "VAL-REL-003", ValidationSeverity.ERROR, synset.id,
                f"Relation target {rel.target_id!r} does not exist",
                details,
            ))
            continue

        # VAL-REL-004: missing inverse
        inverse = get_inverse(rel.relation_type)
        if inverse is not None and not any(
            r.relation_type == inverse and r.target_id == synset.id
            for r in target.relations
        ):
            results.append(_finding(
                "VAL-REL-004", ValidationSeverity.WARNING, synset.id,
                f"Missing inverse {inverse} on {rel.target_id}",
                details,
            ))
    return results
