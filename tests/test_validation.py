"""Tests for the validation rules."""

from conftest import make_synset
from wordnet_graph import (
    Literal,
    Network,
    Relation,
    ValidationSeverity,
    validate_all,
    validate_relations,
    validate_synset,
)


def rule_ids(results):
    return {r.rule_id for r in results}


class TestValidateClean:

    def test_no_errors_in_taxonomy(self, taxonomy):
        results = validate_all(taxonomy)
        assert [r for r in results if r.severity == "ERROR"] == []

    def test_one_sided_antonym_is_warned(self, taxonomy):
        results = validate_relations(taxonomy)
        assert len(results) == 1
        assert results[0].rule_id == "VAL-REL-004"
        assert results[0].entity_id == "n-cat"
        assert results[0].details["target_id"] == "n-dog"


class TestSynsetRules:

    def test_empty_lexicalized_synset(self):
        net = Network([make_synset("S1")])
        assert "VAL-SYN-001" in rule_ids(validate_synset(net, "S1"))

    def test_non_lexicalized_with_literals(self):
        synset = make_synset("S1", "cat")
        synset.non_lexicalized = True
        net = Network([synset])
        assert "VAL-SYN-001" in rule_ids(validate_synset(net, "S1"))

    def test_non_lexicalized_without_literals_is_fine(self):
        synset = make_synset("S1")
        synset.non_lexicalized = True
        assert validate_synset(Network([synset]), "S1") == []

    def test_blank_definition(self):
        net = Network([make_synset("S1", "cat", definition="  ")])
        assert "VAL-SYN-002" in rule_ids(validate_all(net))

    def test_duplicate_literal(self):
        synset = make_synset("S1", "cat")
        synset.literals.append(Literal("cat", "1"))
        assert "VAL-SYN-003" in rule_ids(validate_all(Network([synset])))

    def test_unknown_synset_yields_nothing(self, taxonomy):
        assert validate_synset(taxonomy, "n-ghost") == []


class TestRelationRules:

    def test_wrong_source(self):
        synset = make_synset("S1", "cat")
        synset.relations.append(Relation("S9", "S1", "also_see"))
        results = validate_relations(Network([synset]))
        assert "VAL-REL-001" in rule_ids(results)

    def test_self_loop(self):
        net = Network([make_synset("S1", "cat", relations=[("similar_to", "S1")])])
        assert rule_ids(validate_relations(net)) == {"VAL-REL-002"}

    def test_dangling_target(self):
        net = Network([make_synset("S1", "cat", relations=[("hypernym", "S2")])])
        results = validate_relations(net)
        assert rule_ids(results) == {"VAL-REL-003"}
        assert results[0].severity is ValidationSeverity.ERROR

    def test_missing_inverse(self):
        net = Network([
            make_synset("S1", "cat", relations=[("hypernym", "S2")]),
            make_synset("S2", "animal"),
        ])
        assert rule_ids(validate_relations(net)) == {"VAL-REL-004"}

    def test_unknown_relation_type_has_no_inverse_check(self):
        net = Network([
            make_synset("S1", "cat", relations=[("custom_link", "S2")]),
            make_synset("S2", "animal"),
        ])
        assert validate_relations(net) == []
