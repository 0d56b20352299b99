"""Tests for the Network data model: insertion, IDs, lookups, literals."""

import pytest

from conftest import make_synset
from wordnet_graph import (
    Literal,
    Network,
    PartOfSpeech,
    Settings,
    SynsetNotFoundError,
)


class TestAddSynset:

    def test_add_to_empty(self, empty_network):
        assert empty_network.add_synset(make_synset("S1", "cat"))
        assert len(empty_network) == 1
        assert "S1" in empty_network

    def test_no_overwrite_keeps_first(self, empty_network):
        first = make_synset("X", "cat", definition="first")
        second = make_synset("X", "dog", definition="second")
        assert empty_network.add_synset(first, overwrite=True)
        assert empty_network.add_synset(second, overwrite=False) is False
        assert empty_network.get_synset_by_id("X") is first
        assert len(empty_network) == 1

    def test_overwrite_appends_new_node(self, empty_network):
        empty_network.add_synsets([
            make_synset("A", "a"), make_synset("B", "b"), make_synset("C", "c"),
        ])
        replacement = make_synset("A", "z")
        assert empty_network.add_synset(replacement, overwrite=True)
        assert empty_network.ids == ["B", "C", "A"]
        assert empty_network.get_synset_by_id("A") is replacement
        assert len(empty_network.synsets) == 3

    def test_add_synsets_counts_added(self, empty_network):
        empty_network.add_synset(make_synset("A", "a"))
        added = empty_network.add_synsets(
            [make_synset("A", "x"), make_synset("B", "b")]
        )
        assert added == 1

    def test_bulk_constructor_last_write_wins(self):
        net = Network([
            make_synset("A", "a", definition="old"),
            make_synset("A", "a", definition="new"),
        ])
        assert len(net) == 1
        assert net.get_synset_by_id("A").definition == "new"

    def test_remove_synset(self, taxonomy):
        removed = taxonomy.remove_synset("n-cat")
        assert removed.id == "n-cat"
        assert "n-cat" not in taxonomy
        assert taxonomy.remove_synset("n-cat") is None


class TestWordIndex:

    def test_index_tracks_later_additions(self, taxonomy):
        taxonomy.add_synset(make_synset("n-kitty", "cat"))
        ids = taxonomy.get_ids_from_literal(Literal("cat"))
        assert ids == ["n-cat", "n-kitty"]

    def test_index_drops_replaced_words(self, taxonomy):
        taxonomy.add_synset(make_synset("n-cat", "feline"), overwrite=True)
        assert not taxonomy.contains_literal(Literal("cat"))
        assert taxonomy.contains_literal(Literal("feline"))
        assert "cat" not in taxonomy.words

    def test_index_drops_removed_words(self, taxonomy):
        taxonomy.remove_synset("n-tree")
        assert taxonomy.get_synsets_from_literal(Literal("tree")) == []

    def test_remove_after_literals_edited_in_place(self):
        net = Network([make_synset("A", "cat"), make_synset("B", "dog")])
        net.get_synset_by_id("A").literals = [Literal("feline", "1")]
        net.remove_synset("A")
        assert net.get_synsets_from_literal(Literal("cat")) == []
        assert not net.contains_literal(Literal("feline"))
        assert net.words == ["dog"]

    def test_overwrite_after_literals_edited_in_place(self):
        net = Network([make_synset("A", "cat")])
        net.get_synset_by_id("A").literals = [Literal("feline", "1")]
        net.add_synset(make_synset("A", "tabby"), overwrite=True)
        assert "cat" not in net.words
        assert net.get_synsets_from_literal(Literal("cat")) == []
        assert net.get_synset_from_literal(Literal("tabby")).id == "A"

    def test_copy_keeps_indexed_words(self):
        net = Network([make_synset("A", "cat")])
        clone = net.copy()
        clone.get_synset_by_id("A").literals = [Literal("feline", "1")]
        clone.remove_synset("A")
        assert clone.words == []
        assert net.words == ["cat"]


class TestNewId:

    def test_increments_max_with_same_width(self, empty_network):
        empty_network.add_synsets([
            make_synset("P-0003-n"), make_synset("P-0007-n"),
            make_synset("Q-0100-n"), make_synset("P-0005-v"),
        ])
        assert empty_network.get_new_id("P-", "-n") == "P-0008-n"

    def test_no_match_pads_to_eight(self, empty_network):
        empty_network.add_synset(make_synset("Q-12-n"))
        assert empty_network.get_new_id("P-", "-n") == "P-00000001-n"

    def test_ignores_non_numeric_segments(self, empty_network):
        empty_network.add_synsets([
            make_synset("P-abc-n"), make_synset("P-0002-n"),
        ])
        assert empty_network.get_new_id("P-", "-n") == "P-0003-n"

    def test_empty_suffix(self, empty_network):
        empty_network.add_synset(make_synset("ENG20-041"))
        assert empty_network.get_new_id("ENG20-") == "ENG20-042"

    def test_default_width_from_settings(self):
        net = Network(settings=Settings(id_width=4))
        assert net.get_new_id("P-", "-n") == "P-0001-n"

    def test_incremental_ids_are_consecutive(self, empty_network):
        empty_network.add_synset(make_synset("P-0041-n"))
        ids = [empty_network.get_new_incremental_id("P-", "-n") for _ in range(5)]
        numbers = [int(i[2:-2]) for i in ids]
        assert numbers == [42, 43, 44, 45, 46]
        assert all(len(i) == len("P-0041-n") for i in ids)

    def test_incremental_falls_back_on_other_family(self, empty_network):
        empty_network.add_synset(make_synset("R-009-v"))
        empty_network.get_new_incremental_id("P-", "-n")
        assert empty_network.get_new_incremental_id("R-", "-v") == "R-010-v"


class TestRelatedSynsets:

    def test_related_by_type(self, taxonomy):
        assert taxonomy.get_related_synset_ids("n-animal", "hyponym") == [
            "n-cat", "n-dog",
        ]

    def test_related_wildcard(self, taxonomy):
        assert taxonomy.get_related_synset_ids("n-cat", "*") == [
            "n-animal", "n-dog",
        ]

    def test_related_missing_source_raises(self, taxonomy):
        with pytest.raises(SynsetNotFoundError):
            taxonomy.get_related_synset_ids("nope")

    def test_related_synsets_skip_dangling(self, taxonomy):
        taxonomy.add_synset(
            make_synset("n-x", "x", relations=[
                ("hypernym", "n-ghost"), ("hypernym", "n-entity"),
            ])
        )
        related = taxonomy.get_related_synsets("n-x", "hypernym")
        assert [s.id for s in related] == ["n-entity"]

    def test_get_by_id_missing_is_none(self, taxonomy):
        assert taxonomy.get_synset_by_id("nope") is None

    def test_get_synsets_from_ids_skips_unknown(self, taxonomy):
        found = taxonomy.get_synsets_from_ids(["n-dog", "nope", "n-cat"])
        assert [s.id for s in found] == ["n-dog", "n-cat"]

    def test_get_synsets_by_pos(self, taxonomy):
        taxonomy.add_synset(make_synset("v-run", "run", pos=PartOfSpeech.VERB))
        assert [s.id for s in taxonomy.get_synsets_by_pos("v")] == ["v-run"]
        assert len(taxonomy.get_synsets_by_pos(PartOfSpeech.NOUN)) == 6


class TestLiteralQueries:

    def test_open_sense_matches_any(self, taxonomy):
        assert taxonomy.contains_literal(Literal("cat"))
        assert taxonomy.contains_literal(Literal("cat", "1"))
        assert not taxonomy.contains_literal(Literal("cat", "2"))

    def test_filter_by_pos(self, taxonomy):
        taxonomy.add_synset(make_synset("v-dog", "dog", pos=PartOfSpeech.VERB))
        assert taxonomy.get_ids_from_literal(Literal("dog"), "v") == ["v-dog"]
        assert taxonomy.get_ids_from_literal(Literal("dog")) == ["n-dog", "v-dog"]

    def test_resolve_without_sense_takes_first(self, taxonomy):
        taxonomy.add_synset(make_synset("n-cat2", "cat"))
        assert taxonomy.get_synset_from_literal(Literal("cat")).id == "n-cat"

    def test_resolve_with_sense(self, empty_network):
        a = make_synset("A", "bank")
        b = make_synset("B", "bank")
        b.literals[0] = Literal("bank", "2")
        empty_network.add_synsets([a, b])
        assert empty_network.get_synset_from_literal(Literal("bank", "2")).id == "B"
        assert empty_network.get_synset_from_literal(Literal("bank", "3")) is None

    def test_resolve_unknown_word(self, taxonomy):
        assert taxonomy.get_synset_from_literal(Literal("unicorn")) is None


class TestCopy:

    def test_shallow_copy_has_own_indices(self, taxonomy):
        clone = taxonomy.copy()
        clone.add_synset(make_synset("n-new", "new"))
        assert "n-new" not in taxonomy
        assert clone.get_synset_by_id("n-cat") is taxonomy.get_synset_by_id("n-cat")

    def test_deep_copy_clones_synsets(self, taxonomy):
        clone = taxonomy.copy(deep=True)
        assert clone.get_synset_by_id("n-cat") == taxonomy.get_synset_by_id("n-cat")
        assert clone.get_synset_by_id("n-cat") is not taxonomy.get_synset_by_id("n-cat")


class TestStats:

    def test_counts(self, taxonomy):
        taxonomy.add_synset(make_synset("v-run", "run", pos=PartOfSpeech.VERB))
        empty = make_synset("n-gap", pos=PartOfSpeech.NOUN)
        empty.non_lexicalized = True
        taxonomy.add_synset(empty)

        stats = taxonomy.stats()
        assert stats.total_synsets == 8
        assert stats.by_pos[PartOfSpeech.NOUN].synsets == 7
        assert stats.by_pos[PartOfSpeech.NOUN].literals == 7
        assert stats.by_pos[PartOfSpeech.NOUN].non_lexicalized == 1
        assert stats.by_pos[PartOfSpeech.VERB].synsets == 1
        assert stats.total_literals == 8
        assert stats.relation_frequency["hypernym"] == 5
        assert stats.relation_count == 11
        assert "Relation Frequency table" in stats.format()
