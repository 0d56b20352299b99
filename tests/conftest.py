"""Shared test fixtures for wordnet-graph."""

import pytest

from wordnet_graph import Literal, Network, PartOfSpeech, Relation, Synset


def make_synset(id, *words, pos=PartOfSpeech.NOUN, ic=0.0, definition=None,
                relations=()):
    """Build a synset; *relations* are (type, target_id) pairs."""
    return Synset(
        id=id,
        pos=pos,
        literals=[Literal(w, "1") for w in words],
        definition=definition if definition is not None else f"gloss of {id}",
        relations=[Relation(id, target, rel) for rel, target in relations],
        information_content=ic,
    )


@pytest.fixture
def empty_network():
    return Network()


@pytest.fixture
def taxonomy():
    """Small noun hierarchy with hypernym/hyponym links and IC values.

    entity
      animal
        cat   (also: near_antonym dog)
        dog
      plant
        tree
    """
    synsets = [
        make_synset("n-entity", "entity", ic=0.5, relations=[
            ("hyponym", "n-animal"), ("hyponym", "n-plant"),
        ]),
        make_synset("n-animal", "animal", "beast", ic=2.0, relations=[
            ("hypernym", "n-entity"),
            ("hyponym", "n-cat"), ("hyponym", "n-dog"),
        ]),
        make_synset("n-plant", "plant", ic=2.5, relations=[
            ("hypernym", "n-entity"), ("hyponym", "n-tree"),
        ]),
        make_synset("n-cat", "cat", ic=6.0, relations=[
            ("hypernym", "n-animal"), ("near_antonym", "n-dog"),
        ]),
        make_synset("n-dog", "dog", ic=5.0, relations=[
            ("hypernym", "n-animal"),
        ]),
        make_synset("n-tree", "tree", ic=7.0, relations=[
            ("hypernym", "n-plant"),
        ]),
    ]
    return Network(synsets)
