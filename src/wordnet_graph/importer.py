"""Build a Network from a lexicon served by the ``wn`` library."""

from __future__ import annotations

import logging
from typing import Any

from wordnet_graph.config import DEFAULT_SETTINGS, Settings
from wordnet_graph.exceptions import DataImportError
from wordnet_graph.models import Literal, PartOfSpeech, Relation, Synset
from wordnet_graph.network import Network

logger = logging.getLogger(__name__)


def import_from_wn(
    source: Any,
    *,
    settings: Settings = DEFAULT_SETTINGS,
) -> Network:
    """Load every synset of a ``wn`` lexicon into a new Network.

    Args:
        source: A lexicon specifier (e.g. ``"oewn:2024"``) or an object with
            a ``synsets()`` method, such as ``wn.Wordnet``.
        settings: Settings attached to the resulting network.

    Raises:
        DataImportError: If ``wn`` cannot open the lexicon.
    """
    if isinstance(source, str):
        import wn

        try:
            source = wn.Wordnet(source)
        except wn.Error as e:
            raise DataImportError(f"Failed to open lexicon {source!r}: {e}") from e

    synsets = [_convert_synset(ss) for ss in source.synsets()]
    return Network(synsets, settings=settings)


def _convert_synset(wn_synset: Any) -> Synset:
    """Translate one ``wn.Synset`` into a Synset record."""
    pos = PartOfSpeech.from_tag(wn_synset.pos or "")
    if pos is None:
        logger.warning(
            "Synset %s has unsupported POS %r", wn_synset.id, wn_synset.pos
        )

    literals = [_convert_sense(sense) for sense in wn_synset.senses()]
    definition = wn_synset.definition()

    relations = []
    for rel_type, targets in wn_synset.relations().items():
        for target in targets:
            relations.append(Relation(wn_synset.id, target.id, rel_type))

    pwn20 = []
    ili = wn_synset.ili
    if ili is not None:
        pwn20.append(getattr(ili, "id", ili))

    return Synset(
        id=wn_synset.id,
        pos=pos,
        literals=literals,
        definition=definition,
        usage=list(wn_synset.examples()),
        relations=relations,
        non_lexicalized=not wn_synset.lexicalized(),
        domain=wn_synset.lexfile(),
        pwn20=pwn20,
    )


def _convert_sense(wn_sense: Any) -> Literal:
    """Literal for a sense; the sense tag is its 1-based rank for the word."""
    word = wn_sense.word()
    ranked = [s.id for s in word.senses()]
    try:
        tag = str(ranked.index(wn_sense.id) + 1)
    except ValueError:
        logger.warning("Sense %s missing from its word's senses", wn_sense.id)
        tag = None
    return Literal(word.lemma(), tag)
