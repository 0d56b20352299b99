"""Custom exception hierarchy for wordnet-graph."""


class WordnetGraphError(Exception):
    """Base exception for all wordnet-graph errors."""


class SynsetNotFoundError(WordnetGraphError, KeyError):
    """Synset (or literal) required by an operation doesn't exist."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class RelationFilterError(WordnetGraphError):
    """No relation left to analyze after applying the walk's filter."""


class WalkExhaustedError(WordnetGraphError):
    """A walk was advanced after its queue ran empty."""


class ConflictError(WordnetGraphError):
    """Two networks hold different content under the same synset ID."""

    def __init__(self, message: str, synset_id: str | None = None) -> None:
        super().__init__(message)
        self.synset_id = synset_id


class SimilarityError(WordnetGraphError):
    """Degenerate similarity computation (e.g. zero Jiang-Conrath distance)."""


class NoCommonSubsumerError(SimilarityError):
    """The two synsets share no ancestor under the chosen relations."""


class TargetUnreachableError(SimilarityError):
    """The walk was exhausted before reaching the target synset."""


class ConfigError(WordnetGraphError):
    """Invalid settings (malformed YAML, unknown key, wrong type)."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        super().__init__(message)


class DataImportError(WordnetGraphError):
    """Failed to import data from an external source."""
