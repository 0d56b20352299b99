"""wordnet-graph: traversal, set algebra and similarity over WordNet-style networks."""

__version__ = "0.1.0"

from .config import (
    Settings as Settings,
    DEFAULT_SETTINGS as DEFAULT_SETTINGS,
    load_settings as load_settings,
    configure_logging as configure_logging,
)

from .exceptions import (
    WordnetGraphError as WordnetGraphError,
    SynsetNotFoundError as SynsetNotFoundError,
    RelationFilterError as RelationFilterError,
    WalkExhaustedError as WalkExhaustedError,
    ConflictError as ConflictError,
    SimilarityError as SimilarityError,
    NoCommonSubsumerError as NoCommonSubsumerError,
    TargetUnreachableError as TargetUnreachableError,
    ConfigError as ConfigError,
    DataImportError as DataImportError,
)

from .models import (
    PartOfSpeech as PartOfSpeech,
    Literal as Literal,
    Relation as Relation,
    Synset as Synset,
    NetworkStats as NetworkStats,
    PosStats as PosStats,
    ValidationResult as ValidationResult,
    ValidationSeverity as ValidationSeverity,
)

from .relations import (
    WILDCARD as WILDCARD,
    HYPERNYMY_RELATIONS as HYPERNYMY_RELATIONS,
)

from .network import Network as Network

from .walk import (
    BreadthFirstWalk as BreadthFirstWalk,
    StepStatus as StepStatus,
    WalkStep as WalkStep,
)

from .operations import (
    diff as diff,
    complement as complement,
    intersection as intersection,
    union as union,
    merge as merge,
    get_path as get_path,
    get_path_between_literals as get_path_between_literals,
    path_reaches as path_reaches,
)

from .similarity import (
    distance as distance,
    hypernym_distance as hypernym_distance,
    lowest_common_subsumer as lowest_common_subsumer,
    resnik as resnik,
    lin as lin,
    jiang_conrath as jiang_conrath,
    jiang_conrath_distance as jiang_conrath_distance,
)

from .importer import import_from_wn as import_from_wn

from .validator import (
    validate_all as validate_all,
    validate_synset as validate_synset,
    validate_relations as validate_relations,
)

__all__ = [
    # Configuration
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "configure_logging",
    # Exceptions
    "WordnetGraphError",
    "SynsetNotFoundError",
    "RelationFilterError",
    "WalkExhaustedError",
    "ConflictError",
    "SimilarityError",
    "NoCommonSubsumerError",
    "TargetUnreachableError",
    "ConfigError",
    "DataImportError",
    # Models
    "PartOfSpeech",
    "Literal",
    "Relation",
    "Synset",
    "NetworkStats",
    "PosStats",
    "ValidationResult",
    "ValidationSeverity",
    # Constants
    "WILDCARD",
    "HYPERNYMY_RELATIONS",
    # Graph
    "Network",
    "BreadthFirstWalk",
    "StepStatus",
    "WalkStep",
    # Set algebra and paths
    "diff",
    "complement",
    "intersection",
    "union",
    "merge",
    "get_path",
    "get_path_between_literals",
    "path_reaches",
    # Similarity
    "distance",
    "hypernym_distance",
    "lowest_common_subsumer",
    "resnik",
    "lin",
    "jiang_conrath",
    "jiang_conrath_distance",
    # Collaborators
    "import_from_wn",
    "validate_all",
    "validate_synset",
    "validate_relations",
]
