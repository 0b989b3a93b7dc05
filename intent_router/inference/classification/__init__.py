"""Classification pipeline: records, preprocessing, tiers and orchestrator."""

from .result import (
    Classification,
    Confidence,
    Destination,
    EntityBundle,
    IntentLabel,
    Method,
    destination_for,
)
from .context import QueryContext
from .preprocessing import EntityExtractor, TextCleaner, normalize
from .tiers import (
    ENTITY_INTENT_RULES,
    DictionaryTier,
    EmptyInputTier,
    FallbackTier,
    FormatTier,
    PatternTier,
    PipelineTier,
    PreprocessingTier,
    classify_by_format,
    classify_by_pattern,
    infer_intent_from_entities,
)
from .orchestrator import IntentClassifier, build_tiers, classify, generate_cache_key

__all__ = [
    # Orchestrator
    "IntentClassifier",
    "build_tiers",
    "classify",
    "generate_cache_key",
    # Tiers
    "PipelineTier",
    "PreprocessingTier",
    "EmptyInputTier",
    "PatternTier",
    "DictionaryTier",
    "FormatTier",
    "FallbackTier",
    "ENTITY_INTENT_RULES",
    "classify_by_format",
    "classify_by_pattern",
    "infer_intent_from_entities",
    # Preprocessing
    "EntityExtractor",
    "TextCleaner",
    "normalize",
    # Types
    "Classification",
    "Confidence",
    "Destination",
    "EntityBundle",
    "IntentLabel",
    "Method",
    "QueryContext",
    "destination_for",
]
