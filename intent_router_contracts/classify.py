"""Classification request/response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_TEXT_LENGTH = 2000
MAX_BATCH_SIZE = 100

IntentType = Literal[
    "ingredient",
    "product",
    "symptom",
    "question",
    "condition",
    "comparison",
    "unknown",
]
Destination = Literal["search", "concierge"]
ConfidenceLevel = Literal["high", "medium", "low"]
MethodType = Literal["pattern", "dictionary", "ai", "fallback"]


class ClassifyRequest(BaseModel):
    """Raw search-box text. Empty and whitespace-only text is valid."""

    text: str = Field(..., max_length=MAX_TEXT_LENGTH)


class ClassifyBatchRequest(BaseModel):
    texts: list[str] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)


class EntitiesPayload(BaseModel):
    """Extracted entities per category.

    New categories may be added; clients must ignore keys they do not know
    and read an empty list as "not found".
    """

    model_config = ConfigDict(extra="allow")

    ingredients: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)


class ClassificationResponse(BaseModel):
    """Routing recommendation for one query.

    ``destination`` is advisory; ``method`` is provenance only and says nothing
    about quality.
    """

    intent: IntentType
    destination: Destination
    confidence: ConfidenceLevel
    entities: EntitiesPayload
    normalized_input: str
    method: MethodType
    cache_key: str
    cached: bool = False


class ClassifyBatchResponse(BaseModel):
    results: list[ClassificationResponse]
    processing_time_ms: int = Field(..., ge=0)

    @property
    def concierge_count(self) -> int:
        return sum(1 for r in self.results if r.destination == "concierge")
