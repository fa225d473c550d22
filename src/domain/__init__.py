"""Domain layer: errors, schemas, normalization."""

from .errors import (
    CoffeeError,
    MissingInputError,
    UpstreamAuthDeniedError,
    UpstreamShapeMismatchError,
    UpstreamThrottledError,
    UpstreamUnknownError,
    UpstreamValidationError,
)
from .normalize import default_suggestion, normalize
from .schemas import CoffeeRequest, CoffeeSuggestion, ConfidenceTier, confidence_tier

__all__ = [
    "CoffeeError",
    "MissingInputError",
    "UpstreamAuthDeniedError",
    "UpstreamValidationError",
    "UpstreamThrottledError",
    "UpstreamShapeMismatchError",
    "UpstreamUnknownError",
    "CoffeeRequest",
    "CoffeeSuggestion",
    "ConfidenceTier",
    "confidence_tier",
    "default_suggestion",
    "normalize",
]
