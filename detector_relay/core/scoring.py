"""
Score extraction and normalization for detector responses.

The detector is a third-party API whose response shape has changed over time,
so the score is looked up through an ordered list of accessors, one per known
shape. The first accessor that finds a JSON number wins; later ones are not
consulted even if the winning value then fails normalization.

Candidate selection is a type check only: a present but non-numeric value
(string, bool, null) is skipped, while NaN or a negative number is selected
and rejected by normalize_probability().
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional

from detector_relay.core.errors import InvalidScoreError, ScoreNotFoundError

logger = logging.getLogger(__name__)

Accessor = Callable[[dict], Optional[float]]


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass but a JSON true/false is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except OverflowError:
        # integer beyond float range; rejected later as non-finite
        return math.inf if value > 0 else -math.inf


def _field(name: str) -> Accessor:
    def access(response: dict) -> Optional[float]:
        return _as_number(response.get(name))
    access.__name__ = name
    return access


def _nested(parent: str, name: str) -> Accessor:
    def access(response: dict) -> Optional[float]:
        container = response.get(parent)
        if not isinstance(container, dict):
            return None
        return _as_number(container.get(name))
    access.__name__ = f"{parent}.{name}"
    return access


def _first_in_list(parent: str, name: str) -> Accessor:
    def access(response: dict) -> Optional[float]:
        items = response.get(parent)
        if not isinstance(items, list):
            return None
        for item in items:
            if isinstance(item, dict):
                value = _as_number(item.get(name))
                if value is not None:
                    return value
        return None
    access.__name__ = f"{parent}[].{name}"
    return access


# Priority order matters: first match wins.
SCORE_ACCESSORS: tuple[Accessor, ...] = (
    _field("ai_probability"),
    _field("aiProbability"),
    _field("score"),
    _field("confidence"),
    _nested("result", "score"),
    _first_in_list("tasks", "score"),
    _first_in_list("models", "score"),
)


def _round2(value: float) -> float:
    # Ties go up (2.125 -> 2.13), unlike round() which picks the even digit
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def normalize_probability(value: float) -> float:
    """
    Map a raw detector score onto the 0–100 scale, rounded to 2 decimals.

    Values in [0, 1] are probabilities and get scaled; values in (1, 100]
    are already percentages. Anything else is rejected.
    """
    if not math.isfinite(value):
        raise InvalidScoreError("El puntaje de IA no es un número.")
    if value < 0:
        raise InvalidScoreError("El puntaje de IA no puede ser negativo.")
    if value <= 1:
        return _round2(value * 100)
    if value <= 100:
        return _round2(value)
    raise InvalidScoreError("El puntaje de IA debe estar entre 0 y 100.")


def find_raw_score(detector_response: Any) -> tuple[str, float]:
    """Return (accessor name, raw value) of the first candidate holding a number."""
    if isinstance(detector_response, dict):
        for accessor in SCORE_ACCESSORS:
            value = accessor(detector_response)
            if value is not None:
                return accessor.__name__, value
    raise ScoreNotFoundError()


def extract_ai_percentage(detector_response: Any) -> float:
    source, raw = find_raw_score(detector_response)
    logger.debug(f"[SCORE] Using '{source}' = {raw}")
    return normalize_probability(raw)
