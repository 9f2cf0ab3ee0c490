"""Threshold decision on a normalized AI percentage."""

from dataclasses import dataclass


def format_percentage(value: float) -> str:
    # 87.0 -> "87", 87.5 -> "87.5"; values are <= 100 with 2 decimals so %g never truncates
    return f"{value:g}"


@dataclass(frozen=True)
class Verdict:
    is_ai: bool
    ai_percentage: float
    threshold: float

    @property
    def label(self) -> str:
        prefix = "ES IA" if self.is_ai else "NO ES IA"
        return f"{prefix} ({format_percentage(self.ai_percentage)}%)"


def decide(ai_percentage: float, threshold: float) -> Verdict:
    """Strictly above the threshold is AI; equal to it is not."""
    return Verdict(
        is_ai=ai_percentage > threshold,
        ai_percentage=ai_percentage,
        threshold=threshold,
    )
