from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class FeedbackClassification(Enum):
    PERFECT = "perfect"
    UNDEREXPOSED = "underexposed"
    OVEREXPOSED = "overexposed"


@dataclass(frozen=True)
class Feedback:
    """
    Qualitative assessment of a submitted snapshot.
    """

    classification: FeedbackClassification
    magnitude_stops: float = 0.0
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    lighting_hint: Optional[str] = None

    @property
    def is_perfect(self) -> bool:
        return self.classification is FeedbackClassification.PERFECT

    @property
    def headline(self) -> str:
        if self.is_perfect:
            return "Perfect exposure! Your settings are well balanced."
        return (
            f"Your photo is {self.classification.value} "
            f"by about {self.magnitude_stops:.1f} stops."
        )

    @property
    def text(self) -> str:
        """
        Full message: headline, then one line per suggestion, then the hint.
        """
        lines = [self.headline]
        if self.suggestions:
            lines.append("Try:")
            lines.extend(f"- {s}" for s in self.suggestions)
        if self.lighting_hint:
            lines.append(self.lighting_hint)
        return "\n".join(lines)
