from dataclasses import dataclass, asdict, replace
from typing import Dict, Any, Optional
from shutterlab.domain.constants import (
    SHUTTER_SPEEDS,
    APERTURES,
    ISO_VALUES,
    LIGHTING_CONDITIONS,
    MAX_SETTING_INDEX,
    MAX_LIGHTING_INDEX,
)
from shutterlab.features.exposure.models import DEFAULT_CALIBRATION
from shutterlab.features.feedback.models import Feedback
from shutterlab.kernel.validation import validate_index

# Upper bound per control, keyed by field name
INDEX_BOUNDS: Dict[str, int] = {
    "shutter_speed_index": MAX_SETTING_INDEX,
    "aperture_index": MAX_SETTING_INDEX,
    "iso_index": MAX_SETTING_INDEX,
    "lighting_index": MAX_LIGHTING_INDEX,
}


@dataclass(frozen=True)
class SettingLabels:
    shutter_speed: str
    aperture: str
    iso: str
    lighting: str


@dataclass(frozen=True)
class SettingState:
    """
    Snapshot of the four camera/scene controls.
    """

    shutter_speed_index: int = 3
    aperture_index: int = 3
    iso_index: int = 2
    lighting_index: int = 2

    def __post_init__(self) -> None:
        for name, upper in INDEX_BOUNDS.items():
            validate_index(name, getattr(self, name), upper)

    def with_index(self, name: str, value: int) -> "SettingState":
        """
        Returns a new snapshot with a single control changed.
        """
        if name not in INDEX_BOUNDS:
            raise KeyError(f"Unknown setting: {name}")
        return replace(self, **{name: value})

    def labels(self) -> SettingLabels:
        return SettingLabels(
            shutter_speed=SHUTTER_SPEEDS[self.shutter_speed_index],
            aperture=APERTURES[self.aperture_index],
            iso=ISO_VALUES[self.iso_index],
            lighting=LIGHTING_CONDITIONS[self.lighting_index],
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingState":
        """
        Builds a snapshot from session state. Unknown keys are dropped, missing keys use defaults.
        """
        valid_keys = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in data.items() if k in valid_keys and v is not None})


@dataclass(frozen=True)
class ExposureResult:
    """
    Derived exposure for one SettingState snapshot.
    """

    exposure_value: int
    stops_from_ideal: float
    is_correct: bool
    meter_limit_stops: float = DEFAULT_CALIBRATION.meter_limit_stops

    @property
    def meter_position(self) -> float:
        """
        Needle position on a 0.0-1.0 meter, 0.5 being ideal.
        """
        limit = self.meter_limit_stops
        return (self.stops_from_ideal + limit) / (2.0 * limit)


@dataclass(frozen=True)
class SubmissionState:
    """
    Result of the explicit submit action. Independent of the live ExposureResult.
    """

    has_submitted: bool = False
    feedback: Optional[Feedback] = None

    @property
    def feedback_text(self) -> Optional[str]:
        return self.feedback.text if self.feedback else None
