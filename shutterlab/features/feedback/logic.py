from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from shutterlab.domain.models import SettingState
from shutterlab.features.exposure.logic import (
    compute_exposure_value,
    compute_stops_from_ideal,
    is_exposure_correct,
)
from shutterlab.features.exposure.models import DEFAULT_CALIBRATION, ExposureCalibration
from shutterlab.features.feedback.models import Feedback, FeedbackClassification

UNDEREXPOSED_SUGGESTIONS: Tuple[str, ...] = (
    "Use a slower shutter speed to let light in for longer.",
    "Open up to a wider aperture (smaller f-number).",
    "Raise the ISO to make the sensor more sensitive.",
)

OVEREXPOSED_SUGGESTIONS: Tuple[str, ...] = (
    "Use a faster shutter speed to cut the exposure time.",
    "Stop down to a narrower aperture (larger f-number).",
    "Lower the ISO to make the sensor less sensitive.",
)

# Keyed by lighting index. Shade (2) is the neutral condition and has no hint.
LIGHTING_HINTS: Mapping[int, str] = MappingProxyType(
    {
        0: "Night scenes need a lot of help: expect long exposures, a wide aperture and high ISO, ideally on a tripod.",
        1: "Indoor light is much dimmer than it looks to your eyes. Open up or raise the ISO before slowing the shutter too far.",
        3: "Overcast skies give soft, even light that is still bright. Start from a moderate ISO.",
        4: "Bright daylight is plenty of light. Remember the Sunny 16 rule: f16 at a shutter speed close to 1/ISO.",
    }
)


def classify_exposure(
    state: SettingState, calibration: ExposureCalibration = DEFAULT_CALIBRATION
) -> FeedbackClassification:
    if is_exposure_correct(state, calibration):
        return FeedbackClassification.PERFECT
    if compute_exposure_value(state) < calibration.lower_correct_bound:
        return FeedbackClassification.UNDEREXPOSED
    return FeedbackClassification.OVEREXPOSED


def get_lighting_hint(lighting_index: int) -> Optional[str]:
    return LIGHTING_HINTS.get(lighting_index)


def generate_feedback(
    state: SettingState, calibration: ExposureCalibration = DEFAULT_CALIBRATION
) -> Feedback:
    """
    Builds the feedback shown after a submit.

    Magnitude comes from the clamped meter reading, so it never exceeds the
    meter limit even when the raw deviation does.
    """
    classification = classify_exposure(state, calibration)
    if classification is FeedbackClassification.PERFECT:
        return Feedback(classification=classification)

    magnitude = round(abs(compute_stops_from_ideal(state, calibration)), 1)
    suggestions = (
        UNDEREXPOSED_SUGGESTIONS
        if classification is FeedbackClassification.UNDEREXPOSED
        else OVEREXPOSED_SUGGESTIONS
    )
    return Feedback(
        classification=classification,
        magnitude_stops=magnitude,
        suggestions=suggestions,
        lighting_hint=get_lighting_hint(state.lighting_index),
    )
