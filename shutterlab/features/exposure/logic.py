import numpy as np
from shutterlab.domain.constants import MAX_SETTING_INDEX, LIGHTING_STOP_OFFSETS
from shutterlab.domain.models import SettingState, ExposureResult
from shutterlab.features.exposure.models import DEFAULT_CALIBRATION, ExposureCalibration
from shutterlab.kernel.system.logging_config import get_logger

logger = get_logger("exposure")


def compute_exposure_value(state: SettingState) -> int:
    """
    Sums the light contributed by each control into a raw exposure value.

    Shutter index runs slow -> fast, i.e. towards less light, so it is inverted.
    Aperture and ISO indices already grow with light. Lighting adds a signed
    stop offset. No rounding or saturation happens here.
    """
    shutter_stops = MAX_SETTING_INDEX - state.shutter_speed_index
    lighting_stops = LIGHTING_STOP_OFFSETS[state.lighting_index]
    return shutter_stops + state.aperture_index + state.iso_index + lighting_stops


def compute_stops_from_ideal(
    state: SettingState, calibration: ExposureCalibration = DEFAULT_CALIBRATION
) -> float:
    """
    Deviation from the ideal exposure, clamped to the meter range.
    """
    deviation = compute_exposure_value(state) - calibration.ideal_exposure_value
    limit = calibration.meter_limit_stops
    return float(np.clip(deviation, -limit, limit))


def is_exposure_correct(
    state: SettingState, calibration: ExposureCalibration = DEFAULT_CALIBRATION
) -> bool:
    # Uses the raw value, the clamped stops cannot distinguish 12 from 25
    ev = compute_exposure_value(state)
    return calibration.lower_correct_bound <= ev <= calibration.upper_correct_bound


def evaluate_exposure(
    state: SettingState, calibration: ExposureCalibration = DEFAULT_CALIBRATION
) -> ExposureResult:
    """
    Computes the full ExposureResult for a snapshot.
    """
    result = ExposureResult(
        exposure_value=compute_exposure_value(state),
        stops_from_ideal=compute_stops_from_ideal(state, calibration),
        is_correct=is_exposure_correct(state, calibration),
        meter_limit_stops=calibration.meter_limit_stops,
    )
    logger.debug(
        f"EV {result.exposure_value} ({result.stops_from_ideal:+.1f} stops) "
        f"for {state.to_dict()}"
    )
    return result
