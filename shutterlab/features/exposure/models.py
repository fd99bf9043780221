from dataclasses import dataclass
from typing import Dict, Any

EXPOSURE_CONSTANTS: Dict[str, Any] = {
    "ideal_exposure_value": 10,  # Centre of the correct band, not physically derived
    "correct_tolerance": 1,  # +/- units around the ideal still counted correct
    "meter_limit_stops": 2.0,  # Meter display bound
}


@dataclass(frozen=True)
class ExposureCalibration:
    """
    Calibration of the simplified exposure model.
    """

    ideal_exposure_value: int = EXPOSURE_CONSTANTS["ideal_exposure_value"]
    correct_tolerance: int = EXPOSURE_CONSTANTS["correct_tolerance"]
    meter_limit_stops: float = EXPOSURE_CONSTANTS["meter_limit_stops"]

    @property
    def lower_correct_bound(self) -> int:
        return self.ideal_exposure_value - self.correct_tolerance

    @property
    def upper_correct_bound(self) -> int:
        return self.ideal_exposure_value + self.correct_tolerance


DEFAULT_CALIBRATION = ExposureCalibration()
