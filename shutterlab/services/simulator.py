from dataclasses import dataclass
from typing import Optional
from shutterlab.domain.models import (
    SettingState,
    SettingLabels,
    ExposureResult,
    SubmissionState,
)
from shutterlab.features.exposure.logic import evaluate_exposure
from shutterlab.features.feedback.logic import generate_feedback
from shutterlab.kernel.system.config import DEFAULT_SETTING_STATE
from shutterlab.kernel.system.logging_config import get_logger

logger = get_logger("simulator")


@dataclass(frozen=True)
class ExposureView:
    """
    Everything the presentation layer reads after a change.
    """

    settings: SettingState
    labels: SettingLabels
    result: ExposureResult
    submission: SubmissionState


class ExposureSimulator:
    """
    Pure domain simulator session.
    Single writer of the setting snapshot and the submission state, no UI coupling.
    """

    def __init__(self, settings: Optional[SettingState] = None):
        self._settings = settings or DEFAULT_SETTING_STATE
        self._submission = SubmissionState()

    @property
    def settings(self) -> SettingState:
        return self._settings

    @property
    def result(self) -> ExposureResult:
        return evaluate_exposure(self._settings)

    @property
    def submission(self) -> SubmissionState:
        return self._submission

    @property
    def labels(self) -> SettingLabels:
        return self._settings.labels()

    @property
    def is_correct(self) -> Optional[bool]:
        """
        Correctness flag shown alongside feedback. None while unsubmitted.
        """
        if not self._submission.has_submitted:
            return None
        return self.result.is_correct

    def set_shutter_speed_index(self, index: int) -> None:
        self._update("shutter_speed_index", index)

    def set_aperture_index(self, index: int) -> None:
        self._update("aperture_index", index)

    def set_iso_index(self, index: int) -> None:
        self._update("iso_index", index)

    def set_lighting_index(self, index: int) -> None:
        self._update("lighting_index", index)

    def load(self, settings: SettingState) -> None:
        """
        Replaces the whole snapshot at once.
        """
        if settings == self._settings:
            return
        self._settings = settings
        self._refresh_feedback()

    def submit(self) -> SubmissionState:
        self._submission = SubmissionState(
            has_submitted=True, feedback=generate_feedback(self._settings)
        )
        logger.info(
            f"Submitted {self._settings.to_dict()}: "
            f"{self._submission.feedback.classification.value}"
        )
        return self._submission

    def reset(self) -> None:
        """
        Clears the submission. Control indices are left untouched.
        """
        self._submission = SubmissionState()
        logger.info("Submission reset")

    def view(self) -> ExposureView:
        return ExposureView(
            settings=self._settings,
            labels=self.labels,
            result=self.result,
            submission=self._submission,
        )

    def _update(self, name: str, index: int) -> None:
        # Validation happens in SettingState; a failed update leaves state intact
        new_settings = self._settings.with_index(name, index)
        logger.debug(f"{name} -> {index}")
        self.load(new_settings)

    def _refresh_feedback(self) -> None:
        # Once submitted, feedback follows the live snapshot without resubmitting
        if self._submission.has_submitted:
            self._submission = SubmissionState(
                has_submitted=True, feedback=generate_feedback(self._settings)
            )
