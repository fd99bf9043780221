from typing import Optional
import streamlit as st
from shutterlab.features.feedback.models import FeedbackClassification
from shutterlab.services.simulator import ExposureView

STATUS_LABELS = {
    FeedbackClassification.PERFECT: "Correct exposure",
    FeedbackClassification.UNDEREXPOSED: "Too dark",
    FeedbackClassification.OVEREXPOSED: "Too bright",
}


class ExposureViewModel:
    """
    Formats simulator outputs for the Streamlit widgets.
    """

    def __init__(self, view: Optional[ExposureView] = None):
        self.view = view or st.session_state.simulator.view()

    @property
    def exposure_value(self) -> int:
        return self.view.result.exposure_value

    @property
    def meter_value(self) -> float:
        return self.view.result.meter_position

    @property
    def meter_caption(self) -> str:
        stops = self.view.result.stops_from_ideal
        if stops == 0:
            return "0.0 stops (ideal)"
        return f"{stops:+.1f} stops"

    @property
    def settings_summary(self) -> str:
        labels = self.view.labels
        return f"{labels.shutter_speed}s · {labels.aperture} · ISO {labels.iso} · {labels.lighting}"

    @property
    def has_submitted(self) -> bool:
        return self.view.submission.has_submitted

    @property
    def status_label(self) -> Optional[str]:
        feedback = self.view.submission.feedback
        if feedback is None:
            return None
        return STATUS_LABELS[feedback.classification]

    @property
    def is_perfect(self) -> bool:
        feedback = self.view.submission.feedback
        return feedback is not None and feedback.is_perfect

    @property
    def feedback_text(self) -> Optional[str]:
        return self.view.submission.feedback_text
