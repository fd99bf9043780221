import streamlit as st
from shutterlab.presentation.state.state_manager import (
    submit_exposure,
    reset_submission,
)
from shutterlab.presentation.state.view_models import ExposureViewModel


def render_actions() -> None:
    b1, b2 = st.columns(2)
    with b1:
        st.button(
            "Take photo",
            key="submit_btn",
            type="primary",
            on_click=submit_exposure,
        )
    with b2:
        st.button(
            "Reset",
            key="reset_btn",
            type="secondary",
            on_click=reset_submission,
        )


def render_feedback(vm: ExposureViewModel) -> None:
    if not vm.has_submitted:
        st.info("Adjust the settings, then take a photo to get feedback.")
        return

    st.subheader(vm.status_label)
    if vm.is_perfect:
        st.success(vm.feedback_text)
    else:
        st.warning(vm.feedback_text)
