import streamlit as st
from shutterlab.kernel.system.config import APP_CONFIG
from shutterlab.presentation.components.controls import render_controls
from shutterlab.presentation.components.feedback import render_actions, render_feedback
from shutterlab.presentation.components.meter import render_meter
from shutterlab.presentation.state.state_manager import (
    init_session_state,
    sync_from_widgets,
)
from shutterlab.presentation.state.view_models import ExposureViewModel


def main() -> None:
    """
    Primary Application Entry Point.
    """
    st.set_page_config(page_title=APP_CONFIG.page_title, layout=APP_CONFIG.page_layout)
    init_session_state()

    # Widget values from the previous interaction reach the model first
    sync_from_widgets()

    st.title(APP_CONFIG.page_title)
    render_controls()

    vm = ExposureViewModel()
    render_meter(vm)
    render_actions()
    render_feedback(vm)


if __name__ == "__main__":
    main()
