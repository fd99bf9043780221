import streamlit as st
from shutterlab.presentation.state.view_models import ExposureViewModel


def render_meter(vm: ExposureViewModel) -> None:
    """
    Light meter bounded to the clamped stop range, plus the raw exposure value.
    """
    st.caption(vm.settings_summary)
    m1, m2 = st.columns([1, 3])
    with m1:
        st.metric("Exposure value", vm.exposure_value)
    with m2:
        st.progress(vm.meter_value, text=f"Meter: {vm.meter_caption}")
        st.caption("-2 · · · 0 · · · +2")
