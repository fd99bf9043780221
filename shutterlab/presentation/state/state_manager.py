import streamlit as st
from shutterlab.domain.models import INDEX_BOUNDS, SettingState
from shutterlab.kernel.system.logging_config import get_logger
from shutterlab.kernel.validation import SettingOutOfRangeError, validate_int
from shutterlab.services.simulator import ExposureSimulator

logger = get_logger("state")

# Widget keys double as SettingState field names
SETTING_KEYS = tuple(INDEX_BOUNDS.keys())


def init_session_state() -> None:
    """
    Creates the simulator on first run and seeds slider keys with its snapshot.
    """
    if "simulator" not in st.session_state:
        st.session_state.simulator = ExposureSimulator()

    simulator: ExposureSimulator = st.session_state.simulator
    for key, val in simulator.settings.to_dict().items():
        if st.session_state.get(key) is None:
            st.session_state[key] = val


def sync_from_widgets() -> None:
    """
    Pushes current slider values into the simulator.
    Must run before widgets are instantiated for this rerun.
    """
    simulator: ExposureSimulator = st.session_state.simulator
    current = simulator.settings.to_dict()
    data = {
        key: validate_int(st.session_state.get(key), current[key])
        for key in SETTING_KEYS
    }

    try:
        simulator.load(SettingState.from_dict(data))
    except SettingOutOfRangeError as e:
        logger.warning(f"Ignoring widget state: {e}")
        for key, val in current.items():
            st.session_state[key] = val


def submit_exposure() -> None:
    # Button callbacks run before the script body, so catch up with the sliders
    sync_from_widgets()
    simulator: ExposureSimulator = st.session_state.simulator
    simulator.submit()


def reset_submission() -> None:
    simulator: ExposureSimulator = st.session_state.simulator
    simulator.reset()
