from unittest.mock import MagicMock, patch
from shutterlab.domain.models import SettingState
from shutterlab.presentation.components.controls import render_controls
from shutterlab.presentation.components.feedback import render_feedback, render_actions
from shutterlab.presentation.components.meter import render_meter
from shutterlab.presentation.state.state_manager import submit_exposure, reset_submission
from shutterlab.presentation.state.view_models import ExposureViewModel
from shutterlab.services.simulator import ExposureSimulator


def make_vm(settings=None, submit=False):
    simulator = ExposureSimulator(settings)
    if submit:
        simulator.submit()
    return ExposureViewModel(simulator.view())


def test_view_model_defaults():
    vm = make_vm()
    assert vm.exposure_value == 7
    assert vm.meter_value == 0.0
    assert vm.meter_caption == "-2.0 stops"
    assert vm.settings_summary == "1/60s · f5.6 · ISO 400 · Shade"
    assert not vm.has_submitted
    assert vm.status_label is None
    assert vm.feedback_text is None


def test_view_model_submitted():
    vm = make_vm(submit=True)
    assert vm.has_submitted
    assert vm.status_label == "Too dark"
    assert not vm.is_perfect
    assert vm.feedback_text.startswith("Your photo is underexposed")


def test_view_model_ideal():
    vm = make_vm(SettingState(iso_index=5), submit=True)
    assert vm.meter_caption == "0.0 stops (ideal)"
    assert vm.status_label == "Correct exposure"
    assert vm.is_perfect


@patch("shutterlab.presentation.components.controls.st")
def test_render_controls(mock_st):
    mock_col = MagicMock()
    mock_st.columns.return_value = [mock_col, mock_col]

    render_controls()

    mock_st.columns.assert_called_once_with(2)
    assert mock_st.select_slider.call_count == 4

    keys = [kwargs["key"] for _, kwargs in mock_st.select_slider.call_args_list]
    assert keys == ["shutter_speed_index", "iso_index", "aperture_index", "lighting_index"]

    args, kwargs = mock_st.select_slider.call_args_list[0]
    assert args[0] == "Shutter speed"
    assert kwargs["options"] == list(range(8))
    assert kwargs["format_func"](3) == "1/60"

    _, kwargs = mock_st.select_slider.call_args_list[3]
    assert kwargs["options"] == list(range(5))
    assert kwargs["format_func"](4) == "Daylight"


@patch("shutterlab.presentation.components.meter.st")
def test_render_meter(mock_st):
    mock_col = MagicMock()
    mock_st.columns.return_value = [mock_col, mock_col]

    render_meter(make_vm(SettingState(lighting_index=4)))

    mock_st.metric.assert_called_once_with("Exposure value", 13)
    mock_st.progress.assert_called_once_with(1.0, text="Meter: +2.0 stops")


@patch("shutterlab.presentation.components.feedback.st")
def test_render_feedback_unsubmitted(mock_st):
    render_feedback(make_vm())

    mock_st.info.assert_called_once()
    mock_st.warning.assert_not_called()
    mock_st.success.assert_not_called()


@patch("shutterlab.presentation.components.feedback.st")
def test_render_feedback_paths(mock_st):
    render_feedback(make_vm(submit=True))
    mock_st.warning.assert_called_once()
    mock_st.subheader.assert_called_once_with("Too dark")

    render_feedback(make_vm(SettingState(iso_index=4), submit=True))
    mock_st.success.assert_called_once()


@patch("shutterlab.presentation.components.feedback.st")
def test_render_actions_wires_callbacks(mock_st):
    mock_col = MagicMock()
    mock_st.columns.return_value = [mock_col, mock_col]

    render_actions()

    assert mock_st.button.call_count == 2
    _, kwargs = mock_st.button.call_args_list[0]
    assert kwargs["key"] == "submit_btn"
    assert kwargs["type"] == "primary"
    assert kwargs["on_click"] is submit_exposure

    _, kwargs = mock_st.button.call_args_list[1]
    assert kwargs["key"] == "reset_btn"
    assert kwargs["on_click"] is reset_submission
