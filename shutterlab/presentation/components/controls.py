from typing import Sequence
import streamlit as st
from shutterlab.domain.constants import (
    SHUTTER_SPEEDS,
    APERTURES,
    ISO_VALUES,
    LIGHTING_CONDITIONS,
)


def render_index_slider(
    label: str,
    options: Sequence[str],
    key: str,
    help_text: str = "",
) -> None:
    """
    Discrete slider whose value is the index into options.
    """
    st.select_slider(
        label,
        options=list(range(len(options))),
        format_func=lambda i: options[i],
        key=key,
        help=help_text,
    )


def render_controls() -> None:
    c1, c2 = st.columns(2)
    with c1:
        render_index_slider(
            "Shutter speed",
            SHUTTER_SPEEDS,
            "shutter_speed_index",
            help_text="Slower shutter = more light, more motion blur.",
        )
        render_index_slider(
            "ISO",
            ISO_VALUES,
            "iso_index",
            help_text="Higher ISO = brighter image, more noise.",
        )
    with c2:
        render_index_slider(
            "Aperture",
            APERTURES,
            "aperture_index",
            help_text="Smaller f-number = wider opening = more light.",
        )
        render_index_slider(
            "Lighting",
            LIGHTING_CONDITIONS,
            "lighting_index",
            help_text="Ambient light in the scene.",
        )
