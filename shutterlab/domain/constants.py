from typing import Tuple

# Slow (more light) -> fast (less light)
SHUTTER_SPEEDS: Tuple[str, ...] = (
    "1/8",
    "1/15",
    "1/30",
    "1/60",
    "1/125",
    "1/250",
    "1/500",
    "1/1000",
)

# Narrow (less light) -> wide (more light)
APERTURES: Tuple[str, ...] = (
    "f16",
    "f11",
    "f8",
    "f5.6",
    "f4",
    "f2.8",
    "f2",
    "f1.4",
)

ISO_VALUES: Tuple[str, ...] = (
    "100",
    "200",
    "400",
    "800",
    "1600",
    "3200",
    "6400",
    "12800",
)

LIGHTING_CONDITIONS: Tuple[str, ...] = (
    "Night",
    "Indoors",
    "Shade",
    "Overcast",
    "Daylight",
)

# Parallel to LIGHTING_CONDITIONS. Not evenly spaced, keep as is.
LIGHTING_STOP_OFFSETS: Tuple[int, ...] = (-4, -3, -2, 3, 4)

MAX_SETTING_INDEX = len(SHUTTER_SPEEDS) - 1
MAX_LIGHTING_INDEX = len(LIGHTING_CONDITIONS) - 1
