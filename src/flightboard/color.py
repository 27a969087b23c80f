# SPDX-License-Identifier: MIT

# Fallback task bar colors, picked by type index parity (odd, even)
TASK_BAR_COLOR_ODD = "deep_sky_blue3"
TASK_BAR_COLOR_EVEN = "steel_blue"

# Ruler colors
RULER_TEXT_COLOR = "bold cyan"
RULER_ALTERNATE_BACKGROUND = "on grey23"
GROUP_NAME_COLOR = "plum1"


def get_default_task_color(type_index: int) -> str:
    return TASK_BAR_COLOR_ODD if type_index % 2 == 1 else TASK_BAR_COLOR_EVEN
