# SPDX-License-Identifier: MIT

# Column heading color for planned time tables
HEADING_COLOR = "#00aeef"

DAY_TITLE_COLOR = "bold"
EMPTY_DAY_COLOR = "italic"
ERROR_COLOR = "red"
WARNING_COLOR = "yellow"
SUCCESS_COLOR = "green"
