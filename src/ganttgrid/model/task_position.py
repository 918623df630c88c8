# SPDX-License-Identifier: MIT

from typing import TypedDict


class TaskPosition(TypedDict):
    left_percent: float
    width_percent: float
