# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DayCell(TypedDict):
    date: pendulum.Date
    is_weekend: bool
    is_today: bool
