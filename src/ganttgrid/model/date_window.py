# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateWindow(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
