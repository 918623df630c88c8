# SPDX-License-Identifier: MIT

import atexit

from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.repository.task import TASK_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
