# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Set once per invocation from config and the --no-header flag
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """Whether reports start with the application header."""
    return _show_header.get()
