# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """Typer group whose command names carry their aliases, e.g. "task, t"."""

    _ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

    COMMAND_ORDER = ("config, c", "task, t", "timeline, tl", "export, x")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._resolve_alias(cmd_name))

    def _resolve_alias(self, cmd_name: str) -> str:
        for name in self.commands:
            if cmd_name in self._ALIAS_SEPARATOR.split(name):
                return name
        return cmd_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        # Typer registers sub-apps before plain commands, help reads better in this order
        ordered = [name for name in self.COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
