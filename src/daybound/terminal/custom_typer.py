# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r" ?, ?")


def command_aliases(registered_name: str) -> list[str]:
    """'sync, y' -> ['sync', 'y']"""
    return ALIAS_SEPARATOR.split(registered_name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as 'name, alias'"""

    def resolve_name(self, typed_name: str) -> str:
        for registered_name in self.commands:
            if typed_name in command_aliases(registered_name):
                return registered_name
        return typed_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_name(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        registered_name = name if name is not None else cmd.name
        # an alias of an already registered command is not added again
        resolved = self.resolve_name(registered_name or "")
        if resolved in self.commands and resolved != registered_name:
            return
        super().add_command(cmd, registered_name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists commands in workflow order instead of registration order"""

    desired_order = [
        "day, d",
        "recolor, rc",
        "config, c",
        "version, ve",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.desired_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
