"""Click base classes carrying usage examples.

Commands declare ``examples`` as ``(command line, what it does)`` pairs.
``--examples`` prints them aligned and exits, keeping ``--help`` short. On
a group it also prints the examples of every subcommand.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

Example = tuple[str, str]


def format_examples(examples: Sequence[Example]) -> str:
    """Render *examples* as ``$ command  # what it does`` lines."""
    width = max(len(line) for line, _ in examples)
    return "\n".join(f"  $ {line.ljust(width)}  # {what}" for line, what in examples)


def collect_examples(cmd: click.Command) -> list[Example]:
    """Examples of *cmd* followed by those of its subcommands, without repeats."""
    found = list(getattr(cmd, "examples", ()))
    if isinstance(cmd, click.Group):
        for sub in cmd.commands.values():
            found.extend(example for example in collect_examples(sub) if example not in found)
    return found


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(format_examples(collect_examples(ctx.command)))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples.",
    )


class TrophicCommand(click.Command):
    """Command with an ``--examples`` flag when it declares examples."""

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option())


class TrophicGroup(click.Group):
    """Group whose ``--examples`` also covers its subcommands."""

    command_class = TrophicCommand

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option())
