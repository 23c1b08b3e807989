"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Opens the wired stack lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trophic.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from trophic.config.settings import TrophicSettings
    from trophic.domain.types import Strategy
    from trophic.services.result import ServiceResult
    from trophic.wiring import Stack


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The stack is opened on first use so ``--help`` and ``--version`` never
    touch the database or the message queue.
    """

    def __init__(self, settings: TrophicSettings, *, strategy: Strategy | None = None) -> None:
        self.settings = settings
        self.strategy = strategy
        self._stack: Stack | None = None

        from trophic.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, log_sql=settings.log_sql
        )

        if settings.verbose:
            from trophic.services.telemetry import enable_telemetry

            enable_telemetry()

    def stack(self, *, catalog_path: Path | None = None) -> Stack:
        """The wired stack, opened on first call.

        Raises:
            ResolutionError: A collaborator or the catalog cannot be opened.
        """
        if self._stack is None:
            from trophic.wiring import open_stack

            self._stack = open_stack(
                self.settings, strategy=self.strategy, catalog_path=catalog_path
            )
        return self._stack

    def close(self) -> None:
        if self._stack is not None:
            self._stack.close()
            self._stack = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
