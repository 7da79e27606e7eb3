"""AppContext: the object behind ``@click.pass_obj``.

Built once by the root group. It applies the logging and telemetry
switches, hands out services bound to the resolved settings, and owns
result emission (stdout or stderr, and the exit code).
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from dashkit.config.logging import configure_logging
from dashkit.output.formatters import OutputSettings, format_result
from dashkit.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from dashkit.config.settings import DashSettings
    from dashkit.services.document import DocumentService
    from dashkit.services.result import ServiceResult
    from dashkit.services.sequence import SequenceService
    from dashkit.services.text import TextService


class AppContext:
    """Shared state for one CLI invocation.

    Services are created on first access so ``--help`` and ``--examples``
    never import more than the command modules.
    """

    def __init__(self, settings: DashSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @cached_property
    def documents(self) -> DocumentService:
        from dashkit.services.document import DocumentService

        return DocumentService(self.settings)

    @cached_property
    def text(self) -> TextService:
        from dashkit.services.text import TextService

        return TextService(self.settings)

    @cached_property
    def sequence(self) -> SequenceService:
        from dashkit.services.sequence import SequenceService

        return SequenceService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            indent=self.settings.output.indent,
            sort_keys=self.settings.output.sort_keys,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with status 1.

        Warnings of a successful result go to stderr in human mode; the
        JSON payload already carries them.
        """
        settings = self.output_settings
        rendered = format_result(result, settings=settings)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)
        click.echo(rendered)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
