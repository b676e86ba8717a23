"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Callable, Protocol

import click

from PogoSearch.config import AppConfig
from PogoSearch.renderers import OutputWriter, create_output_writer
from PogoSearch.services import SearchStringService, create_search_string_service
from PogoSearch.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> bool: ...


CommandFactory = Callable[[SearchStringService, OutputWriter], Command]


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, service and writer creation, and turns
    failures into ``click.Abort`` at the CLI boundary.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, action: str, factory: CommandFactory, *, output_format: str | None = None) -> bool:
        """Build and execute one command.

        Args:
            action: The CLI command name (e.g., 'translate').
            factory: Builds the command from the service and output writer.
            output_format: Overrides ``output.format`` when given.

        Returns:
            The command's verdict.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            service = create_search_string_service(self.config)
            output_writer = create_output_writer(output_format or self.config.output.format)
            command = factory(service, output_writer)
            return command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
