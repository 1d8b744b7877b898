"""Application commands (use cases) for worktop drawing generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from worktops.application.config.adapter import config_to_settings, config_to_worktop
from worktops.application.config.schema import WorktopDrawingConfiguration
from worktops.domain.entities import InvalidConfigurationError, WorktopConfiguration
from worktops.domain.services import DrawingSettings, generate_drawing

from .dtos import DrawingError, DrawingOutput

logger = logging.getLogger(__name__)


def _rejected(name: str | None, error: DrawingError) -> DrawingOutput:
    logger.debug(f"Drawing {name or ''} rejected: {error}")
    return DrawingOutput(
        drawing=None, name=name, errors=[str(error)], error_details=[error]
    )


class GenerateDrawingCommand:
    """Command to generate worktop drawings.

    A single configuration goes through ``execute``. Batches go through
    ``execute_many``, which keeps the input order and reports failures per
    configuration instead of raising.
    """

    def __init__(self, settings: DrawingSettings | None = None) -> None:
        self.settings = settings or DrawingSettings()

    def execute(
        self,
        configuration: WorktopConfiguration | WorktopDrawingConfiguration,
        settings: DrawingSettings | None = None,
        name: str | None = None,
    ) -> DrawingOutput:
        """Execute the drawing generation command.

        Args:
            configuration: A domain configuration, or a configuration file
                model whose layout section supplies the settings.
            settings: Settings overriding the command's defaults.
            name: Label used in log messages and in the output.

        Returns:
            DrawingOutput with the drawing, or with errors if the
            configuration was rejected.
        """
        try:
            if isinstance(configuration, WorktopDrawingConfiguration):
                settings = settings or config_to_settings(configuration)
                configuration = config_to_worktop(configuration)
            drawing = generate_drawing(configuration, settings or self.settings)
        except InvalidConfigurationError as e:
            return _rejected(name, DrawingError(e.message, field_name=e.field))
        except ValueError as e:
            return _rejected(name, DrawingError(str(e)))

        warnings = [
            f"Cutout {dropped.index} was not drawn: {dropped.reason}"
            for dropped in drawing.dropped_cutouts
        ]
        return DrawingOutput(drawing=drawing, name=name, warnings=warnings)

    def execute_many(
        self,
        configurations: Sequence[WorktopConfiguration | WorktopDrawingConfiguration],
        max_workers: int | None = None,
        names: Sequence[str] | None = None,
    ) -> list[DrawingOutput]:
        """Generate several drawings independently.

        Args:
            configurations: Configurations to draw.
            max_workers: Thread pool size; the executor default when None.
            names: Optional labels, one per configuration.

        Returns:
            One DrawingOutput per configuration, in input order.
        """
        if names is not None and len(names) != len(configurations):
            raise ValueError("names must match configurations one to one")
        labels = list(names) if names is not None else [None] * len(configurations)

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outputs = list(
                executor.map(
                    lambda item: self.execute(item[0], name=item[1]),
                    zip(configurations, labels),
                )
            )

        failed = sum(1 for output in outputs if not output.is_valid)
        logger.info(f"Generated {len(outputs) - failed} of {len(outputs)} drawings")
        return outputs
