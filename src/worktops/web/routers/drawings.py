"""Drawing generation and export endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from worktops.application.config import (
    load_config_from_dict,
    load_record_from_dict,
    record_to_configuration,
)
from worktops.application.dtos import DrawingError, DrawingOutput
from worktops.domain.entities import InvalidConfigurationError
from worktops.domain.services import WorktopDrawing
from worktops.infrastructure.exporters import ExporterRegistry
from worktops.web.dependencies import GenerateCommandDep
from worktops.web.exceptions import DrawingGenerationError, UnsupportedFormatError
from worktops.web.schemas.requests import GenerateDrawingRequest, RecordDrawingRequest
from worktops.web.schemas.responses import (
    DrawingResponseSchema,
    DroppedCutoutSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
)

router = APIRouter(
    prefix="/drawings",
    tags=["drawings"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _require_drawing(output: DrawingOutput) -> WorktopDrawing:
    if not output.is_valid or output.drawing is None:
        raise DrawingGenerationError(output.error_details)
    return output.drawing


def _to_response(output: DrawingOutput) -> DrawingResponseSchema:
    drawing = _require_drawing(output)
    return DrawingResponseSchema(
        svg=ExporterRegistry.get("svg")().export_string(drawing),
        dropped_cutouts=[
            DroppedCutoutSchema(index=d.index, reason=d.reason)
            for d in output.dropped_cutouts
        ],
        warnings=output.warnings,
    )


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("", response_model=DrawingResponseSchema)
async def generate_drawing(
    request: GenerateDrawingRequest,
    command: GenerateCommandDep,
) -> DrawingResponseSchema:
    """Draw a worktop from a full configuration.

    Returns:
        The SVG document with any dropped cutouts and warnings.
    """
    config = load_config_from_dict(request.config)
    return _to_response(command.execute(config))


@router.post("/svg", response_class=Response)
async def generate_svg(
    request: GenerateDrawingRequest,
    command: GenerateCommandDep,
) -> Response:
    """Draw a worktop and return the bare SVG document.

    The number of dropped cutouts is reported in the X-Dropped-Cutouts header.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config)
    drawing = _require_drawing(output)
    return Response(
        content=ExporterRegistry.get("svg")().export_string(drawing),
        media_type="image/svg+xml",
        headers={"X-Dropped-Cutouts": str(drawing.dropped_cutout_count)},
    )


@router.post("/from-record", response_model=DrawingResponseSchema)
async def generate_from_record(
    request: RecordDrawingRequest,
    command: GenerateCommandDep,
) -> DrawingResponseSchema:
    """Draw a worktop stored by the quoting application."""
    record = load_record_from_dict(request.record)
    try:
        configuration = record_to_configuration(record)
    except InvalidConfigurationError as e:
        raise DrawingGenerationError(
            [DrawingError(e.message, field_name=e.field)]
        ) from e
    return _to_response(command.execute(configuration))


@router.post(
    "/export/{format_name}",
    response_class=Response,
    responses={400: {"model": ErrorResponseSchema}},
)
async def export_drawing(
    format_name: str,
    request: GenerateDrawingRequest,
    command: GenerateCommandDep,
) -> Response:
    """Draw a worktop and return it in the requested export format."""
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    config = load_config_from_dict(request.config)
    drawing = _require_drawing(command.execute(config))

    exporter_class = ExporterRegistry.get(format_name)
    filename = f"{config.output.project_name}.{exporter_class.file_extension}"
    return Response(
        content=exporter_class().export_string(drawing),
        media_type=exporter_class.media_type,
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "X-Dropped-Cutouts": str(drawing.dropped_cutout_count),
        },
    )
