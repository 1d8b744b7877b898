"""Configuration validation endpoints."""

from fastapi import APIRouter

from worktops.application.config import load_config_from_dict, validate_config
from worktops.web.schemas.requests import ConfigValidateRequest
from worktops.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(
    prefix="/validate",
    tags=["validate"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a worktop configuration without drawing it.

    Schema violations are reported through the ConfigError handler as 422.
    A configuration that loads always returns 200, with advisory warnings
    for anything that will be drawn differently than written.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value}
            for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
