"""FastAPI dependency injection for drawing services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from worktops.application.commands import GenerateDrawingCommand


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateDrawingCommand:
    """Get the cached GenerateDrawingCommand.

    The command holds only default settings, so one instance serves every
    request.
    """
    return GenerateDrawingCommand()


# Type alias for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateDrawingCommand, Depends(get_generate_command)]
