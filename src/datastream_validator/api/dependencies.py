"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends

from datastream_validator.config import Settings, get_settings

# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
