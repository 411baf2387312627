"""API-level errors and their JSON rendering."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MissingFieldsError(Exception):
    """Raised when a login / signup body lacks a required field."""

    def __init__(self, message: str, fields: list[str]):
        super().__init__(message)
        self.message = message
        self.fields = fields


async def missing_fields_handler(request: Request, exc: MissingFieldsError):
    logger.info(
        "Rejected %s %s, missing %s",
        request.method, request.url.path, ", ".join(exc.fields),
    )
    return JSONResponse(
        status_code=400, content={"success": False, "message": exc.message}
    )
