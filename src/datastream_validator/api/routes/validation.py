"""Datastream validation endpoints."""

import asyncio

import structlog
from fastapi import APIRouter, File, Form, UploadFile

from datastream_validator.api.dependencies import AppSettings
from datastream_validator.api.schemas.validation import FormatsResponse, ValidationResponse
from datastream_validator.core.runner import DatastreamCheck, run_datastream_checks
from datastream_validator.core.sources import InMemoryDatastreamSource
from datastream_validator.utils.exceptions import FileTooLargeError, ValidationError
from datastream_validator.utils.file_validation import detect_format
from datastream_validator.validators import SUPPORTED_FORMATS

logger = structlog.get_logger()

router = APIRouter(tags=["Validation"])

AUTO_FORMAT = "auto"


@router.get("/formats", response_model=FormatsResponse)
async def list_formats() -> FormatsResponse:
    """List the supported format tags."""
    return FormatsResponse(formats=SUPPORTED_FORMATS)


@router.post("/validate", response_model=ValidationResponse)
async def validate_upload(
    settings: AppSettings,
    file: UploadFile = File(..., description="Datastream content to validate"),
    format: str = Form(default=AUTO_FORMAT, description="Format tag, or 'auto' to detect"),
    dsid: str = Form(default="OBJ", description="Datastream identifier used in messages"),
    text_substring: str | None = Form(default=None, description="Substring to count (text format)"),
    text_count: int | None = Form(default=None, description="Expected occurrences (text format)"),
) -> ValidationResponse:
    """Run the structural checks for one uploaded datastream.

    Structural failures are reported in the response body, not as HTTP
    errors; only unusable requests are rejected.
    """
    content = await file.read()
    if len(content) > settings.max_upload_size:
        raise FileTooLargeError(len(content), settings.max_upload_size)

    format_tag = format.strip().lower()
    if format_tag == AUTO_FORMAT:
        detected = detect_format(content)
        if detected is None:
            raise ValidationError(
                "Could not detect the datastream format; pass an explicit format tag.",
                {"supported": SUPPORTED_FORMATS},
            )
        logger.info("Detected datastream format", dsid=dsid, format=detected)
        format_tag = detected

    params = None
    if text_substring is not None:
        params = (text_substring, text_count if text_count is not None else 1)

    source = InMemoryDatastreamSource({dsid: content})
    check = DatastreamCheck(dsid=dsid, format=format_tag, params=params)
    reports = await asyncio.to_thread(run_datastream_checks, source, [check])
    return ValidationResponse.from_report(reports[0])
