"""API schemas for validation requests and responses."""

from pydantic import BaseModel, Field

from datastream_validator.core.runner import DatastreamReport


class CheckResultSchema(BaseModel):
    """A single pass/fail judgment."""

    passed: bool
    message: str


class ValidationResponse(BaseModel):
    """Ordered results of validating one uploaded datastream."""

    dsid: str
    format: str
    passed: bool = Field(..., description="True if every check passed")
    results: list[CheckResultSchema]

    @classmethod
    def from_report(cls, report: DatastreamReport) -> "ValidationResponse":
        return cls(
            dsid=report.dsid,
            format=report.format,
            passed=report.passed,
            results=[CheckResultSchema(passed=r.passed, message=r.message) for r in report.results],
        )


class FormatsResponse(BaseModel):
    """Format tags accepted by the validate endpoint."""

    formats: list[str]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
