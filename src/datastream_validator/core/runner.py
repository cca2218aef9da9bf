"""Run format checks over the datastreams of one object."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import structlog

from datastream_validator.core.results import CheckResult, ValidationResult, summarize
from datastream_validator.core.sources import DatastreamSource
from datastream_validator.utils.exceptions import DatastreamNotFoundError
from datastream_validator.validators import get_validator

logger = structlog.get_logger()


@dataclass(frozen=True)
class DatastreamCheck:
    """One datastream to validate, with its declared format."""

    dsid: str
    format: str
    params: Any = None


@dataclass(frozen=True)
class DatastreamReport:
    """Ordered results of validating one datastream."""

    dsid: str
    format: str
    results: ValidationResult

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def passes(self) -> list[str]:
        return [result.message for result in self.results if result.passed]

    @property
    def failures(self) -> list[str]:
        return [result.message for result in self.results if not result.passed]


def run_datastream_checks(
    source: DatastreamSource,
    checks: Iterable[DatastreamCheck | tuple],
) -> list[DatastreamReport]:
    """Validate each requested datastream of an object.

    Args:
        source: Supplies datastream content by DSID.
        checks: ``DatastreamCheck`` items, or ``(dsid, format)`` /
            ``(dsid, format, params)`` tuples.

    Returns:
        One report per check, in request order. A missing datastream yields
        a report with a single failing result.

    Raises:
        UnknownFormatError: If a check names an unsupported format. Raised
            before any datastream is read.
    """
    requests = [check if isinstance(check, DatastreamCheck) else DatastreamCheck(*check) for check in checks]
    validators = [get_validator(check.format) for check in requests]

    reports = []
    for check, validator in zip(requests, validators):
        try:
            content = source.get_content(check.dsid)
        except DatastreamNotFoundError as e:
            logger.warning("Datastream missing", dsid=check.dsid, format=check.format)
            results: ValidationResult = (CheckResult(False, f"{e.message}; cannot run {check.format} checks."),)
        else:
            results = validator(content, check.dsid, check.params)

        passes, failures = summarize(results)
        logger.info(
            "Datastream validated",
            dsid=check.dsid,
            format=check.format,
            passes=passes,
            failures=failures,
        )
        reports.append(DatastreamReport(dsid=check.dsid, format=check.format, results=results))

    return reports
