"""
Loading diagnostics from JSON files.

Input is validated with pydantic and converted into the core dataclasses.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.data_structures import CompilerDiagnostic, CompilerMessageSourceLocation
from ..core.enums import CompilerMessageSeverity
from ..core.exceptions import DiagnosticsLoadError


class LocationModel(BaseModel):
    """Source location as found in a diagnostics file."""

    model_config = ConfigDict(extra="forbid")

    path: str
    line: int = CompilerMessageSourceLocation.UNKNOWN
    column: int = CompilerMessageSourceLocation.UNKNOWN

    def to_location(self) -> CompilerMessageSourceLocation:
        return CompilerMessageSourceLocation(self.path, self.line, self.column)


class DiagnosticModel(BaseModel):
    """A single diagnostic as found in a diagnostics file."""

    model_config = ConfigDict(extra="ignore")

    severity: CompilerMessageSeverity
    message: str = ""
    location: Optional[LocationModel] = None

    @field_validator("severity", mode="before")
    @classmethod
    def validate_severity(cls, v: Any) -> CompilerMessageSeverity:
        if isinstance(v, CompilerMessageSeverity):
            return v
        return CompilerMessageSeverity.from_string(v)

    def to_diagnostic(self) -> CompilerDiagnostic:
        return CompilerDiagnostic(
            severity=self.severity,
            message=self.message,
            location=self.location.to_location() if self.location else None,
        )


class DiagnosticsFileModel(BaseModel):
    """Top-level object of a diagnostics file."""

    messages: List[DiagnosticModel] = Field(default_factory=list)


def parse_diagnostics(data: Any) -> List[CompilerDiagnostic]:
    """
    Validate decoded JSON and convert it to diagnostics.

    Accepts either a list of diagnostic objects or an object holding them
    under ``messages``.

    Raises:
        DiagnosticsLoadError: If the data does not describe diagnostics
    """
    if isinstance(data, list):
        data = {"messages": data}
    try:
        model = DiagnosticsFileModel.model_validate(data)
    except ValidationError as e:
        raise DiagnosticsLoadError(
            f"Invalid diagnostics: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False),
        ) from e
    return [m.to_diagnostic() for m in model.messages]


def load_diagnostics(file_path: Union[str, Path]) -> List[CompilerDiagnostic]:
    """
    Load diagnostics from a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Diagnostics in file order

    Raises:
        DiagnosticsLoadError: If the file cannot be read, decoded or validated
    """
    path = Path(file_path)
    logger.debug(f"Loading diagnostics from {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DiagnosticsLoadError(f"File not found: {path}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise DiagnosticsLoadError(
            f"Cannot decode {path} as UTF-8: {e.reason}", path=str(path)
        ) from e
    except json.JSONDecodeError as e:
        raise DiagnosticsLoadError(
            f"Invalid JSON in {path}: {e.msg} (line {e.lineno})", path=str(path)
        ) from e
    except OSError as e:
        raise DiagnosticsLoadError(f"Cannot read {path}: {e}", path=str(path)) from e

    diagnostics = parse_diagnostics(data)
    logger.debug(f"Loaded {len(diagnostics)} diagnostics from {path}")
    return diagnostics
