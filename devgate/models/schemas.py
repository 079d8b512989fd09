"""
Core Domain Schemas - Request-scoped value shapes shared across services.
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from enum import Enum


class EntryType(str, Enum):
    """Kind of filesystem entry."""
    FILE = "file"
    DIRECTORY = "directory"


class Severity(str, Enum):
    """Severity of a type-checker diagnostic."""
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


class FileEntry(BaseModel):
    """A file or directory found by a listing or search."""
    name: str
    path: str
    type: EntryType
    size: int
    created: datetime
    modified: datetime


class Diagnostic(BaseModel):
    """A single type-checker finding (1-based positions)."""
    severity: Severity
    file: str
    line: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    message: str
    rule: Optional[str] = None


class DiagnosticSummary(BaseModel):
    """Counts reported alongside the diagnostics."""
    files_analyzed: Optional[int] = None
    error_count: int = 0
    warning_count: int = 0
    information_count: int = 0
    time_in_sec: Optional[float] = None


class DiagnosticReport(BaseModel):
    """
    Normalized result of one analysis run.

    When the checker output could not be parsed, ``raw`` holds the output
    and ``parse_error`` says why; ``diagnostics`` is then empty.
    """
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    summary: Optional[DiagnosticSummary] = None
    version: Optional[str] = None
    raw: Optional[str] = None
    parse_error: Optional[str] = None


class TextFix(BaseModel):
    """A literal first-occurrence replacement."""
    model_config = ConfigDict(populate_by_name=True)

    old_text: str = Field(..., alias="oldText")
    new_text: str = Field(..., alias="newText")


class RepositorySummary(BaseModel):
    """Subset of a GitHub repository record."""
    name: str
    full_name: str
    description: Optional[str] = None
    url: str
    default_branch: Optional[str] = None


class ContentBlob(BaseModel):
    """
    A GitHub contents object.

    Unlisted remote fields pass through untouched.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    path: Optional[str] = None
    sha: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    encoding: Optional[str] = None
    content: Optional[str] = None
    html_url: Optional[str] = None
    download_url: Optional[str] = None


class ChangeRequestRef(BaseModel):
    """Reference to an opened pull request."""
    number: int
    title: str
    url: str
