"""
API Response Models - Pydantic models for API responses.

Every success body carries ``status: "success"``.
"""

from typing import Optional, List, Dict, Any, Union, Literal
from pydantic import BaseModel, Field

from devgate.models.schemas import (
    ChangeRequestRef,
    ContentBlob,
    Diagnostic,
    DiagnosticSummary,
    FileEntry,
    RepositorySummary,
)


class BaseResponse(BaseModel):
    """Base response with the success marker."""
    status: Literal["success"] = "success"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    environment: str


class ListFilesResponse(BaseResponse):
    path: str
    files: List[FileEntry] = Field(default_factory=list)


class ReadFileResponse(BaseResponse):
    path: str
    content: str


class WriteFileResponse(BaseResponse):
    path: str
    message: str = "File written successfully"


class SearchFilesResponse(BaseResponse):
    """
    Response from a name search.

    Example:
        {
            "status": "success",
            "path": "/home/me/project",
            "pattern": "foo",
            "results": [{"name": "foo.py", ...}]
        }
    """
    path: str
    pattern: str
    results: List[FileEntry] = Field(default_factory=list)


class CheckResponse(BaseResponse):
    message: str = "Pyright is installed"
    installed: bool = True
    version: Optional[str] = None


class AnalyzeResponse(BaseResponse):
    """
    Response from a pyright run.

    ``raw`` and ``parse_error`` are set only when pyright's output could not
    be parsed; the request still succeeds.
    """
    path: str
    version: Optional[str] = None
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    summary: Optional[DiagnosticSummary] = None
    raw: Optional[str] = None
    parse_error: Optional[str] = None


class FixResponse(BaseResponse):
    path: str
    applied: int
    requested: int
    message: str


class RepositoriesResponse(BaseResponse):
    repositories: List[RepositorySummary] = Field(default_factory=list)


class ContentResponse(BaseResponse):
    content: Union[ContentBlob, List[ContentBlob]]


class UpdateContentResponse(BaseResponse):
    content: Dict[str, Any]


class PullRequestResponse(BaseResponse):
    pull_request: ChangeRequestRef


class ErrorResponse(BaseModel):
    """
    Standard error response.

    Example:
        {"status": "error", "message": "File not found: /tmp/x"}
    """
    status: Literal["error"] = "error"
    message: str
    installed: Optional[bool] = None
