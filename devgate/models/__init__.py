"""
Data Models for devgate
=======================

Organized into three categories:
- schemas: Request-scoped value shapes shared with the services layer
- requests: API request validation models
- responses: API response models
"""

from devgate.models.schemas import (
    EntryType,
    Severity,
    FileEntry,
    Diagnostic,
    DiagnosticSummary,
    DiagnosticReport,
    TextFix,
    RepositorySummary,
    ContentBlob,
    ChangeRequestRef,
)

from devgate.models.requests import (
    PathRequest,
    WriteFileRequest,
    SearchFilesRequest,
    FixRequest,
    ContentRequest,
    UpdateContentRequest,
    PullRequestRequest,
)

from devgate.models.responses import (
    BaseResponse,
    HealthResponse,
    ListFilesResponse,
    ReadFileResponse,
    WriteFileResponse,
    SearchFilesResponse,
    CheckResponse,
    AnalyzeResponse,
    FixResponse,
    RepositoriesResponse,
    ContentResponse,
    UpdateContentResponse,
    PullRequestResponse,
    ErrorResponse,
)

__all__ = [
    # Schemas
    "EntryType",
    "Severity",
    "FileEntry",
    "Diagnostic",
    "DiagnosticSummary",
    "DiagnosticReport",
    "TextFix",
    "RepositorySummary",
    "ContentBlob",
    "ChangeRequestRef",
    # Requests
    "PathRequest",
    "WriteFileRequest",
    "SearchFilesRequest",
    "FixRequest",
    "ContentRequest",
    "UpdateContentRequest",
    "PullRequestRequest",
    # Responses
    "BaseResponse",
    "HealthResponse",
    "ListFilesResponse",
    "ReadFileResponse",
    "WriteFileResponse",
    "SearchFilesResponse",
    "CheckResponse",
    "AnalyzeResponse",
    "FixResponse",
    "RepositoriesResponse",
    "ContentResponse",
    "UpdateContentResponse",
    "PullRequestResponse",
    "ErrorResponse",
]
