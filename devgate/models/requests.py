"""
API Request Models - Pydantic models for request validation.

Required string fields must be non-empty; a request failing validation is
rejected with 400 before any service is called.
"""

from typing import Optional, List
from pydantic import BaseModel, Field

from devgate.models.schemas import TextFix


class PathRequest(BaseModel):
    """
    Request naming a single file or directory.

    Example:
        {"path": "/home/me/project/src"}
    """
    path: str = Field(
        ...,
        min_length=1,
        description="Absolute or relative path",
        examples=["/home/me/project/main.py"]
    )


class WriteFileRequest(PathRequest):
    """
    Request to write a file.

    Example:
        {"path": "notes/todo.txt", "content": "ship it\\n"}
    """
    content: str = Field(
        ...,
        description="Text to write; may be empty"
    )


class SearchFilesRequest(PathRequest):
    """
    Request to search a directory tree by entry name.

    Example:
        {"path": "/home/me/project", "pattern": "test_.*\\\\.py$"}
    """
    pattern: str = Field(
        ...,
        min_length=1,
        description="Case-insensitive regular expression matched against names"
    )


class FixRequest(PathRequest):
    """
    Request to apply literal text fixes to a file.

    Example:
        {
            "path": "app.py",
            "fixes": [{"oldText": "a=1", "newText": "a=10"}]
        }
    """
    fixes: List[TextFix] = Field(
        ...,
        description="Replacements, applied in order"
    )


class ContentRequest(BaseModel):
    """
    Request to read repository contents.

    Example:
        {"owner": "octocat", "repo": "hello-world", "path": "README.md", "ref": "main"}
    """
    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)
    path: str = Field(default="", description="Path inside the repository")
    ref: Optional[str] = Field(default=None, description="Branch, tag or commit")


class UpdateContentRequest(BaseModel):
    """
    Request to create or update a repository file.

    Supplying ``sha`` (the current blob sha) updates an existing file;
    omitting it creates a new one.
    """
    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1, description="Plain text; encoded before upload")
    message: str = Field(..., min_length=1, description="Commit message")
    branch: Optional[str] = None
    sha: Optional[str] = None


class PullRequestRequest(BaseModel):
    """
    Request to open a pull request.

    Example:
        {
            "owner": "octocat",
            "repo": "hello-world",
            "title": "Fix typing errors",
            "head": "fix/types",
            "base": "main"
        }
    """
    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    body: str = ""
    head: str = Field(..., min_length=1)
    base: str = Field(..., min_length=1)
