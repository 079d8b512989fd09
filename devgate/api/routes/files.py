"""
Filesystem Endpoints - List, read, write and search local files.

Filesystem calls are blocking, so each one runs in the worker thread pool
and a slow disk only holds up its own request.
"""

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from devgate.services import filesystem
from devgate.models.requests import PathRequest, WriteFileRequest, SearchFilesRequest
from devgate.models.responses import (
    ListFilesResponse,
    ReadFileResponse,
    WriteFileResponse,
    SearchFilesResponse,
    ErrorResponse,
)


router = APIRouter(
    prefix="/files",
    tags=["Files"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Filesystem error"},
    },
)


@router.post(
    "/list",
    response_model=ListFilesResponse,
    summary="List Directory",
    responses={404: {"model": ErrorResponse, "description": "Directory not found"}}
)
async def list_files(request: PathRequest) -> ListFilesResponse:
    """List the immediate children of a directory."""
    files = await run_in_threadpool(filesystem.list_directory, request.path)
    return ListFilesResponse(path=request.path, files=files)


@router.post(
    "/read",
    response_model=ReadFileResponse,
    summary="Read File",
    responses={404: {"model": ErrorResponse, "description": "File not found"}}
)
async def read_file(request: PathRequest) -> ReadFileResponse:
    """Read a whole file as text."""
    content = await run_in_threadpool(filesystem.read_file, request.path)
    return ReadFileResponse(path=request.path, content=content)


@router.post(
    "/write",
    response_model=WriteFileResponse,
    summary="Write File",
    description="Write a file, creating missing parent directories"
)
async def write_file(request: WriteFileRequest) -> WriteFileResponse:
    await run_in_threadpool(filesystem.write_file, request.path, request.content)
    return WriteFileResponse(path=request.path)


@router.post(
    "/search",
    response_model=SearchFilesResponse,
    summary="Search Files",
    description="Recursively find entries whose name matches a case-insensitive regex",
    responses={404: {"model": ErrorResponse, "description": "Directory not found"}}
)
async def search_files(request: SearchFilesRequest) -> SearchFilesResponse:
    results = await run_in_threadpool(
        filesystem.search_files, request.path, request.pattern
    )
    return SearchFilesResponse(
        path=request.path,
        pattern=request.pattern,
        results=results
    )
