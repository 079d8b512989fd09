"""
Python Analysis Endpoints - Pyright checks and literal text fixes.
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from devgate.core.dependencies import get_analyzer
from devgate.core.exceptions import ToolUnavailableError
from devgate.services.analyzer import PyrightAnalyzer, apply_text_fixes
from devgate.models.requests import PathRequest, FixRequest
from devgate.models.responses import (
    CheckResponse,
    AnalyzeResponse,
    FixResponse,
    ErrorResponse,
)


router = APIRouter(prefix="/python", tags=["Python"])


@router.get(
    "/check",
    response_model=CheckResponse,
    summary="Check Pyright",
    description="Report whether pyright is installed and its version",
    responses={404: {"model": ErrorResponse, "description": "Pyright is not installed"}}
)
async def check_pyright(
    analyzer: PyrightAnalyzer = Depends(get_analyzer)
) -> CheckResponse:
    availability = await analyzer.check_availability()
    if not availability.installed:
        raise ToolUnavailableError("Pyright is not installed")

    return CheckResponse(version=availability.version)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze Python",
    description="Run pyright on a file or directory",
    responses={
        404: {"model": ErrorResponse, "description": "Path not found"},
        500: {"model": ErrorResponse, "description": "Pyright failed or timed out"},
    }
)
async def analyze(
    request: PathRequest,
    analyzer: PyrightAnalyzer = Depends(get_analyzer)
) -> AnalyzeResponse:
    """
    Type-check a path with pyright.

    Output that cannot be parsed is returned as ``raw`` with a
    ``parse_error`` note; this is still a success.
    """
    report = await analyzer.analyze(request.path)

    return AnalyzeResponse(
        path=request.path,
        version=report.version,
        diagnostics=report.diagnostics,
        summary=report.summary,
        raw=report.raw,
        parse_error=report.parse_error
    )


@router.post(
    "/fix",
    response_model=FixResponse,
    summary="Apply Fixes",
    description="Apply literal first-occurrence replacements to a file",
    responses={404: {"model": ErrorResponse, "description": "File not found"}}
)
async def fix(request: FixRequest) -> FixResponse:
    applied = await run_in_threadpool(apply_text_fixes, request.path, request.fixes)

    return FixResponse(
        path=request.path,
        applied=applied,
        requested=len(request.fixes),
        message=f"Successfully applied {applied} of {len(request.fixes)} fixes"
    )
