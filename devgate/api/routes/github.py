"""
GitHub Endpoints - Repository listing, contents and pull requests.

Remote failures come back as 500 with GitHub's own message.
"""

from fastapi import APIRouter, Depends

from devgate.core.dependencies import get_github_client
from devgate.services.github_client import GitHubClient
from devgate.models.requests import (
    ContentRequest,
    UpdateContentRequest,
    PullRequestRequest,
)
from devgate.models.responses import (
    RepositoriesResponse,
    ContentResponse,
    UpdateContentResponse,
    PullRequestResponse,
    ErrorResponse,
)


router = APIRouter(
    prefix="/github",
    tags=["GitHub"],
    responses={500: {"model": ErrorResponse, "description": "GitHub API error"}},
)


@router.get(
    "/repos",
    response_model=RepositoriesResponse,
    summary="List Repositories"
)
async def list_repositories(
    client: GitHubClient = Depends(get_github_client)
) -> RepositoriesResponse:
    repositories = await client.list_repositories()
    return RepositoriesResponse(repositories=repositories)


@router.post(
    "/content",
    response_model=ContentResponse,
    summary="Get Content",
    description="Fetch a file or directory listing from a repository"
)
async def get_content(
    request: ContentRequest,
    client: GitHubClient = Depends(get_github_client)
) -> ContentResponse:
    content = await client.get_content(
        request.owner,
        request.repo,
        path=request.path,
        ref=request.ref
    )
    return ContentResponse(content=content)


@router.post(
    "/update",
    response_model=UpdateContentResponse,
    summary="Create or Update File",
    description="Commit a file; pass `sha` to update an existing file"
)
async def update_content(
    request: UpdateContentRequest,
    client: GitHubClient = Depends(get_github_client)
) -> UpdateContentResponse:
    result = await client.put_content(
        request.owner,
        request.repo,
        request.path,
        content=request.content,
        message=request.message,
        branch=request.branch,
        sha=request.sha
    )
    return UpdateContentResponse(content=result)


@router.post(
    "/pr",
    response_model=PullRequestResponse,
    summary="Open Pull Request"
)
async def create_pull_request(
    request: PullRequestRequest,
    client: GitHubClient = Depends(get_github_client)
) -> PullRequestResponse:
    pull_request = await client.create_pull_request(
        request.owner,
        request.repo,
        title=request.title,
        head=request.head,
        base=request.base,
        body=request.body
    )
    return PullRequestResponse(pull_request=pull_request)
