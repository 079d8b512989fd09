"""
Dependencies - Service construction for FastAPI's dependency injection.

Services are built from settings once and reused; none of them hold
per-request state. Tests replace these with ``app.dependency_overrides``.
"""

from functools import lru_cache

from devgate.core.config import get_settings
from devgate.services.analyzer import PyrightAnalyzer, AnalyzerConfig
from devgate.services.github_client import GitHubClient, GitHubClientConfig


@lru_cache()
def get_analyzer() -> PyrightAnalyzer:
    """Get the pyright analyzer instance."""
    settings = get_settings()
    config = AnalyzerConfig(
        command=settings.pyright_command,
        timeout_seconds=settings.analyzer_timeout_seconds,
    )
    return PyrightAnalyzer(config=config)


@lru_cache()
def get_github_client() -> GitHubClient:
    """Get the GitHub client, bound to the configured token."""
    settings = get_settings()
    config = GitHubClientConfig(
        token=settings.github_token,
        api_url=settings.github_api_url,
        timeout_seconds=settings.github_timeout_seconds,
    )
    return GitHubClient(config=config)
