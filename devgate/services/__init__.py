"""
Services Layer for devgate
==========================

Each service wraps exactly one kind of external call:

- filesystem: host filesystem reads, writes, listings and searches
- PyrightAnalyzer: the pyright type checker (one process per request)
- GitHubClient: the GitHub REST API (one HTTP request per operation)
"""

from devgate.services import filesystem
from devgate.services.analyzer import PyrightAnalyzer, AnalyzerConfig, apply_text_fixes
from devgate.services.github_client import GitHubClient, GitHubClientConfig

__all__ = [
    "filesystem",
    "PyrightAnalyzer",
    "AnalyzerConfig",
    "apply_text_fixes",
    "GitHubClient",
    "GitHubClientConfig",
]
