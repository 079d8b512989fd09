"""
devgate
=======

A local HTTP gateway that lets a coding agent run pyright, work with GitHub
repositories and touch the local filesystem through JSON endpoints.

Components:
- services: Filesystem, pyright analyzer and GitHub client facades
- api: FastAPI routes and error handling
- models: Pydantic data models
- core: Configuration, errors and dependencies
- cli: Typer command-line front end
"""

__version__ = "1.0.0"
