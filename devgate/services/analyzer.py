"""
Analyzer Service - Runs pyright and normalizes its diagnostics.

Each call spawns one pyright process and waits for it; there is no
long-running checker and nothing is cached between requests.
"""

import asyncio
import json
import logging
import os
import shutil
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from devgate.core.exceptions import (
    ExternalFailureError,
    InvalidInputError,
    PathNotFoundError,
)
from devgate.models.schemas import (
    Diagnostic,
    DiagnosticReport,
    DiagnosticSummary,
    Severity,
    TextFix,
)


logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Configuration for the analyzer."""
    command: str = "pyright"
    timeout_seconds: Optional[float] = 300


@dataclass
class AvailabilityReport:
    """Whether the checker can be launched, and its version."""
    installed: bool
    version: Optional[str] = None


@dataclass
class ProcessOutput:
    """Captured output of a finished checker process."""
    returncode: Optional[int]
    stdout: str
    stderr: str


class PyrightAnalyzer:
    """
    Thin async wrapper around the pyright command line.

    Usage:
        analyzer = PyrightAnalyzer(AnalyzerConfig(command="pyright"))
        report = await analyzer.analyze("src/")
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def _resolve_command(self) -> str:
        """Resolve the executable on PATH (handles .cmd shims on Windows)."""
        executable = shutil.which(self.config.command)
        if executable is None:
            raise FileNotFoundError(f"{self.config.command} not found on PATH")
        return executable

    async def _run(self, *args: str) -> ProcessOutput:
        """
        Run the checker once and capture its output.

        Raises:
            OSError: If the executable cannot be launched.
            ExternalFailureError: If the process exceeds the timeout.
        """
        cmd = [self._resolve_command(), *args]
        logger.debug("Running %s", " ".join(cmd))

        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise ExternalFailureError(
                f"Pyright timed out after {self.config.timeout_seconds}s"
            )

        return ProcessOutput(
            returncode=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )

    async def check_availability(self) -> AvailabilityReport:
        """Report whether pyright is installed. Never raises."""
        try:
            output = await self._run("--version")
        except OSError as e:
            logger.info("Pyright is not available: %s", e)
            return AvailabilityReport(installed=False)
        except ExternalFailureError as e:
            logger.warning("Pyright version check failed: %s", e.message)
            return AvailabilityReport(installed=False)

        return AvailabilityReport(installed=True, version=output.stdout.strip())

    async def analyze(self, path: str) -> DiagnosticReport:
        """
        Type-check a file or directory.

        Unparseable checker output is returned as ``raw`` with a
        ``parse_error`` note instead of failing.

        Raises:
            PathNotFoundError: If the path does not exist.
        """
        if not os.path.exists(path):
            raise PathNotFoundError(f"File or directory not found: {path}", path)

        try:
            output = await self._run("--outputjson", path)
        except OSError as e:
            logger.warning("Could not launch pyright: %s", e)
            return DiagnosticReport(raw="", parse_error=f"Could not run pyright: {e}")

        logger.info("Pyright exited with %s for %s", output.returncode, path)
        return parse_pyright_output(output.stdout or output.stderr)


def _position(range_: Dict[str, Any], key: str) -> Dict[str, int]:
    point = range_.get(key) or {}
    return {
        "line": int(point.get("line", 0)) + 1,
        "column": int(point.get("character", 0)) + 1,
    }


def _parse_diagnostic(item: Dict[str, Any]) -> Diagnostic:
    range_ = item.get("range") or {}
    start = _position(range_, "start")
    end = _position(range_, "end") if "end" in range_ else None
    return Diagnostic(
        severity=Severity(item.get("severity", "error")),
        file=item.get("file", ""),
        line=start["line"],
        column=start["column"],
        end_line=end["line"] if end else None,
        end_column=end["column"] if end else None,
        message=item.get("message", ""),
        rule=item.get("rule"),
    )


def _count_summary(diagnostics: List[Diagnostic]) -> DiagnosticSummary:
    return DiagnosticSummary(
        error_count=sum(1 for d in diagnostics if d.severity == Severity.ERROR),
        warning_count=sum(1 for d in diagnostics if d.severity == Severity.WARNING),
        information_count=sum(1 for d in diagnostics if d.severity == Severity.INFORMATION),
    )


def parse_pyright_output(text: str) -> DiagnosticReport:
    """
    Parse ``pyright --outputjson`` output into a DiagnosticReport.

    Pyright positions are 0-based; the report uses 1-based lines/columns.
    """
    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        diagnostics = [
            _parse_diagnostic(item) for item in data.get("generalDiagnostics") or []
        ]
    except (ValueError, TypeError, AttributeError) as e:
        # json.JSONDecodeError is a ValueError
        return DiagnosticReport(raw=text, parse_error=str(e))

    summary_data = data.get("summary")
    if isinstance(summary_data, dict):
        summary = DiagnosticSummary(
            files_analyzed=summary_data.get("filesAnalyzed"),
            error_count=summary_data.get("errorCount", 0),
            warning_count=summary_data.get("warningCount", 0),
            information_count=summary_data.get("informationCount", 0),
            time_in_sec=summary_data.get("timeInSec"),
        )
    else:
        summary = _count_summary(diagnostics)

    return DiagnosticReport(
        diagnostics=diagnostics,
        summary=summary,
        version=data.get("version"),
    )


def apply_text_fixes(path: str, fixes: Sequence[TextFix]) -> int:
    """
    Apply literal replacements to a file in one read and one write.

    Each fix replaces only the first occurrence of ``old_text`` in the
    result of the previous fix. A fix whose text is absent or empty is
    skipped. Bytes that are not valid UTF-8 are written back unchanged,
    and the file is left untouched when no fix applies.

    Returns:
        Number of fixes whose ``old_text`` was found.
    """
    if not os.path.exists(path):
        raise PathNotFoundError(f"File not found: {path}", path)
    if not os.path.isfile(path):
        raise InvalidInputError(f"Not a file: {path}")

    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            content = f.read()

        applied = 0
        for fix in fixes:
            if fix.old_text and fix.old_text in content:
                content = content.replace(fix.old_text, fix.new_text, 1)
                applied += 1

        if applied:
            with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
                f.write(content)
    except OSError as e:
        raise ExternalFailureError(f"Error fixing file: {e}")

    logger.info("Applied %d of %d fixes to %s", applied, len(fixes), path)
    return applied
