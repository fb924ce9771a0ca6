"""
ESLint adapter for the Lint AI Code Reviewer.

ESLint is a Node.js tool, so it is driven through its command line with the
JSON formatter and the output is converted into LintFinding objects. Each
file is linted on its own so that one broken file cannot hide the findings
of the others.
"""

import json
import logging
import os
import subprocess
from typing import List

from .config import LintConfig
from .models import LintFinding


logger = logging.getLogger(__name__)

# ESLint exits with 1 when lint errors were found; 2 and above mean it failed
ESLINT_OK_EXIT_CODES = (0, 1)


class LintError(Exception):
    """Raised when ESLint cannot lint a file."""
    pass


class ESLintRunner:
    """Run ESLint over local files and collect its findings."""

    def __init__(self, config: LintConfig):
        self.config = config
        logger.info(f"Initialized ESLint runner: {' '.join(config.command)}")

    def lint_files(self, file_paths: List[str]) -> List[LintFinding]:
        """Lint every path that exists in the working tree.

        Missing files are skipped silently and per-file failures are logged,
        so the result only covers files that were linted successfully.
        """
        findings: List[LintFinding] = []

        for file_path in file_paths:
            if not os.path.isfile(self._resolve(file_path)):
                logger.debug(f"Skipping lint for {file_path}: not present in working tree")
                continue

            try:
                file_findings = self.lint_file(file_path)
            except LintError as e:
                logger.warning(f"ESLint failed for {file_path}: {str(e)}")
                continue

            logger.debug(f"ESLint reported {len(file_findings)} findings for {file_path}")
            findings.extend(file_findings)

        return findings

    def lint_file(self, file_path: str) -> List[LintFinding]:
        """Lint a single file.

        Findings are reported against ``file_path`` as given, not against the
        absolute path ESLint prints, so they line up with the PR's filenames.

        Raises:
            LintError: If ESLint cannot run or its output cannot be parsed
        """
        command = list(self.config.command) + ["--format", "json", "--no-fix", file_path]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                cwd=self.config.working_directory,
            )
        except FileNotFoundError as e:
            raise LintError(f"ESLint executable not found: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise LintError(f"ESLint timed out after {self.config.timeout}s") from e

        if result.returncode not in ESLINT_OK_EXIT_CODES:
            error_msg = result.stderr.strip() if result.stderr else "Unknown error"
            raise LintError(f"ESLint exited with code {result.returncode}: {error_msg}")

        return self.parse_output(file_path, result.stdout)

    @staticmethod
    def parse_output(file_path: str, output: str) -> List[LintFinding]:
        """Convert ESLint JSON formatter output into findings for ``file_path``."""
        try:
            results = json.loads(output or "[]")
        except json.JSONDecodeError as e:
            raise LintError(f"Could not parse ESLint output: {str(e)}") from e

        if not isinstance(results, list):
            raise LintError("Unexpected ESLint output: expected a list of results")

        findings = []
        for result in results:
            for message in result.get("messages", []):
                findings.append(LintFinding.from_eslint_message(file_path, message))
        return findings

    def _resolve(self, file_path: str) -> str:
        if self.config.working_directory:
            return os.path.join(self.config.working_directory, file_path)
        return file_path
