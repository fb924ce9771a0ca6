"""
Data models for the Lint AI Code Reviewer.

This module contains the data classes passed between the pipeline stages:
changed files coming from GitHub, lint findings coming from ESLint, and the
review comments that are finally published on the pull request.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FileStatus(Enum):
    """Change status of a file in a pull request, as reported by GitHub."""
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class LintSeverity(Enum):
    """ESLint message severity codes."""
    WARNING = 1
    ERROR = 2


class PublishOutcome(Enum):
    """How the review ended up being delivered to the pull request."""
    SKIPPED = "skipped"
    GENERAL_COMMENT = "general_comment"
    BATCHED_REVIEW = "batched_review"
    INDIVIDUAL_COMMENTS = "individual_comments"


@dataclass(frozen=True)
class PRContext:
    """Identifies the pull request under review."""
    owner: str
    repo: str
    number: int

    def __post_init__(self):
        if not self.owner or not self.repo:
            raise ValueError("Pull request owner and repo are required")
        if not isinstance(self.number, int) or self.number <= 0:
            raise ValueError(f"Invalid pull request number: {self.number}")

    @property
    def repo_full_name(self) -> str:
        """Get full repository name (owner/repo)."""
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_repository_slug(cls, slug: str, number: int) -> 'PRContext':
        """Build a context from an ``owner/repo`` slug such as GITHUB_REPOSITORY."""
        if not slug or "/" not in slug:
            raise ValueError(f"Invalid repository name: {slug}")
        owner, repo = slug.split("/", 1)
        return cls(owner=owner, repo=repo, number=number)


@dataclass(frozen=True)
class ChangedFile:
    """A file touched by the pull request."""
    filename: str
    status: FileStatus
    patch: Optional[str] = None
    additions: int = 0
    deletions: int = 0

    @property
    def is_removed(self) -> bool:
        return self.status == FileStatus.REMOVED

    @classmethod
    def from_github_file(cls, github_file: Any) -> 'ChangedFile':
        """Convert a PyGithub ``File`` object into a ChangedFile."""
        try:
            status = FileStatus(github_file.status)
        except ValueError:
            status = FileStatus.CHANGED
        return cls(
            filename=github_file.filename,
            status=status,
            patch=getattr(github_file, 'patch', None),
            additions=getattr(github_file, 'additions', 0) or 0,
            deletions=getattr(github_file, 'deletions', 0) or 0,
        )


@dataclass
class LintFinding:
    """A single ESLint diagnostic."""
    file_path: str
    severity: LintSeverity
    message: str
    line: int = 1
    column: int = 1
    rule_id: Optional[str] = None

    def __post_init__(self):
        # ESLint reports line 0 (or nothing) for file-level fatal errors
        self.line = max(1, self.line or 1)
        self.column = max(1, self.column or 1)

    @property
    def is_error(self) -> bool:
        return self.severity == LintSeverity.ERROR

    @classmethod
    def from_eslint_message(cls, file_path: str, message: Dict[str, Any]) -> 'LintFinding':
        """Create a finding from one entry of ESLint's JSON ``messages`` list."""
        severity_code = message.get('severity', LintSeverity.ERROR.value)
        try:
            severity = LintSeverity(severity_code)
        except ValueError:
            severity = LintSeverity.ERROR if severity_code and severity_code > 1 else LintSeverity.WARNING
        return cls(
            file_path=file_path,
            severity=severity,
            message=str(message.get('message', '')).strip(),
            line=message.get('line') or 1,
            column=message.get('column') or 1,
            rule_id=message.get('ruleId'),
        )


@dataclass
class ReviewComment:
    """An inline comment anchored to a file and line of the pull request."""
    path: str
    line: int
    body: str

    def __post_init__(self):
        if self.line < 1:
            raise ValueError(f"Comment line must be positive, got {self.line}")

    def to_github_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape expected by the review API."""
        return {
            'path': self.path,
            'line': self.line,
            'body': self.body,
        }


@dataclass
class ProcessingStats:
    """Statistics for a single review run."""
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    files_reviewed: int = 0
    files_with_findings: int = 0
    lint_errors: int = 0
    suggestions_generated: int = 0
    errors_encountered: int = 0

    @property
    def duration(self) -> float:
        """Get processing duration in seconds."""
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time


@dataclass
class ReviewResult:
    """Result of reviewing one pull request."""
    pr_context: PRContext
    files_considered: List[ChangedFile] = field(default_factory=list)
    lint_findings: List[LintFinding] = field(default_factory=list)
    comments: List[ReviewComment] = field(default_factory=list)
    outcome: PublishOutcome = PublishOutcome.SKIPPED
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    @property
    def total_comments(self) -> int:
        return len(self.comments)
