"""
Lint AI Code Reviewer Package

Reviews GitHub pull requests by combining ESLint findings with Gemini AI
suggestions and posting them as inline review comments.
"""

__version__ = "1.0.0"
__description__ = "ESLint and Gemini AI powered pull request reviewer"

# Submodules are loaded lazily so that lightweight modules (models, prompts,
# diff_parser) can be imported without PyGithub or google-generativeai.

__all__ = [
    # Main classes
    'Config', 'CodeReviewer', 'CodeReviewerError',
    # Data models
    'PRContext', 'ChangedFile', 'FileStatus', 'LintFinding', 'LintSeverity',
    'ReviewComment', 'ReviewResult', 'ProcessingStats', 'PublishOutcome',
    # Pipeline components
    'GitHubClient', 'GitHubClientError', 'GeminiClient', 'GeminiClientError',
    'ESLintRunner', 'LintError', 'SuggestionGenerator', 'CommentAssembler',
    'ReviewPublisher',
]

# Lazy import map: attribute -> (module_path, attr_name)
_lazy_exports = {
    'Config': ('lint_ai_reviewer.config', 'Config'),
    'CodeReviewer': ('lint_ai_reviewer.code_reviewer', 'CodeReviewer'),
    'CodeReviewerError': ('lint_ai_reviewer.code_reviewer', 'CodeReviewerError'),
    'PRContext': ('lint_ai_reviewer.models', 'PRContext'),
    'ChangedFile': ('lint_ai_reviewer.models', 'ChangedFile'),
    'FileStatus': ('lint_ai_reviewer.models', 'FileStatus'),
    'LintFinding': ('lint_ai_reviewer.models', 'LintFinding'),
    'LintSeverity': ('lint_ai_reviewer.models', 'LintSeverity'),
    'ReviewComment': ('lint_ai_reviewer.models', 'ReviewComment'),
    'ReviewResult': ('lint_ai_reviewer.models', 'ReviewResult'),
    'ProcessingStats': ('lint_ai_reviewer.models', 'ProcessingStats'),
    'PublishOutcome': ('lint_ai_reviewer.models', 'PublishOutcome'),
    'GitHubClient': ('lint_ai_reviewer.github_client', 'GitHubClient'),
    'GitHubClientError': ('lint_ai_reviewer.github_client', 'GitHubClientError'),
    'GeminiClient': ('lint_ai_reviewer.gemini_client', 'GeminiClient'),
    'GeminiClientError': ('lint_ai_reviewer.gemini_client', 'GeminiClientError'),
    'ESLintRunner': ('lint_ai_reviewer.lint_runner', 'ESLintRunner'),
    'LintError': ('lint_ai_reviewer.lint_runner', 'LintError'),
    'SuggestionGenerator': ('lint_ai_reviewer.suggestion_generator', 'SuggestionGenerator'),
    'CommentAssembler': ('lint_ai_reviewer.comment_assembler', 'CommentAssembler'),
    'ReviewPublisher': ('lint_ai_reviewer.review_publisher', 'ReviewPublisher'),
}


def __getattr__(name):
    target = _lazy_exports.get(name)
    if not target:
        raise AttributeError(f"module 'lint_ai_reviewer' has no attribute '{name}'")
    module_path, attr_name = target
    try:
        module = __import__(module_path, fromlist=[attr_name])
    except ImportError as e:
        raise ImportError(f"Failed to import '{name}' from '{module_path}': {e}") from e
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
