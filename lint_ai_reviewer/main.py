"""
GitHub Action entry point for the Lint AI Code Reviewer.

Reads configuration and the pull request context from the environment,
runs the review and maps the outcome to the process exit code.
"""

import asyncio
import logging
import logging.handlers
import sys
from typing import Optional

from .code_reviewer import CodeReviewer
from .config import Config, LoggingConfig, pr_context_from_environment


logger = logging.getLogger(__name__)


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure root logging once for the whole run."""
    config = config or LoggingConfig()
    handlers = [logging.StreamHandler(sys.stdout)]
    if config.enable_file_logging:
        handlers.append(logging.handlers.RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.max_log_size,
            backupCount=config.backup_count
        ))
    logging.basicConfig(
        level=getattr(logging, config.level.value),
        format=config.format,
        handlers=handlers,
        force=True
    )


def main() -> int:
    """Run the review and return the process exit code."""
    try:
        config = Config.from_environment()
        setup_logging(config.logging)
        pr_context = pr_context_from_environment()
    except ValueError as e:
        setup_logging()
        logger.error(f"Configuration error: {str(e)}")
        return 1
    except Exception as e:
        setup_logging()
        logger.error(f"Configuration error: {str(e)}", exc_info=True)
        return 1

    logger.debug(f"Effective configuration: {config.to_dict()}")

    try:
        with CodeReviewer(config) as reviewer:
            result = asyncio.run(reviewer.review_pull_request(pr_context))
            logger.debug(f"Statistics: {reviewer.get_statistics()}")
    except Exception as e:
        logger.error(f"Review bot failed: {str(e)}", exc_info=True)
        return 1

    logger.info(
        f"Done: {result.total_comments} comments for {len(result.files_considered)} files "
        f"({result.outcome.value})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
