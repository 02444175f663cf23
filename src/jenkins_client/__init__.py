"""
Jenkins Client Package

Typed client for the Jenkins REST API.
"""

import logging

from .config import JenkinsConfig, JenkinsSettings, load_settings
from .exceptions import (
    JenkinsAccessDeniedError,
    JenkinsConfigError,
    JenkinsConnectionError,
    JenkinsDecodeError,
    JenkinsError,
    JenkinsHTTPError,
    JobAlreadyExistsError,
)
from .jenkins import DEFAULT_BUILD_TREE, Jenkins, make
from .multi import MultiJenkins
from .resources import (
    Build,
    BuildResult,
    Computer,
    Executor,
    Job,
    JobQueue,
    Queue,
    TestReport,
    View,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure structured logging"""
    import structlog

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if not verbose else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Package metadata
__version__ = "1.0.0"
__all__ = [
    'Build',
    'BuildResult',
    'Computer',
    'DEFAULT_BUILD_TREE',
    'Executor',
    'Jenkins',
    'JenkinsAccessDeniedError',
    'JenkinsConfig',
    'JenkinsConfigError',
    'JenkinsConnectionError',
    'JenkinsDecodeError',
    'JenkinsError',
    'JenkinsHTTPError',
    'JenkinsSettings',
    'Job',
    'JobAlreadyExistsError',
    'JobQueue',
    'MultiJenkins',
    'Queue',
    'TestReport',
    'View',
    'load_settings',
    'make',
    'setup_logging',
]
