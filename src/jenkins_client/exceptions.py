"""
Jenkins Client Exceptions

Every failure raised by the client derives from JenkinsError so callers can
catch the whole family at once.
"""

from typing import Optional


class JenkinsError(Exception):
    """Base class for all client errors"""
    pass


class JenkinsConnectionError(JenkinsError):
    """Raised when the HTTP request could not complete"""
    pass


class JenkinsHTTPError(JenkinsError):
    """Raised when Jenkins answers with a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class JenkinsAccessDeniedError(JenkinsHTTPError):
    """Raised on HTTP 403"""
    pass


class JobAlreadyExistsError(JenkinsHTTPError):
    """Raised when createItem is refused"""
    pass


class JenkinsDecodeError(JenkinsError):
    """Raised when a JSON body is missing or malformed"""
    pass


class JenkinsConfigError(JenkinsError):
    """Raised for unknown environments or incomplete settings"""
    pass
