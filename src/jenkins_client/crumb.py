"""
Anti-CSRF crumb negotiation.

Jenkins issues a (header name, value) pair from /crumbIssuer/api/json that
must accompany every mutating request once CSRF protection is on.
"""

import logging
from typing import Dict, Optional

from .exceptions import JenkinsError

logger = logging.getLogger(__name__)

CRUMB_ISSUER_PATH = '/crumbIssuer/api/json'


class CrumbMixin:
    """
    Crumb state for a Jenkins session.

    Enabling is best-effort: any failure leaves crumbs disabled. The crumb is
    fetched once and reused for the lifetime of the session.
    """

    _crumbs_enabled: bool = False
    _crumb_field: Optional[str] = None
    _crumb_value: Optional[str] = None

    def enable_crumbs(self) -> bool:
        """Fetch a crumb and attach it to every POST. Returns the new state."""
        self._crumbs_enabled = False
        try:
            result = self.request_crumb()
        except JenkinsError as e:
            logger.warning(f"Could not get a CSRF crumb, crumbs stay disabled: {e}")
            return False

        field = result.get('crumbRequestField')
        value = result.get('crumb')
        if not field or not value:
            logger.warning("Malformed crumb issuer response, crumbs stay disabled")
            return False

        self._crumb_field = field
        self._crumb_value = value
        self._crumbs_enabled = True
        logger.info(f"CSRF crumbs enabled (header {field})")
        return True

    def request_crumb(self) -> Dict:
        """GET the crumb issuer; raises on any failure"""
        return self._get_json(CRUMB_ISSUER_PATH)

    def disable_crumbs(self) -> None:
        self._crumbs_enabled = False

    @property
    def crumbs_enabled(self) -> bool:
        return self._crumbs_enabled

    def get_crumb_headers(self) -> Dict[str, str]:
        if self._crumbs_enabled:
            return {self._crumb_field: self._crumb_value}
        return {}
