"""
Jenkins Client Configuration Module

Two layers of configuration:
1. JenkinsConfig - one named server profile (host URL and credentials)
2. JenkinsSettings - environment / .env driven settings, including the
   transport options (timeouts, SSL verification) and the disk cache
"""

import logging
from typing import Any, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import JenkinsConfigError

# Configure logging
logger = logging.getLogger(__name__)


def _strip_trailing_slash(v: Optional[str]) -> Optional[str]:
    if v:
        return v.rstrip('/')
    return v


class JenkinsConfig(BaseModel):
    """
    One Jenkins server profile.

    Accepts both the camelCase keys used in environment maps
    (hostUrl, apiToken) and the snake_case field names.
    """

    host_url: str = Field(
        default='',
        validation_alias=AliasChoices('host_url', 'hostUrl'),
        description="Jenkins server URL (e.g., http://localhost:8080)"
    )
    username: str = Field(default='', description="Jenkins username")
    password: str = Field(default='', description="Jenkins password")
    api_token: str = Field(
        default='',
        validation_alias=AliasChoices('api_token', 'apiToken'),
        description="Jenkins API token (preferred over password)"
    )

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    @field_validator('host_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove trailing slash from URL"""
        return _strip_trailing_slash(v)

    def get_credentials(self) -> Tuple[Optional[str], Optional[str]]:
        """Return (username, token/password), or (None, None) without a username"""
        if self.username:
            return (self.username, self.api_token or self.password)
        return (None, None)

    def job_page_url(self, job_name: str) -> str:
        return f"{self.host_url}/job/{job_name}"

    def view_page_url(self, view_name: str) -> str:
        return f"{self.host_url}/view/{view_name}"

    def merged(self, override: Mapping[str, Any]) -> 'JenkinsConfig':
        """Return a copy with the fields present in override replaced"""
        partial = JenkinsConfig.model_validate(dict(override))
        return self.model_copy(update=partial.model_dump(exclude_unset=True))


class JenkinsSettings(BaseSettings):
    """
    Jenkins connection settings read from the environment.

    Priority order:
    1. Directly passed parameters
    2. Environment variables
    3. .env file
    """

    # Use 'url' as the primary field name, but accept 'jenkins_url' as alias
    url: Optional[str] = Field(
        default=None,
        alias="jenkins_url",
        description="Jenkins server URL (e.g., http://localhost:8080)"
    )
    username: Optional[str] = Field(
        default=None,
        description="Jenkins username"
    )
    password: Optional[str] = Field(
        default=None,
        description="Jenkins password"
    )
    token: Optional[str] = Field(
        default=None,
        description="Jenkins API token (preferred over password)"
    )

    connect_timeout: int = Field(
        default=10,
        description="Connection timeout in seconds",
        ge=2,
        le=60
    )

    read_timeout: int = Field(
        default=30,
        description="Read timeout for API responses in seconds",
        ge=5,
        le=300
    )

    # SSL verification
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL certificates"
    )

    # Root listing disk cache
    enable_cache: bool = Field(
        default=False,
        description="Persist the root /api/json listing to disk"
    )
    cache_dir: Optional[str] = Field(
        default=None,
        description="Directory holding the root listing cache files"
    )

    model_config = SettingsConfigDict(
        env_prefix="JENKINS_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Allow both 'url' and 'jenkins_url'
        extra="ignore"
    )

    @field_validator('url')
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Remove trailing slash from URL"""
        return _strip_trailing_slash(v)

    @property
    def is_configured(self) -> bool:
        """Check if minimum required settings are present"""
        return bool(self.url)

    @property
    def auth_method(self) -> str:
        """Return the authentication method being used"""
        if not self.username:
            return "None"
        if self.token:
            return "API Token"
        elif self.password:
            return "Password"
        return "None"

    @property
    def timeouts(self) -> Tuple[int, int]:
        """(connect, read) tuple as accepted by requests"""
        return (self.connect_timeout, self.read_timeout)

    def get_credentials(self) -> Tuple[Optional[str], Optional[str]]:
        """Return (username, password/token) tuple for authentication"""
        if self.username:
            auth_value = self.token if self.token else self.password
            return (self.username, auth_value)
        return (None, None)

    def to_config(self) -> JenkinsConfig:
        """Project these settings onto a server profile"""
        if not self.is_configured:
            raise JenkinsConfigError("Jenkins settings incomplete. Required: url")
        return JenkinsConfig(
            host_url=self.url,
            username=self.username or '',
            password=self.password or '',
            api_token=self.token or '',
        )

    def log_config(self, hide_sensitive: bool = True) -> None:
        """Log current configuration (with optional masking of sensitive data)"""
        logger.info("Jenkins Configuration:")
        logger.info(f"  URL: {self.url or 'Not configured'}")
        logger.info(f"  Username: {self.username or 'Not configured'}")
        logger.info(f"  Connect Timeout: {self.connect_timeout}s")
        logger.info(f"  Read Timeout: {self.read_timeout}s")
        logger.info(f"  Verify SSL: {self.verify_ssl}")
        logger.info(f"  Cache: {self.cache_dir if self.enable_cache else 'disabled'}")

        if hide_sensitive:
            logger.info(f"  Authentication: {self.auth_method}")
        else:
            logger.info(f"  Token: {self.token or 'Not set'}")
            logger.info(f"  Password: {self.password or 'Not set'}")


def load_settings(env_file: Optional[str] = None, **override_values) -> JenkinsSettings:
    """
    Load Jenkins settings from the environment.

    Args:
        env_file: Optional path to .env file
        **override_values: Direct override values (highest priority)

    Returns:
        JenkinsSettings instance with merged configuration
    """
    if env_file:
        logger.debug(f"Loading settings with env file: {env_file}")
        settings = JenkinsSettings(_env_file=env_file)
    else:
        settings = JenkinsSettings()

    # Apply direct overrides (highest priority)
    for key, value in override_values.items():
        if value is not None and hasattr(settings, key):
            setattr(settings, key, value)

    settings.log_config()
    return settings
