"""
Multi-environment factory.

Keeps a default server profile plus partial per-environment overrides and
builds a fresh Jenkins session for any of them:

    multi = MultiJenkins(
        host_url='http://jenkins.dev',
        username='ci',
        api_token='...',
        env_info={
            'prod': {'hostUrl': 'http://jenkins.prod'},
            'test': {'hostUrl': 'http://jenkins.test', 'apiToken': '...'},
        },
    )
    jenkins = multi.create('prod')
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .config import JenkinsConfig, JenkinsSettings
from .exceptions import JenkinsConfigError
from .jenkins import Jenkins

logger = logging.getLogger(__name__)


class MultiJenkins:
    """
    Factory of Jenkins sessions keyed by environment name.

    Sessions are not pooled: every create() call returns a new one.
    """

    def __init__(
            self,
            host_url: str = '',
            username: str = '',
            password: str = '',
            api_token: str = '',
            env_info: Optional[Mapping[str, Mapping[str, Any]]] = None,
            enable_cache: bool = False,
            cache_dir: str = '',
            job_name: str = '',
            env_name: str = '',
            settings: Optional[JenkinsSettings] = None
    ):
        self.default_config = JenkinsConfig(
            host_url=host_url,
            username=username,
            password=password,
            api_token=api_token,
        )
        self.env_info: Dict[str, Mapping[str, Any]] = dict(env_info or {})
        self.enable_cache = enable_cache
        self.cache_dir = cache_dir
        # Default job for callers working on a single job
        self.job_name = job_name
        self.env_name = env_name
        self.settings = settings

    @classmethod
    def from_settings(
            cls,
            settings: JenkinsSettings,
            env_info: Optional[Mapping[str, Mapping[str, Any]]] = None,
            **kwargs
    ) -> 'MultiJenkins':
        """Use the environment settings as the default profile"""
        config = settings.to_config()
        return cls(
            host_url=config.host_url,
            username=config.username,
            password=config.password,
            api_token=config.api_token,
            env_info=env_info,
            enable_cache=settings.enable_cache,
            cache_dir=settings.cache_dir or '',
            settings=settings,
            **kwargs
        )

    def use_env(self, env_name: str) -> 'MultiJenkins':
        """Make env_name the active environment; an empty name is ignored"""
        if env_name:
            self.env_name = env_name
        return self

    def get_env_config(self, env_name: Optional[str] = None) -> JenkinsConfig:
        """
        Resolve the profile of an environment.

        Args:
            env_name: Environment name; defaults to the active environment

        Returns:
            The default profile merged with the environment overrides, or the
            default profile when no environment is selected

        Raises:
            JenkinsConfigError: the environment is not in env_info
        """
        env_name = env_name or self.env_name
        if not env_name:
            return self.default_config

        if env_name not in self.env_info:
            raise JenkinsConfigError(f"get unknown env config: {env_name}")
        return self.default_config.merged(self.env_info[env_name])

    def create(self, env_name: Optional[str] = None) -> Jenkins:
        config = self.get_env_config(env_name)
        logger.debug(f"Creating Jenkins session for env '{env_name or self.env_name or 'default'}': {config.host_url}")
        return Jenkins(
            config.host_url,
            username=config.username,
            password=config.password,
            api_token=config.api_token,
            enable_cache=self.enable_cache,
            cache_dir=self.cache_dir,
            settings=self.settings,
        )

    get_jenkins = create
