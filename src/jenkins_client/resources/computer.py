"""Computer (build agent) resource."""

from typing import Any, Dict, Optional

from pydantic import Field

from .base import JenkinsResource


class Computer(JenkinsResource):
    display_name: str = Field(alias='displayName')
    offline: bool = False
    offline_cause: Optional[Dict[str, Any]] = Field(default=None, alias='offlineCause')
    num_executors: int = Field(default=0, alias='numExecutors')
    idle: bool = True

    @property
    def name(self) -> str:
        return self.display_name

    def is_offline(self) -> bool:
        return self.offline

    def get_offline_cause(self) -> Dict[str, Any]:
        return self.offline_cause or {}

    def toggle_offline(self) -> 'Computer':
        self.jenkins.toggle_offline_computer(self.name)
        return self

    def delete(self) -> 'Computer':
        self.jenkins.delete_computer(self.name)
        return self

    def get_configuration(self) -> str:
        return self.jenkins.get_computer_config(self.name)
