"""Executor resource: one build slot on a computer."""

from typing import Any, Dict, Optional

from pydantic import Field, PrivateAttr

from .base import JenkinsResource


class Executor(JenkinsResource):
    number: int = 0
    progress: int = -1
    idle: bool = True
    current_executable: Optional[Dict[str, Any]] = Field(default=None, alias='currentExecutable')

    _computer: str = PrivateAttr(default='')

    @property
    def computer(self) -> str:
        """Name of the computer owning this slot"""
        return self._computer

    def get_build_number(self) -> int:
        if self.current_executable:
            return self.current_executable.get('number', 0)
        return 0

    def get_build_url(self) -> str:
        if self.current_executable:
            return self.current_executable.get('url', '')
        return ''

    def stop(self) -> None:
        self.jenkins.stop_executor(self)
