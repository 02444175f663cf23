"""
Build resource.

Timestamps and durations come from Jenkins in milliseconds; the accessors
return whole seconds.
"""

import enum
import math
import time
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import JenkinsResource, parameters_from_actions
from .executor import Executor


class BuildResult(str, enum.Enum):
    SUCCESS = 'SUCCESS'
    FAILURE = 'FAILURE'
    UNSTABLE = 'UNSTABLE'
    ABORTED = 'ABORTED'
    WAITING = 'WAITING'
    RUNNING = 'RUNNING'


def parse_result(value: Any) -> BuildResult:
    """Map a raw result to BuildResult; anything unknown is RUNNING"""
    try:
        return BuildResult(value)
    except ValueError:
        return BuildResult.RUNNING


class Build(JenkinsResource):
    number: int = 0
    url: str = ''
    timestamp: int = 0
    duration: int = 0
    estimated_duration: Optional[int] = Field(default=None, alias='estimatedDuration')
    result: Optional[str] = None
    built_on: Optional[str] = Field(default=None, alias='builtOn')
    actions: List[Dict[str, Any]] = Field(default_factory=list)

    def get_result(self) -> BuildResult:
        return parse_result(self.result)

    def is_running(self) -> bool:
        return self.get_result() is BuildResult.RUNNING

    def get_input_parameters(self) -> Dict[str, Any]:
        return parameters_from_actions(self.actions)

    def get_timestamp(self) -> int:
        return int(self.timestamp / 1000)

    def get_duration(self) -> int:
        return int(self.duration / 1000)

    def get_elapsed(self) -> int:
        """Seconds since the build started, by the local clock"""
        return int(time.time()) - self.get_timestamp()

    def get_executor(self) -> Optional[Executor]:
        """
        Find the executor currently running this build.

        Scans every executor of the session and matches on the URL of the
        build it is running. Returns None for finished builds.
        """
        if not self.is_running():
            return None

        found = None
        for executor in self.jenkins.get_executors():
            if executor.get_build_url() == self.url:
                found = executor
        return found

    def get_progress(self) -> Optional[int]:
        executor = self.get_executor()
        if executor is None:
            return None
        return executor.progress

    def get_estimated_duration(self) -> int:
        """
        Expected total duration in seconds.

        Jenkins reports estimatedDuration since 1.461; older servers only
        expose executor progress, from which the total is extrapolated.
        """
        if self.estimated_duration is not None:
            return int(self.estimated_duration / 1000)

        progress = self.get_progress()
        if progress is not None and progress > 0:
            return int(math.ceil(self.get_elapsed() / (progress / 100)))
        return 0

    def get_remaining_execution_time(self) -> int:
        # The local clock may differ from the Jenkins server clock.
        return max(0, self.get_estimated_duration() - self.get_elapsed())
