"""Build queue resources."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import JenkinsResource, parameters_from_actions


class JobQueue(JenkinsResource):
    """One pending build request"""

    id: int
    task: Dict[str, Any] = Field(default_factory=dict)
    actions: List[Dict[str, Any]] = Field(default_factory=list)
    why: Optional[str] = None

    def get_job_name(self) -> Optional[str]:
        return self.task.get('name')

    def get_input_parameters(self) -> Dict[str, Any]:
        return parameters_from_actions(self.actions)

    def cancel(self) -> None:
        self.jenkins.cancel_queue(self)


class Queue(JenkinsResource):
    items: List[Dict[str, Any]] = Field(default_factory=list)

    def get_job_queues(self) -> List[JobQueue]:
        return [JobQueue.from_api(item, self.jenkins) for item in self.items]
