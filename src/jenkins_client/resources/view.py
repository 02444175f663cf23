"""View resource."""

from typing import Any, Dict, List

from pydantic import Field, field_validator

from .base import JenkinsResource
from .job import Job

# Severity of the job color badges; unknown colors rank above all of them.
COLOR_PRIORITIES = {
    'disabled': 0,
    'blue': 1,
    'blue_anime': 2,
    'yellow': 5,
    'yellow_anime': 6,
    'red': 10,
    'red_anime': 11,
}
UNKNOWN_COLOR_PRIORITY = 999


def get_color_priority(color: str) -> int:
    return COLOR_PRIORITIES.get(color, UNKNOWN_COLOR_PRIORITY)


class View(JenkinsResource):
    name: str
    description: str = ''
    url: str = ''
    jobs: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator('description', 'url', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return '' if v is None else v

    def get_jobs(self) -> List[Job]:
        """Fetch every member job, one request each"""
        return [self.jenkins.get_job(job['name']) for job in self.jobs]

    def get_color(self) -> str:
        """Color of the most severe member job, 'blue' for an empty view"""
        color = 'blue'
        for job in self.jobs:
            job_color = job.get('color', '')
            if get_color_priority(job_color) > get_color_priority(color):
                color = job_color
        return color

    get_color_priority = staticmethod(get_color_priority)
