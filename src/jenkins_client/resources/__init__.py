from .base import JenkinsResource
from .build import Build, BuildResult
from .computer import Computer
from .executor import Executor
from .job import Job
from .queue import JobQueue, Queue
from .test_report import TestReport
from .view import View, get_color_priority

__all__ = [
    'Build',
    'BuildResult',
    'Computer',
    'Executor',
    'JenkinsResource',
    'Job',
    'JobQueue',
    'Queue',
    'TestReport',
    'View',
    'get_color_priority',
]
