"""Test report resource of one build."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .base import JenkinsResource

PASSED = 'PASSED'
FAILED = 'FAILED'


class CaseResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    name: Optional[str] = None
    class_name: Optional[str] = Field(default=None, alias='className')
    status: Optional[str] = None
    duration: float = 0.0


class SuiteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    name: Optional[str] = None
    duration: float = 0.0
    cases: List[CaseResult] = Field(default_factory=list)


class TestReport(JenkinsResource):
    # Keep pytest from collecting this class.
    __test__ = False

    duration: float = 0.0
    fail_count: int = Field(default=0, alias='failCount')
    pass_count: int = Field(default=0, alias='passCount')
    skip_count: int = Field(default=0, alias='skipCount')
    suites: List[SuiteResult] = Field(default_factory=list)

    _job_name: str = PrivateAttr(default='')
    _build_number: Union[int, str] = PrivateAttr(default=0)

    @property
    def job_name(self) -> str:
        return self._job_name

    @property
    def build_number(self) -> Union[int, str]:
        """Build number, or the permalink (e.g. lastBuild) the report was fetched by"""
        return self._build_number

    def get_original_test_report(self) -> str:
        """The report as JSON text with the Jenkins keys"""
        return self.model_dump_json(by_alias=True, exclude_unset=True)

    def get_suite(self, suite_id: int) -> SuiteResult:
        return self.suites[suite_id]

    def get_suite_status(self, suite_id: int) -> str:
        """FAILED as soon as one case failed, PASSED otherwise"""
        for case in self.get_suite(suite_id).cases:
            if case.status == FAILED:
                return FAILED
        return PASSED
