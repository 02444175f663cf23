"""Job resource."""

from typing import Any, Dict, List, Optional
import xml.etree.ElementTree as ET

from pydantic import Field

from .base import JenkinsResource
from .build import Build


class Job(JenkinsResource):
    name: str
    url: str = ''
    color: Optional[str] = None
    builds: List[Dict[str, Any]] = Field(default_factory=list)
    last_build: Optional[Dict[str, Any]] = Field(default=None, alias='lastBuild')
    last_successful_build: Optional[Dict[str, Any]] = Field(default=None, alias='lastSuccessfulBuild')
    properties: List[Dict[str, Any]] = Field(default_factory=list, alias='property')
    actions: List[Dict[str, Any]] = Field(default_factory=list)

    def get_builds(self) -> List[Build]:
        """Fetch every build listed on the job, one request each"""
        return [self.get_build(build['number']) for build in self.builds]

    def get_build(self, build_id: int) -> Build:
        return self.jenkins.get_build(self.name, build_id)

    def get_last_build(self) -> Optional[Build]:
        if not self.last_build:
            return None
        return self.get_build(self.last_build['number'])

    def get_last_successful_build(self) -> Optional[Build]:
        if not self.last_successful_build:
            return None
        return self.get_build(self.last_successful_build['number'])

    def get_parameters_definitions(self) -> Dict[str, Dict[str, Any]]:
        """
        Parameter definitions keyed by parameter name.

        Recent Jenkins versions publish them under `property`, older ones under
        `actions`; both are scanned, `property` first.

        Returns:
            {name: {'description', 'default', 'type', 'choices'}}
        """
        parameters = {}
        for entry in self.properties + self.actions:
            if not entry or 'parameterDefinitions' not in entry:
                continue

            for definition in entry['parameterDefinitions']:
                default_value = definition.get('defaultParameterValue') or {}
                parameters[definition['name']] = {
                    'description': definition.get('description'),
                    'default': default_value.get('value'),
                    'type': definition.get('type'),
                    'choices': definition.get('choices'),
                }
        return parameters

    def get_config(self) -> str:
        """config.xml of the job"""
        return self.jenkins.get_job_config(self.name)

    def get_config_element(self) -> ET.Element:
        return ET.fromstring(self.get_config())

    def launch(self, parameters: Optional[Dict[str, Any]] = None) -> bool:
        return self.jenkins.launch_job(self.name, parameters)
