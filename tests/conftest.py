"""Shared fixtures: a Jenkins session whose HTTP layer is faked."""

import json
from unittest.mock import patch

import pytest
import requests

from jenkins_client import Jenkins, JenkinsSettings

BASE_URL = "http://jenkins.local:8080"


def make_response(status=200, json_data=None, text=None, url=BASE_URL, headers=None):
    """Build a real requests.Response"""
    response = requests.Response()
    response.status_code = status
    response.url = url
    if json_data is not None:
        text = json.dumps(json_data)
    response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


@pytest.fixture
def settings():
    return JenkinsSettings(url=BASE_URL)


@pytest.fixture
def mock_request():
    """Patch the transport; set return_value / side_effect per test"""
    with patch("jenkins_client.jenkins.requests.request") as mocked:
        mocked.return_value = make_response(json_data={})
        yield mocked


@pytest.fixture
def jenkins(settings, mock_request):
    return Jenkins(BASE_URL, settings=settings)


def called_urls(mock_request):
    return [c.args[1] for c in mock_request.call_args_list]
