"""Common base for the typed resource views."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from ..exceptions import JenkinsDecodeError


class JenkinsResource(BaseModel):
    """
    Read-only projection of one decoded Jenkins JSON document.

    Fields use the camelCase Jenkins keys as aliases; keys without a declared
    field are kept as extras. The session reference is a plain, non-owning
    handle used for follow-up requests.
    """

    model_config = ConfigDict(populate_by_name=True, extra='allow')

    _jenkins: Any = PrivateAttr(default=None)

    @classmethod
    def from_api(cls, data: Mapping[str, Any], jenkins: Any = None, **private: Any):
        try:
            resource = cls.model_validate(dict(data))
        except ValidationError as e:
            raise JenkinsDecodeError(f"Unexpected {cls.__name__} document: {e}") from e
        resource._jenkins = jenkins
        for name, value in private.items():
            setattr(resource, f"_{name}", value)
        return resource

    @property
    def jenkins(self) -> Any:
        """The session that produced this resource"""
        return self._jenkins

    def get_data(self) -> Dict[str, Any]:
        """The document with its original Jenkins keys"""
        return self.model_dump(by_alias=True, exclude_unset=True)


def parameters_from_actions(actions: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
    """name -> value of the first action carrying build parameters"""
    for action in actions or []:
        if action and 'parameters' in action:
            return {p['name']: p.get('value') for p in action['parameters']}
    return {}
