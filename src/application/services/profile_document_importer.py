"""
Profile Document Importer - Application Layer

Reads a YAML device profile document into the same DTO a JSON submission
produces, and writes stored profiles back out as YAML documents.
"""

import re
from typing import Any, Union

import yaml
from pydantic import ValidationError

from src.domain.entities.device_profile import DeviceProfile
from src.domain.entities.errors import ClientError
from src.shared import get_logger

from ..dtos.device_profile_dto import DeviceProfileCreateDTO, DeviceProfileResponseDTO

logger = get_logger(__name__)

EMPTY_DOCUMENT = "File is empty"

# Free-form resource descriptions are kept exactly as written.
_OPAQUE_KEYS = frozenset({"device_resources", "resources"})
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
# An empty key such as `labels:` loads as None and stands for an empty list.
_LIST_KEYS = frozenset(
    {
        "labels",
        "device_resources",
        "resources",
        "commands",
        "parameter_names",
        "responses",
        "expected_values",
    }
)

_SERVER_FIELDS = {"id", "created", "modified"}


def to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _normalize_keys(value: Any) -> Any:
    if isinstance(value, dict):
        normalized = {}
        for key, item in value.items():
            name = to_snake_case(key) if isinstance(key, str) else key
            if item is None and name in _LIST_KEYS:
                item = []
            normalized[name] = item if name in _OPAQUE_KEYS else _normalize_keys(item)
        return normalized
    if isinstance(value, list):
        return [_normalize_keys(item) for item in value]
    return value


class ProfileDocumentImporter:
    """YAML codec for device profile documents."""

    def parse(self, content: Union[str, bytes, None]) -> DeviceProfileCreateDTO:
        """
        Parse a profile document.

        Both ``camelCase`` and ``snake_case`` keys are accepted.

        Raises:
            ClientError: If the document is empty, not YAML, not a mapping or
                does not have the shape of a profile
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ClientError("Profile document is not UTF-8 text") from e
        if content is None or not content.strip():
            raise ClientError(EMPTY_DOCUMENT)

        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.info("profile.import.unparseable", error=str(e))
            raise ClientError(f"Profile document is not valid YAML: {e}") from e

        if not isinstance(document, dict):
            raise ClientError("Profile document must be a mapping")

        try:
            return DeviceProfileCreateDTO.model_validate(_normalize_keys(document))
        except ValidationError as e:
            logger.info("profile.import.invalid", errors=e.error_count())
            raise ClientError(
                "Profile document does not describe a device profile",
                details={
                    "errors": e.errors(
                        include_url=False, include_context=False, include_input=False
                    )
                },
            ) from e

    def render(self, profile: DeviceProfile) -> str:
        """Write a profile as a YAML document that ``parse`` accepts again."""
        payload = DeviceProfileResponseDTO.from_domain(profile).model_dump(
            mode="json",
            exclude_none=True,
            exclude={
                **{name: True for name in _SERVER_FIELDS},
                "commands": {"__all__": _SERVER_FIELDS},
            },
        )
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
