"""Load extracted endpoint documentation from YAML or JSON files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .base import EndpointMetadata, Grouping

logger = logging.getLogger(__name__)


class EndpointFileError(ValueError):
    """Raised when an endpoint file cannot be turned into a grouping."""


def load_grouping(file_path: Path) -> Grouping:
    """Load endpoints from a file, either pre-grouped or as a flat list.

    A mapping is read as ``{group name: [endpoint, ...]}``; a list is grouped
    by each endpoint's ``groupName``.
    """
    text = file_path.read_text(encoding="utf-8")

    # YAML is a superset of JSON, so one loader covers both formats
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise EndpointFileError(f"{file_path}: not valid YAML or JSON ({e})") from e

    try:
        if isinstance(data, dict):
            grouping = _parse_groups(data)
        elif isinstance(data, list):
            grouping = group_endpoints([EndpointMetadata(**item) for item in data])
        else:
            raise EndpointFileError(f"{file_path}: expected a mapping of groups or a list of endpoints")
    except ValidationError as e:
        raise EndpointFileError(f"{file_path}: invalid endpoint definition\n{e}") from e
    except TypeError as e:
        raise EndpointFileError(f"{file_path}: {e}") from e

    logger.debug("Loaded %d groups from %s", len(grouping), file_path)
    return grouping


def group_endpoints(endpoints: list[EndpointMetadata]) -> Grouping:
    """Group endpoints by their group name, keeping first-seen group order."""
    groups: Grouping = {}
    for ep in endpoints:
        groups.setdefault(ep.group_name, []).append(ep)
    return groups


def _parse_groups(data: dict) -> Grouping:
    groups: Grouping = {}
    for group_name, items in data.items():
        if not isinstance(items, list):
            raise TypeError(f"group {group_name!r} is not a list")
        groups[str(group_name)] = [
            EndpointMetadata(**{**item, "groupName": str(group_name)}) for item in items
        ]
    return groups
