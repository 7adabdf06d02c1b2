"""Postman Collection v2.1 writer that assembles the collection document."""

import logging
import uuid
from functools import partial
from urllib.parse import urlsplit

from api_docs_postman.config import DocumentationConfig
from api_docs_postman.parser.base import Grouping
from api_docs_postman.writer.auth import build_auth_object
from api_docs_postman.writer.base_url import BaseUrlResolver, format_root, resolve_base_url
from api_docs_postman.writer.item import build_endpoint_item

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "2.1.0"
SCHEMA_URL = f"https://schema.getpostman.com/json/collection/v{SCHEMA_VERSION}/collection.json"


class PostmanCollectionWriter:
    """Builds Postman collections from grouped endpoint documentation."""

    def __init__(self, config: DocumentationConfig | None = None, resolver: BaseUrlResolver | None = None):
        self.config = config or DocumentationConfig()
        resolver = resolver or partial(format_root, app_url=self.config.app_url)
        self.base_url = resolve_base_url(self.config.collection_base_url, resolver).value

    def generate(self, grouping: Grouping) -> dict:
        """Generate the collection document for the given endpoint groups."""
        collection = {
            "variable": [
                {
                    "id": "baseUrl",
                    "key": "baseUrl",
                    "type": "string",
                    "name": "string",
                    "value": host_of(self.base_url),
                },
            ],
            "info": {
                "name": self.config.title or f"{self.config.app_name} API",
                "_postman_id": str(uuid.uuid4()),
                "description": self.config.description or "",
                "schema": SCHEMA_URL,
            },
            "item": [
                {
                    "name": group_name,
                    "description": endpoints[0].group_description if endpoints else "",
                    "item": [build_endpoint_item(ep, self.base_url) for ep in endpoints],
                }
                for group_name, endpoints in grouping.items()
            ],
            "auth": build_auth_object(self.config.auth),
        }
        logger.debug(
            "Built collection with %d groups, %d requests",
            len(collection["item"]),
            sum(len(group["item"]) for group in collection["item"]),
        )
        return collection


def build_collection(grouping: Grouping, config: DocumentationConfig | None = None) -> dict:
    """Shortcut for ``PostmanCollectionWriter(config).generate(grouping)``."""
    return PostmanCollectionWriter(config).generate(grouping)


def host_of(base_url: str) -> str:
    """Return the host of an absolute URL, or the string itself if it isn't one.

    The host keeps its original case, and IPv6 literals keep their brackets.
    """
    try:
        parts = urlsplit(base_url)
    except ValueError:
        return base_url
    if not (parts.scheme and parts.netloc and parts.hostname):
        return base_url

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.index("]") + 1]
    return host.partition(":")[0]
