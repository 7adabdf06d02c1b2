"""A single Postman request item."""

from api_docs_postman.parser.base import EndpointMetadata
from api_docs_postman.writer.body import encode_body
from api_docs_postman.writer.headers import resolve_headers
from api_docs_postman.writer.url import build_url_object


def build_endpoint_item(endpoint: EndpointMetadata, base_url: str) -> dict:
    """Compose the request item for one endpoint.

    Authenticated endpoints inherit the collection's auth; all others are
    forced to ``noauth``.
    """
    request = {
        "url": build_url_object(endpoint, base_url),
        "method": endpoint.methods[0],
        "header": resolve_headers(endpoint.headers),
    }

    body = encode_body(endpoint)
    if body is not None:
        request["body"] = body
    if endpoint.description:
        request["description"] = endpoint.description
    if not endpoint.authenticated:
        request["auth"] = {"type": "noauth"}

    return {
        "name": endpoint.title or endpoint.uri,
        "request": request,
        "response": [],
    }
