"""Postman URL object: protocol, host variable, path, query and path variables."""

import re
from typing import Any
from urllib.parse import quote, quote_plus

from api_docs_postman.parser.base import EndpointMetadata, Parameter

HOST_VARIABLE = "{{baseUrl}}"
ARRAY_MARKER = "[]"

# users/{id} and users/{id?} both become users/:id
PLACEHOLDER_RE = re.compile(r"\{(\w+)\??\}")
TAG_RE = re.compile(r"<[^>]*>")


def build_url_object(endpoint: EndpointMetadata, base_url: str) -> dict:
    """Decompose an endpoint URI into a Postman URL object."""
    url = {
        "protocol": "https" if base_url.startswith("https") else "http",
        "host": HOST_VARIABLE,
        "path": PLACEHOLDER_RE.sub(r":\1", endpoint.uri),
        "query": _build_query(endpoint.query_parameters),
    }

    # Insomnia reads the raw URL on import rather than the structured fields
    query_string = "&".join(f"{quote(q['key'], safe='[]')}={q['value']}" for q in url["query"])
    url["raw"] = f"{url['protocol']}://{url['host']}/{url['path']}"
    if query_string:
        url["raw"] += f"?{query_string}"

    variables = [
        {
            "id": name,
            "key": name,
            "value": url_encode(param.value),
            "description": param.description,
        }
        for name, param in endpoint.url_parameters.items()
        if _in_template(name, endpoint.uri)
    ]
    if variables:
        url["variable"] = variables

    return url


def url_encode(value: Any) -> str:
    """Form-encode a single example value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return quote_plus(str(value))


def strip_tags(text: str | None) -> str:
    return TAG_RE.sub("", text or "")


def is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, dict)) and not value)


def _build_query(parameters: dict[str, Parameter]) -> list[dict]:
    query = []
    for name, param in parameters.items():
        # Example-only parameters stay documented but aren't sent by default
        disabled = not param.required and is_empty(param.value)
        description = strip_tags(param.description)

        if param.type.endswith(ARRAY_MARKER):
            # Indexed keys (filters[0]=a) rather than filters[]=a, so
            # object-shaped query parameters can use the same form
            values = [] if is_empty(param.value) else param.value
            if isinstance(values, dict):
                indexed = values.items()
            elif isinstance(values, list):
                indexed = enumerate(values)
            else:
                indexed = enumerate([values])
            for index, value in indexed:
                query.append({
                    "key": f"{name}[{index}]",
                    "value": url_encode(value),
                    "description": description,
                    "disabled": disabled,
                })
        else:
            query.append({
                "key": name,
                "value": url_encode(param.value),
                "description": description,
                "disabled": disabled,
            })
    return query


def _in_template(name: str, uri: str) -> bool:
    return f"{{{name}}}" in uri or f"{{{name}?}}" in uri
