"""Request body encoding: form data for multipart endpoints, raw JSON otherwise."""

import json

from api_docs_postman.parser.base import EndpointMetadata, content_type

MULTIPART = "multipart/form-data"


def encode_body(endpoint: EndpointMetadata) -> dict | None:
    """Return the Postman body object, or None if the endpoint takes no body."""
    if not endpoint.body_parameters:
        return None

    if content_type(endpoint) == MULTIPART:
        return {"mode": "formdata", "formdata": _form_data(endpoint)}

    return {"mode": "raw", "raw": json.dumps(endpoint.clean_body_parameters, indent=4, default=str)}


def _form_data(endpoint: EndpointMetadata) -> list[dict]:
    fields = [
        {"key": key, "value": value, "type": "text"}
        for key, value in endpoint.clean_body_parameters.items()
    ]
    # File contents are never embedded; users attach files after import
    fields.extend({"key": key, "src": [], "type": "file"} for key in endpoint.file_parameters)
    return fields
