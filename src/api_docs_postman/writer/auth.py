"""Collection-level authentication descriptor."""

from api_docs_postman.config import AuthConfig


def build_auth_object(auth: AuthConfig) -> dict:
    """Map the auth config to a Postman auth object.

    ``basic`` and ``bearer`` map directly; any other location is described
    as an API key sent in that location under ``auth.name``.
    """
    if not auth.enabled:
        return {"type": "noauth"}

    if auth.in_ == "basic":
        return {"type": "basic"}
    if auth.in_ == "bearer":
        return {"type": "bearer"}

    return {
        "type": "apikey",
        "apikey": [
            {"key": "in", "value": auth.in_, "type": "string"},
            {"key": "key", "value": auth.name, "type": "string"},
        ],
    }
