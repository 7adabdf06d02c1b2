"""Request header list for a Postman item."""

DEFAULT_HEADERS = [("Accept", "application/json")]

# Written as "@{{name}}" in docs config so it isn't substituted during generation
ESCAPED_VARIABLE = "@{{"
VARIABLE = "{{"


def merge_ordered(first: list[tuple[str, str]], second: list[tuple[str, str]]) -> list[tuple[str, str]]:
    """Merge two ordered header lists, keeping the first occurrence of each key.

    Keys are compared case-insensitively, as HTTP header names are.
    """
    merged = []
    seen = set()
    for key, value in [*first, *second]:
        if key.lower() in seen:
            continue
        seen.add(key.lower())
        merged.append((key, value))
    return merged


def resolve_headers(headers: dict[str, str]) -> list[dict]:
    """Build the item's header list: endpoint headers, then missing defaults."""
    merged = merge_ordered(list(headers.items()), DEFAULT_HEADERS)
    return [{"key": key, "value": value.replace(ESCAPED_VARIABLE, VARIABLE)} for key, value in merged]
