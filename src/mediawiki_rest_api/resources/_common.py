"""Path and query helpers shared by the resource accessors."""

from urllib.parse import quote


def encode_title(title: str) -> str:
    """Percent-encode a page or file title for use as one path segment."""
    return quote(title, safe="")


def query_params(**values: object) -> dict[str, str]:
    """Build query parameters, dropping None values.

    Booleans serialize as "true"/"false", everything else via ``str()``.
    """
    params = {}
    for name, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[name] = "true" if value else "false"
        else:
            params[name] = str(value)
    return params
