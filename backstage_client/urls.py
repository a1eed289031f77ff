"""URL path helpers."""


def join_path(*parts: str) -> str:
    """Join URL path segments with single slashes.

    ``join_path("/api", "/catalog/", "entities")`` -> ``/api/catalog/entities``
    """
    segments = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/" + "/".join(segments)
