def code_from_path(path: str) -> str | None:
    """Return the country code carried by a ``/{code}`` path, or None for the list view."""
    code = path.strip().strip("/")
    return code or None


def border_link(code: str) -> str:
    return f"/{code}"
