from typing import Any, Dict, List, Optional


class PostDecodeError(ValueError):
    """A fetched JSON document did not have the shape of a post or metadata file."""

    def __init__(self, source: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.source = source
        self.errors = errors or []
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())) or "<root>"
            for err in self.errors
        )
        message = f"Malformed document at {source}"
        if fields:
            message += f" (invalid fields: {fields})"
        super().__init__(message)


class ElementNotFoundError(LookupError):
    """The page has no element with the requested id."""

    def __init__(self, dom_id: str):
        self.dom_id = dom_id
        super().__init__(f"No element with id '{dom_id}' in page")
