"""Shared model base and the scalar-or-list string type."""

from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _promote_scalar(value: Any) -> Any:
    """Normalize a string or a list of strings to a list of strings."""
    if value is None:
        return []
    if isinstance(value, list):
        # Element types are checked by the List[str] validation that follows
        return value
    if isinstance(value, str):
        return [value]
    raise ValueError(
        f"expected a string or a list of strings, got {type(value).__name__}"
    )


# One or more strings: `groups: wheel` and `groups: [wheel]` both decode to ["wheel"]
MultiString = Annotated[List[str], BeforeValidator(_promote_scalar)]


class LiftModel(BaseModel):
    """Base for every alpine-data section.

    Values are decoded strictly: a document that says ``port: "22"`` is
    rejected instead of silently coerced. Unknown keys are ignored since
    alpine-data documents are often shared with other provisioning tools.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_document(self) -> dict:
        """Encode the model back to its document shape."""
        return self.model_dump(by_alias=True)
