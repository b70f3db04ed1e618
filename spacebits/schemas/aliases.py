"""
Historical field names.

Earlier revisions of the stored snapshots (and some upstream feeds) used
different names for the same logical field. Every model field that has ever
had another name is declared through `aliased()`, which accepts the canonical
name and every entry below on input and always writes the canonical name.
"""
from typing import Any

from pydantic import AliasChoices, Field

# canonical name -> other names accepted on input
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "update_time": ("updatedTime", "updateDate", "update_date"),
    "updated_date_time": ("updatedDateTime", "updated_time"),
    "self": ("this",),
    "valid": ("valid_auth",),
    "launches": ("result",),
}


def accepted_names(canonical: str) -> tuple[str, ...]:
    return (canonical, *FIELD_ALIASES.get(canonical, ()))


def aliased(canonical: str, default: Any = ..., **kwargs: Any) -> Any:
    """Field() that reads any accepted name and serializes as `canonical`."""
    return Field(
        default,
        validation_alias=AliasChoices(*accepted_names(canonical)),
        serialization_alias=canonical,
        **kwargs,
    )
