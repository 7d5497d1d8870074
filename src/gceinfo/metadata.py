from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Metadata(BaseModel):
    """
    Key/value pairs attached to an instance and served by the metadata
    server (startup scripts, ssh keys, ...). Stored as ordered pairs so the
    object stays immutable.

    `items` is None when the payload carried no "items" key. A value of
    None means the entry was sent without a "value".
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[tuple[str, str | None], ...] | None = None
    fingerprint: str | None = Field(
        default=None, description="Set by the service; required to update metadata"
    )

    @classmethod
    def of(cls, values: Mapping[str, str]) -> "Metadata":
        return cls(items=tuple(values.items()))

    @property
    def values(self) -> dict[str, str | None]:
        return dict(self.items or ())

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.items is not None:
            payload["items"] = [_item_to_wire(key, value) for key, value in self.items]
        if self.fingerprint is not None:
            payload["fingerprint"] = self.fingerprint
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "Metadata":
        items = None
        if payload.get("items") is not None:
            items = tuple((item["key"], item.get("value")) for item in payload["items"])
        return cls(items=items, fingerprint=payload.get("fingerprint"))


def _item_to_wire(key: str, value: str | None) -> dict[str, str]:
    if value is None:
        return {"key": key}
    return {"key": key, "value": value}
