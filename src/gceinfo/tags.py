from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Tags(BaseModel):
    """Network tags, used to pick firewall sources and targets."""

    model_config = ConfigDict(frozen=True)

    # None when the payload had no "items" key, which is not the same as []
    values: tuple[str, ...] | None = None
    fingerprint: str | None = Field(
        default=None, description="Set by the service; required to update tags"
    )

    @classmethod
    def of(cls, *values: str) -> "Tags":
        return cls(values=values)

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.values is not None:
            payload["items"] = list(self.values)
        if self.fingerprint is not None:
            payload["fingerprint"] = self.fingerprint
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "Tags":
        values = None
        if payload.get("items") is not None:
            values = tuple(payload["items"])
        return cls(values=values, fingerprint=payload.get("fingerprint"))
