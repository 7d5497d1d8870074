from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceAccount(BaseModel):
    """A service account and the OAuth scopes it is granted on the instance."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(min_length=1)
    scopes: tuple[str, ...] | None = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"email": self.email}
        if self.scopes is not None:
            payload["scopes"] = list(self.scopes)
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "ServiceAccount":
        scopes = None
        if payload.get("scopes") is not None:
            scopes = tuple(payload["scopes"])
        return cls(email=payload["email"], scopes=scopes)
