from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .parsing import parse_enum


class Maintenance(str, Enum):
    """What the service does with the instance during host maintenance."""

    MIGRATE = "MIGRATE"
    TERMINATE = "TERMINATE"


class SchedulingOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    automatic_restart: bool | None = None
    maintenance: Maintenance | None = None
    preemptible: bool | None = None

    @classmethod
    def standard(
        cls,
        automatic_restart: bool = True,
        maintenance: Maintenance = Maintenance.MIGRATE,
    ) -> "SchedulingOptions":
        return cls(
            automatic_restart=automatic_restart,
            maintenance=maintenance,
            preemptible=False,
        )

    @classmethod
    def preemptible_instance(cls) -> "SchedulingOptions":
        """Preemptible instances can neither restart nor live-migrate."""
        return cls(
            automatic_restart=False,
            maintenance=Maintenance.TERMINATE,
            preemptible=True,
        )

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.automatic_restart is not None:
            payload["automaticRestart"] = self.automatic_restart
        if self.maintenance is not None:
            payload["onHostMaintenance"] = self.maintenance.name
        if self.preemptible is not None:
            payload["preemptible"] = self.preemptible
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "SchedulingOptions":
        maintenance = None
        if payload.get("onHostMaintenance") is not None:
            maintenance = parse_enum(
                Maintenance, payload["onHostMaintenance"], "onHostMaintenance"
            )
        return cls(
            automatic_restart=payload.get("automaticRestart"),
            maintenance=maintenance,
            preemptible=payload.get("preemptible"),
        )
