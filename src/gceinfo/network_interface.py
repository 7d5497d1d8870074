from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .identities import NetworkId, SubnetworkId
from .parsing import parse_enum


class AccessType(str, Enum):
    ONE_TO_ONE_NAT = "ONE_TO_ONE_NAT"


class AccessConfig(BaseModel):
    """External (NAT) access for a network interface."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    nat_ip: str | None = Field(
        default=None, description="Static external IP; ephemeral if unset"
    )
    type: AccessType | None = AccessType.ONE_TO_ONE_NAT

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.name is not None:
            payload["name"] = self.name
        if self.nat_ip is not None:
            payload["natIP"] = self.nat_ip
        if self.type is not None:
            payload["type"] = self.type.name
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "AccessConfig":
        access_type = None
        if payload.get("type") is not None:
            access_type = parse_enum(AccessType, payload["type"], "access config type")
        return cls(
            name=payload.get("name"),
            nat_ip=payload.get("natIP"),
            type=access_type,
        )


class NetworkInterface(BaseModel):
    """
    How an instance attaches to a VPC network. The interface name
    (e.g. nic0) is assigned by the service.
    """

    model_config = ConfigDict(frozen=True)

    network: NetworkId
    name: str | None = None
    network_ip: str | None = Field(default=None, description="Internal IP address")
    subnetwork: SubnetworkId | None = None
    access_configurations: tuple[AccessConfig, ...] | None = None

    @classmethod
    def of(cls, network: NetworkId | str) -> "NetworkInterface":
        if isinstance(network, str):
            network = NetworkId(network=network)
        return cls(network=network)

    def with_project_id(self, project_id: str) -> "NetworkInterface":
        update: dict[str, Any] = {"network": self.network.with_project_id(project_id)}
        if self.subnetwork is not None:
            update["subnetwork"] = self.subnetwork.with_project_id(project_id)
        return self.model_copy(update=update)

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"network": self.network.self_link()}
        if self.name is not None:
            payload["name"] = self.name
        if self.network_ip is not None:
            payload["networkIP"] = self.network_ip
        if self.subnetwork is not None:
            payload["subnetwork"] = self.subnetwork.self_link()
        if self.access_configurations is not None:
            payload["accessConfigs"] = [
                config.to_wire() for config in self.access_configurations
            ]
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "NetworkInterface":
        subnetwork = None
        if payload.get("subnetwork") is not None:
            subnetwork = SubnetworkId.from_url(payload["subnetwork"])
        access_configurations = None
        if payload.get("accessConfigs") is not None:
            access_configurations = tuple(
                AccessConfig.from_wire(config) for config in payload["accessConfigs"]
            )
        return cls(
            network=NetworkId.from_url(payload["network"]),
            name=payload.get("name"),
            network_ip=payload.get("networkIP"),
            subnetwork=subnetwork,
            access_configurations=access_configurations,
        )
