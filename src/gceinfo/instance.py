from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from .attached_disk import AttachedDisk
from .errors import InvalidArgumentError
from .identities import InstanceId, MachineTypeId
from .logger import logger
from .metadata import Metadata
from .network_interface import NetworkInterface
from .scheduling import SchedulingOptions
from .service_account import ServiceAccount
from .tags import Tags

if TYPE_CHECKING:
    from google.cloud import compute_v1


SERVICE_FIELDS = (
    "server_id",
    "creation_timestamp",
    "status",
    "status_message",
    "cpu_platform",
)

# Validation context flag the builder uses to pass service-assigned fields
_SERVICE_STATE = "service_state"


class Status(str, Enum):
    """
    Lifecycle status reported by the service. It is never computed here.

    PROVISIONING -> STAGING -> RUNNING -> STOPPING -> TERMINATED
    """

    # Resources are being reserved; the instance isn't running yet.
    PROVISIONING = "PROVISIONING"
    # Resources acquired; the instance is being prepared for launch.
    STAGING = "STAGING"
    # Booting or running. SSH should work soon, though not immediately.
    RUNNING = "RUNNING"
    # Shutting down after a failure or a stop request; moves to TERMINATED.
    STOPPING = "STOPPING"
    # Shut down. Can be restarted or deleted.
    TERMINATED = "TERMINATED"


class InstanceInfo(BaseModel):
    """
    A Compute Engine VM instance.

    Instances are immutable: use `InstanceInfo.builder(...)` to create one
    and `to_builder()` to derive a modified copy. Two instances are equal
    when their wire payloads are equal.

    Service-assigned fields (server id, creation timestamp, status, status
    message, cpu platform) are rejected by the constructor; only the wire
    mapper sets them. `model_copy(update=...)` skips validation, so it is not
    a supported way to change them either.
    """

    model_config = ConfigDict(frozen=True)

    instance_id: InstanceId
    machine_type: MachineTypeId
    network_interfaces: tuple[NetworkInterface, ...]
    attached_disks: tuple[AttachedDisk, ...]
    description: str | None = None
    tags: Tags | None = None
    can_ip_forward: bool | None = Field(
        default=None,
        description="Allow sending/receiving packets with non-matching IPs",
    )
    metadata: Metadata | None = None
    service_accounts: tuple[ServiceAccount, ...] | None = None
    scheduling_options: SchedulingOptions | None = None

    # Assigned by the service
    server_id: str | None = None
    creation_timestamp: int | None = Field(
        default=None, description="Milliseconds since epoch"
    )
    status: Status | None = None
    status_message: str | None = None
    cpu_platform: str | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_service_state(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or (info.context or {}).get(_SERVICE_STATE):
            return data
        assigned = [name for name in SERVICE_FIELDS if data.get(name) is not None]
        if assigned:
            raise ValueError(f"{', '.join(assigned)} can only be set by the service")
        return data

    @staticmethod
    def builder(
        instance_id: InstanceId, machine_type: MachineTypeId
    ) -> "InstanceInfoBuilder":
        return InstanceInfoBuilder(instance_id, machine_type)

    @classmethod
    def of(
        cls,
        instance_id: InstanceId,
        machine_type: MachineTypeId,
        disk: AttachedDisk,
        network_interface: NetworkInterface,
    ) -> "InstanceInfo":
        """Shortcut for an instance with a single (boot) disk and interface."""
        return (
            cls.builder(instance_id, machine_type)
            .attached_disks([disk])
            .network_interfaces([network_interface])
            .build()
        )

    def to_builder(self) -> "InstanceInfoBuilder":
        return InstanceInfoBuilder.from_instance(self)

    @property
    def boot_disk(self) -> AttachedDisk | None:
        return next((disk for disk in self.attached_disks if disk.boot), None)

    def with_project_id(self, project_id: str) -> "InstanceInfo":
        """
        Returns a copy where every nested identity (instance, machine type,
        networks, subnetworks, disks, disk types) belongs to `project_id`.
        Source images move only if they were unqualified or lived in the
        instance's previous project.
        """
        if not project_id:
            raise InvalidArgumentError("project_id is required")

        previous_project = self.instance_id.project
        logger.debug(f"Rebinding {self.instance_id.instance} to project {project_id}")
        return self.model_copy(
            update={
                "instance_id": self.instance_id.with_project_id(project_id),
                "machine_type": self.machine_type.with_project_id(project_id),
                "network_interfaces": tuple(
                    nic.with_project_id(project_id) for nic in self.network_interfaces
                ),
                "attached_disks": tuple(
                    disk.with_project_id(project_id, previous_project)
                    for disk in self.attached_disks
                ),
            }
        )

    def to_wire(self) -> dict[str, Any]:
        from .wire import instance_to_wire

        return instance_to_wire(self)

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "InstanceInfo":
        from .wire import instance_from_wire

        return instance_from_wire(payload)

    def to_message(self) -> "compute_v1.Instance":
        from .messages import message_from_payload

        return message_from_payload(self.to_wire())

    @classmethod
    def from_message(cls, message: "compute_v1.Instance") -> "InstanceInfo":
        from .messages import payload_from_message

        return cls.from_wire(payload_from_message(message))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstanceInfo):
            return NotImplemented
        return self.to_wire() == other.to_wire()

    def __hash__(self) -> int:
        return hash(self.instance_id.self_link())


class InstanceInfoBuilder:
    """
    Stages the fields of an InstanceInfo. Setters return the builder so
    calls can be chained. Not safe to share between threads.
    """

    def __init__(self, instance_id: InstanceId, machine_type: MachineTypeId) -> None:
        self._fields: dict[str, Any] = {
            "network_interfaces": None,
            "attached_disks": None,
        }
        self.instance_id(instance_id)
        self.machine_type(machine_type)

    @classmethod
    def from_instance(cls, instance: InstanceInfo) -> "InstanceInfoBuilder":
        builder = cls(instance.instance_id, instance.machine_type)
        builder._fields.update(
            {name: getattr(instance, name) for name in InstanceInfo.model_fields}
        )
        return builder

    def _set(self, name: str, value: Any) -> "InstanceInfoBuilder":
        self._fields[name] = value
        return self

    def _require(self, name: str, value: Any) -> Any:
        if value is None:
            raise InvalidArgumentError(f"{name} must not be None")
        return value

    def instance_id(self, instance_id: InstanceId) -> "InstanceInfoBuilder":
        return self._set("instance_id", self._require("instance_id", instance_id))

    def machine_type(self, machine_type: MachineTypeId) -> "InstanceInfoBuilder":
        return self._set("machine_type", self._require("machine_type", machine_type))

    def description(self, description: str | None) -> "InstanceInfoBuilder":
        return self._set("description", description)

    def tags(self, tags: Tags | None) -> "InstanceInfoBuilder":
        return self._set("tags", tags)

    def can_ip_forward(self, can_ip_forward: bool | None) -> "InstanceInfoBuilder":
        return self._set("can_ip_forward", can_ip_forward)

    def network_interfaces(
        self, network_interfaces: Iterable[NetworkInterface]
    ) -> "InstanceInfoBuilder":
        self._require("network_interfaces", network_interfaces)
        return self._set("network_interfaces", tuple(network_interfaces))

    def attached_disks(
        self, attached_disks: Iterable[AttachedDisk]
    ) -> "InstanceInfoBuilder":
        """Exactly one of the disks should be a boot disk."""
        self._require("attached_disks", attached_disks)
        return self._set("attached_disks", tuple(attached_disks))

    def metadata(self, metadata: Metadata | None) -> "InstanceInfoBuilder":
        return self._set("metadata", metadata)

    def service_accounts(
        self, service_accounts: Iterable[ServiceAccount]
    ) -> "InstanceInfoBuilder":
        self._require("service_accounts", service_accounts)
        return self._set("service_accounts", tuple(service_accounts))

    def scheduling_options(
        self, scheduling_options: SchedulingOptions | None
    ) -> "InstanceInfoBuilder":
        return self._set("scheduling_options", scheduling_options)

    # Service-assigned state. Only the wire mapper sets these.

    def _server_id(self, server_id: str | None) -> "InstanceInfoBuilder":
        return self._set("server_id", server_id)

    def _creation_timestamp(self, millis: int | None) -> "InstanceInfoBuilder":
        return self._set("creation_timestamp", millis)

    def _status(self, status: Status | None) -> "InstanceInfoBuilder":
        return self._set("status", status)

    def _status_message(self, status_message: str | None) -> "InstanceInfoBuilder":
        return self._set("status_message", status_message)

    def _cpu_platform(self, cpu_platform: str | None) -> "InstanceInfoBuilder":
        return self._set("cpu_platform", cpu_platform)

    def build(self) -> InstanceInfo:
        for name in ("attached_disks", "network_interfaces"):
            if self._fields[name] is None:
                raise InvalidArgumentError(f"{name} must be set before build()")

        boot_disks = sum(1 for disk in self._fields["attached_disks"] if disk.boot)
        if boot_disks != 1:
            logger.warning(
                f"Instance {self._fields['instance_id'].instance} has "
                f"{boot_disks} boot disks, expected exactly one"
            )

        return InstanceInfo.model_validate(
            self._fields, context={_SERVICE_STATE: True}
        )
