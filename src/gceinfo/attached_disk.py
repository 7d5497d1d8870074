from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .identities import DiskId, DiskTypeId, ImageId
from .parsing import parse_enum, parse_int


class DiskMode(str, Enum):
    READ_WRITE = "READ_WRITE"
    READ_ONLY = "READ_ONLY"


class InterfaceType(str, Enum):
    SCSI = "SCSI"
    NVME = "NVME"


class _WireDiskType(str, Enum):
    PERSISTENT = "PERSISTENT"
    SCRATCH = "SCRATCH"


class PersistentDiskConfiguration(BaseModel):
    """Attaches an existing persistent disk."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["persistent"] = "persistent"
    source_disk: DiskId
    mode: DiskMode | None = None
    boot: bool | None = None
    auto_delete: bool | None = None

    @property
    def is_boot(self) -> bool:
        return bool(self.boot)

    def with_project_id(
        self, project_id: str, previous_project: str | None = None
    ) -> "PersistentDiskConfiguration":
        return self.model_copy(
            update={"source_disk": self.source_disk.with_project_id(project_id)}
        )

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": "PERSISTENT",
            "source": self.source_disk.self_link(),
        }
        if self.mode is not None:
            payload["mode"] = self.mode.name
        if self.boot is not None:
            payload["boot"] = self.boot
        if self.auto_delete is not None:
            payload["autoDelete"] = self.auto_delete
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "PersistentDiskConfiguration":
        mode = None
        if payload.get("mode") is not None:
            mode = parse_enum(DiskMode, payload["mode"], "disk mode")
        return cls(
            source_disk=DiskId.from_url(payload["source"]),
            mode=mode,
            boot=payload.get("boot"),
            auto_delete=payload.get("autoDelete"),
        )


class CreateDiskConfiguration(BaseModel):
    """
    Creates a new persistent boot disk from an image together with the
    instance. Disks created this way are always the boot disk.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["create"] = "create"
    source_image: ImageId
    disk_name: str | None = None
    disk_type: DiskTypeId | None = None
    disk_size_gb: int | None = Field(default=None, gt=0)
    auto_delete: bool | None = None

    @property
    def is_boot(self) -> bool:
        return True

    def with_project_id(
        self, project_id: str, previous_project: str | None = None
    ) -> "CreateDiskConfiguration":
        """
        Images from other projects (e.g. debian-cloud) keep their project;
        only unqualified images or images of `previous_project` move.
        """
        update: dict[str, Any] = {}
        if self.source_image.project in (None, previous_project):
            update["source_image"] = self.source_image.with_project_id(project_id)
        if self.disk_type is not None:
            update["disk_type"] = self.disk_type.with_project_id(project_id)
        return self.model_copy(update=update)

    def to_wire(self) -> dict[str, Any]:
        params: dict[str, Any] = {"sourceImage": self.source_image.self_link()}
        if self.disk_name is not None:
            params["diskName"] = self.disk_name
        if self.disk_type is not None:
            params["diskType"] = self.disk_type.self_link()
        if self.disk_size_gb is not None:
            params["diskSizeGb"] = str(self.disk_size_gb)

        payload: dict[str, Any] = {
            "type": "PERSISTENT",
            "boot": True,
            "initializeParams": params,
        }
        if self.auto_delete is not None:
            payload["autoDelete"] = self.auto_delete
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "CreateDiskConfiguration":
        params = payload["initializeParams"]
        disk_type = None
        if params.get("diskType") is not None:
            disk_type = DiskTypeId.from_url(params["diskType"])
        disk_size_gb = None
        if params.get("diskSizeGb") is not None:
            disk_size_gb = parse_int(params["diskSizeGb"], "diskSizeGb")
        return cls(
            source_image=ImageId.from_url(params["sourceImage"]),
            disk_name=params.get("diskName"),
            disk_type=disk_type,
            disk_size_gb=disk_size_gb,
            auto_delete=payload.get("autoDelete"),
        )


class ScratchDiskConfiguration(BaseModel):
    """A local SSD. Never bootable, always deleted with the instance."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scratch"] = "scratch"
    disk_type: DiskTypeId | None = None
    interface_type: InterfaceType | None = None

    @property
    def is_boot(self) -> bool:
        return False

    def with_project_id(
        self, project_id: str, previous_project: str | None = None
    ) -> "ScratchDiskConfiguration":
        if self.disk_type is None:
            return self
        return self.model_copy(
            update={"disk_type": self.disk_type.with_project_id(project_id)}
        )

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": "SCRATCH", "boot": False, "autoDelete": True}
        if self.interface_type is not None:
            payload["interface"] = self.interface_type.name
        if self.disk_type is not None:
            payload["initializeParams"] = {"diskType": self.disk_type.self_link()}
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "ScratchDiskConfiguration":
        interface_type = None
        if payload.get("interface") is not None:
            interface_type = parse_enum(
                InterfaceType, payload["interface"], "interface"
            )
        disk_type = None
        params = payload.get("initializeParams") or {}
        if params.get("diskType") is not None:
            disk_type = DiskTypeId.from_url(params["diskType"])
        return cls(disk_type=disk_type, interface_type=interface_type)


DiskConfiguration = (
    PersistentDiskConfiguration | CreateDiskConfiguration | ScratchDiskConfiguration
)


class AttachedDisk(BaseModel):
    """A disk attached to an instance, as seen from the instance."""

    model_config = ConfigDict(frozen=True)

    configuration: DiskConfiguration = Field(discriminator="kind")
    device_name: str | None = None
    index: int | None = Field(default=None, ge=0)

    @property
    def boot(self) -> bool:
        return self.configuration.is_boot

    @classmethod
    def of(
        cls, configuration: DiskConfiguration, device_name: str | None = None
    ) -> "AttachedDisk":
        return cls(configuration=configuration, device_name=device_name)

    def with_project_id(
        self, project_id: str, previous_project: str | None = None
    ) -> "AttachedDisk":
        configuration = self.configuration.with_project_id(project_id, previous_project)
        return self.model_copy(update={"configuration": configuration})

    def to_wire(self) -> dict[str, Any]:
        payload = self.configuration.to_wire()
        if self.device_name is not None:
            payload["deviceName"] = self.device_name
        if self.index is not None:
            payload["index"] = self.index
        return payload

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "AttachedDisk":
        disk_type = parse_enum(
            _WireDiskType, payload.get("type", "PERSISTENT"), "disk type"
        )
        configuration: DiskConfiguration
        if disk_type is _WireDiskType.SCRATCH:
            configuration = ScratchDiskConfiguration.from_wire(payload)
        elif payload.get("initializeParams") is not None:
            configuration = CreateDiskConfiguration.from_wire(payload)
        else:
            configuration = PersistentDiskConfiguration.from_wire(payload)

        index = None
        if payload.get("index") is not None:
            index = parse_int(payload["index"], "disk index")
        return cls(
            configuration=configuration,
            device_name=payload.get("deviceName"),
            index=index,
        )
