import re
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .core import COMPUTE_BASE_URL
from .errors import MalformedWireDataError

_Id = TypeVar("_Id", bound="ResourceId")

_SEGMENT = r"[^/]+"


def _url_pattern(path: str) -> re.Pattern[str]:
    """
    Builds the matcher for a resource path. Anything may precede
    `projects/{project}/`, and the project part may be missing entirely
    (e.g. `zones/us-west1-b/machineTypes/n1-standard-1`).
    """
    return re.compile(rf"(?:(?:.*/)?projects/(?P<project>{_SEGMENT})/)?{path}")


class ResourceId(BaseModel):
    """
    Base identity of a project-qualified Compute Engine resource.

    The project may be unknown when the identity is created; clients fill
    it in later with `with_project_id`.
    """

    model_config = ConfigDict(frozen=True)

    project: str | None = Field(default=None, min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]]

    def relative_path(self) -> str:
        raise NotImplementedError

    def self_link(self) -> str:
        """Full resource URL, or the project-less path if no project is set."""
        if self.project is None:
            return self.relative_path()
        return f"{COMPUTE_BASE_URL}projects/{self.project}/{self.relative_path()}"

    def with_project_id(self: _Id, project_id: str) -> _Id:
        return self.model_copy(update={"project": project_id})

    @classmethod
    def matches_url(cls, url: str) -> bool:
        return isinstance(url, str) and cls.URL_PATTERN.fullmatch(url) is not None

    @classmethod
    def from_url(cls: type[_Id], url: str) -> _Id:
        if not isinstance(url, str):
            raise MalformedWireDataError(
                f"{cls.__name__} URL must be a string, got {url!r}"
            )
        match = cls.URL_PATTERN.fullmatch(url)
        if match is None:
            raise MalformedWireDataError(f"{url!r} is not a valid {cls.__name__} URL")
        return cls(**match.groupdict())

    def __str__(self) -> str:
        return self.self_link()


class ZoneId(ResourceId):
    zone: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"zones/(?P<zone>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"zones/{self.zone}"


class InstanceId(ResourceId):
    """Identity of a VM instance: project, zone and instance name."""

    zone: str = Field(min_length=1)
    instance: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"zones/(?P<zone>{_SEGMENT})/instances/(?P<instance>{_SEGMENT})"
    )

    @property
    def zone_id(self) -> ZoneId:
        return ZoneId(project=self.project, zone=self.zone)

    def relative_path(self) -> str:
        return f"zones/{self.zone}/instances/{self.instance}"


class MachineTypeId(ResourceId):
    zone: str = Field(min_length=1)
    machine_type: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"zones/(?P<zone>{_SEGMENT})/machineTypes/(?P<machine_type>{_SEGMENT})"
    )

    @property
    def zone_id(self) -> ZoneId:
        return ZoneId(project=self.project, zone=self.zone)

    def relative_path(self) -> str:
        return f"zones/{self.zone}/machineTypes/{self.machine_type}"


class DiskId(ResourceId):
    zone: str = Field(min_length=1)
    disk: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"zones/(?P<zone>{_SEGMENT})/disks/(?P<disk>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"zones/{self.zone}/disks/{self.disk}"


class DiskTypeId(ResourceId):
    zone: str = Field(min_length=1)
    disk_type: str = Field(min_length=1, description="e.g., pd-ssd, local-ssd")

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"zones/(?P<zone>{_SEGMENT})/diskTypes/(?P<disk_type>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"zones/{self.zone}/diskTypes/{self.disk_type}"


class ImageId(ResourceId):
    image: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"global/images/(?P<image>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"global/images/{self.image}"


class NetworkId(ResourceId):
    network: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"global/networks/(?P<network>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"global/networks/{self.network}"


class SubnetworkId(ResourceId):
    region: str = Field(min_length=1)
    subnetwork: str = Field(min_length=1)

    URL_PATTERN: ClassVar[re.Pattern[str]] = _url_pattern(
        rf"regions/(?P<region>{_SEGMENT})/subnetworks/(?P<subnetwork>{_SEGMENT})"
    )

    def relative_path(self) -> str:
        return f"regions/{self.region}/subnetworks/{self.subnetwork}"
