import pytest
from pydantic import ValidationError

from gceinfo.errors import MalformedWireDataError
from gceinfo.identities import (
    DiskId,
    DiskTypeId,
    ImageId,
    InstanceId,
    MachineTypeId,
    NetworkId,
    SubnetworkId,
    ZoneId,
)

BASE = "https://www.googleapis.com/compute/v1/"


def test_instance_id_from_url():
    instance_id = InstanceId.from_url(f"{BASE}projects/p1/zones/z1/instances/i1")

    assert instance_id == InstanceId(project="p1", zone="z1", instance="i1")


def test_instance_id_from_url_with_any_prefix():
    instance_id = InstanceId.from_url(".../projects/p1/zones/z1/instances/i1")

    assert instance_id.project == "p1"
    assert instance_id.zone == "z1"
    assert instance_id.instance == "i1"


def test_instance_id_missing_zone_is_malformed():
    with pytest.raises(MalformedWireDataError):
        InstanceId.from_url(f"{BASE}projects/p1/instances/i1")


@pytest.mark.parametrize(
    "url",
    [
        "",
        "instances/i1",
        f"{BASE}projects/p1/zones/z1/instances/",
        f"{BASE}projects/p1/zones/z1/machineTypes/n1-standard-1",
    ],
)
def test_instance_id_rejects_other_urls(url):
    assert not InstanceId.matches_url(url)
    with pytest.raises(MalformedWireDataError):
        InstanceId.from_url(url)


def test_instance_id_rejects_non_string():
    with pytest.raises(MalformedWireDataError):
        InstanceId.from_url(None)  # type: ignore[arg-type]


def test_instance_id_self_link_and_zone():
    instance_id = InstanceId(project="p1", zone="us-west1-b", instance="vm-1")

    assert instance_id.self_link() == f"{BASE}projects/p1/zones/us-west1-b/instances/vm-1"
    assert instance_id.zone_id == ZoneId(project="p1", zone="us-west1-b")
    assert instance_id.zone_id.self_link() == f"{BASE}projects/p1/zones/us-west1-b"
    assert str(instance_id) == instance_id.self_link()


def test_machine_type_relative_url_has_no_project():
    machine_type = MachineTypeId.from_url("zones/us-west1-b/machineTypes/n2-standard-4")

    assert machine_type.project is None
    assert machine_type.machine_type == "n2-standard-4"
    assert machine_type.self_link() == "zones/us-west1-b/machineTypes/n2-standard-4"


def test_machine_type_round_trip():
    url = f"{BASE}projects/p1/zones/z1/machineTypes/n1-standard-1"

    assert MachineTypeId.from_url(url).self_link() == url


def test_with_project_id_returns_new_identity():
    machine_type = MachineTypeId(zone="z1", machine_type="n1-standard-1")

    rebound = machine_type.with_project_id("p2")

    assert machine_type.project is None
    assert rebound.project == "p2"
    assert rebound.self_link() == f"{BASE}projects/p2/zones/z1/machineTypes/n1-standard-1"


@pytest.mark.parametrize(
    "identity, path",
    [
        (DiskId(project="p", zone="z", disk="d"), "projects/p/zones/z/disks/d"),
        (
            DiskTypeId(project="p", zone="z", disk_type="pd-ssd"),
            "projects/p/zones/z/diskTypes/pd-ssd",
        ),
        (ImageId(project="p", image="img"), "projects/p/global/images/img"),
        (NetworkId(project="p", network="default"), "projects/p/global/networks/default"),
        (
            SubnetworkId(project="p", region="us-west1", subnetwork="sn"),
            "projects/p/regions/us-west1/subnetworks/sn",
        ),
    ],
)
def test_sub_resource_identity_urls(identity, path):
    assert identity.self_link() == BASE + path
    assert type(identity).from_url(BASE + path) == identity


def test_identities_are_immutable():
    instance_id = InstanceId(project="p1", zone="z1", instance="i1")

    with pytest.raises(ValidationError):
        instance_id.project = "p2"  # type: ignore[misc]
