import pytest

from gceinfo.attached_disk import (
    AttachedDisk,
    CreateDiskConfiguration,
    PersistentDiskConfiguration,
)
from gceinfo.identities import (
    DiskId,
    DiskTypeId,
    ImageId,
    InstanceId,
    MachineTypeId,
    NetworkId,
    SubnetworkId,
)
from gceinfo.instance import InstanceInfo, Status
from gceinfo.metadata import Metadata
from gceinfo.network_interface import AccessConfig, NetworkInterface
from gceinfo.scheduling import SchedulingOptions
from gceinfo.service_account import ServiceAccount
from gceinfo.tags import Tags


@pytest.fixture
def instance_id():
    return InstanceId(project="p1", zone="us-west1-b", instance="vm-1")


@pytest.fixture
def machine_type():
    return MachineTypeId(project="p1", zone="us-west1-b", machine_type="n2-standard-4")


@pytest.fixture
def nic():
    return NetworkInterface(
        network=NetworkId(project="p1", network="default"),
        subnetwork=SubnetworkId(project="p1", region="us-west1", subnetwork="default"),
        access_configurations=(AccessConfig(name="External NAT"),),
    )


@pytest.fixture
def boot_disk():
    return AttachedDisk.of(
        CreateDiskConfiguration(
            source_image=ImageId(project="p1", image="golden-image"),
            disk_type=DiskTypeId(project="p1", zone="us-west1-b", disk_type="pd-ssd"),
            disk_size_gb=50,
            auto_delete=True,
        ),
        device_name="boot",
    )


@pytest.fixture
def data_disk():
    return AttachedDisk.of(
        PersistentDiskConfiguration(
            source_disk=DiskId(project="p1", zone="us-west1-b", disk="data"),
            boot=False,
        ),
        device_name="data",
    )


@pytest.fixture
def full_instance(instance_id, machine_type, nic, boot_disk, data_disk):
    """An instance with every field, service-assigned ones included, populated."""
    return (
        InstanceInfo.builder(instance_id, machine_type)
        .description("test instance")
        .tags(Tags(values=("http-server",), fingerprint="tags-fp"))
        .can_ip_forward(True)
        .network_interfaces([nic])
        .attached_disks([boot_disk, data_disk])
        .metadata(Metadata(items=(("startup-script", "echo hi"),), fingerprint="md-fp"))
        .service_accounts(
            [
                ServiceAccount(
                    email="sa@p1.iam.gserviceaccount.com",
                    scopes=("https://www.googleapis.com/auth/cloud-platform",),
                )
            ]
        )
        .scheduling_options(SchedulingOptions.standard())
        ._server_id("1234567890123456789")
        ._creation_timestamp(1453293540210)
        ._status(Status.RUNNING)
        ._status_message("all good")
        ._cpu_platform("Intel Cascade Lake")
        .build()
    )
