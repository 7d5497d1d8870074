import pytest
from pydantic import ValidationError

from gceinfo.errors import InvalidArgumentError
from gceinfo.instance import InstanceInfo, InstanceInfoBuilder, Status
from gceinfo.network_interface import NetworkInterface
from gceinfo.tags import Tags


def test_builder_requires_instance_id(machine_type):
    with pytest.raises(InvalidArgumentError):
        InstanceInfo.builder(None, machine_type)  # type: ignore[arg-type]


def test_builder_requires_machine_type(instance_id):
    with pytest.raises(InvalidArgumentError):
        InstanceInfo.builder(instance_id, None)  # type: ignore[arg-type]


def test_builder_rejects_none_identity_later(instance_id, machine_type):
    builder = InstanceInfo.builder(instance_id, machine_type)

    with pytest.raises(InvalidArgumentError):
        builder.instance_id(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        builder.machine_type(None)  # type: ignore[arg-type]


def test_build_requires_disks(instance_id, machine_type, nic):
    builder = InstanceInfo.builder(instance_id, machine_type).network_interfaces([nic])

    with pytest.raises(InvalidArgumentError, match="attached_disks"):
        builder.build()


def test_build_requires_network_interfaces(instance_id, machine_type, boot_disk):
    builder = InstanceInfo.builder(instance_id, machine_type).attached_disks([boot_disk])

    with pytest.raises(InvalidArgumentError, match="network_interfaces"):
        builder.build()


def test_collection_setters_reject_none(instance_id, machine_type):
    builder = InstanceInfo.builder(instance_id, machine_type)

    with pytest.raises(InvalidArgumentError):
        builder.attached_disks(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        builder.network_interfaces(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        builder.service_accounts(None)  # type: ignore[arg-type]


def test_empty_collections_are_allowed(instance_id, machine_type):
    instance = (
        InstanceInfo.builder(instance_id, machine_type)
        .attached_disks([])
        .network_interfaces([])
        .build()
    )

    assert instance.attached_disks == ()
    assert instance.network_interfaces == ()
    assert instance.service_accounts is None


def test_setters_are_chainable(instance_id, machine_type):
    builder = InstanceInfo.builder(instance_id, machine_type)

    assert builder.description("x") is builder
    assert builder.tags(None) is builder
    assert isinstance(builder, InstanceInfoBuilder)


def test_of_builds_single_disk_instance(instance_id, machine_type, boot_disk, nic):
    instance = InstanceInfo.of(instance_id, machine_type, boot_disk, nic)

    assert instance.attached_disks == (boot_disk,)
    assert instance.network_interfaces == (nic,)
    assert instance.boot_disk == boot_disk
    assert instance.status is None
    assert instance.server_id is None


def test_network_interfaces_are_copied(instance_id, machine_type, boot_disk, nic):
    interfaces = [nic]
    builder = (
        InstanceInfo.builder(instance_id, machine_type)
        .attached_disks([boot_disk])
        .network_interfaces(interfaces)
    )

    interfaces.append(NetworkInterface.of("other"))
    interfaces.clear()
    instance = builder.build()

    assert instance.network_interfaces == (nic,)


def test_disks_are_copied(instance_id, machine_type, boot_disk, data_disk, nic):
    disks = [boot_disk]
    instance = (
        InstanceInfo.builder(instance_id, machine_type)
        .attached_disks(disks)
        .network_interfaces([nic])
        .build()
    )

    disks.append(data_disk)

    assert instance.attached_disks == (boot_disk,)


def test_instance_is_immutable(full_instance):
    with pytest.raises(ValidationError):
        full_instance.description = "changed"


@pytest.mark.parametrize(
    "field, value",
    [
        ("server_id", "123"),
        ("creation_timestamp", 0),
        ("status", Status.RUNNING),
        ("status_message", "booting"),
        ("cpu_platform", "Intel Skylake"),
    ],
)
def test_constructor_rejects_service_state(
    instance_id, machine_type, boot_disk, nic, field, value
):
    with pytest.raises(ValidationError, match="can only be set by the service"):
        InstanceInfo(
            instance_id=instance_id,
            machine_type=machine_type,
            attached_disks=(boot_disk,),
            network_interfaces=(nic,),
            **{field: value},
        )


def test_constructor_accepts_client_fields(instance_id, machine_type, boot_disk, nic):
    instance = InstanceInfo(
        instance_id=instance_id,
        machine_type=machine_type,
        attached_disks=(boot_disk,),
        network_interfaces=(nic,),
        description="web",
    )

    assert instance.description == "web"
    assert instance.status is None


def test_to_builder_copies_everything(full_instance):
    rebuilt = full_instance.to_builder().build()

    assert rebuilt == full_instance
    assert rebuilt.status == full_instance.status
    assert rebuilt.cpu_platform == "Intel Cascade Lake"


def test_to_builder_changes_do_not_touch_original(full_instance):
    changed = full_instance.to_builder().description("other").tags(None).build()

    assert changed.description == "other"
    assert changed.tags is None
    assert full_instance.description == "test instance"
    assert full_instance.tags == Tags(values=("http-server",), fingerprint="tags-fp")
    assert changed != full_instance


def test_equality_follows_wire_form(full_instance):
    same = full_instance.model_copy()

    assert same == full_instance
    assert hash(same) == hash(full_instance)
    assert full_instance != "not an instance"


def test_boot_disk_count_is_only_warned(mocker, instance_id, machine_type, data_disk, nic):
    mock_logger = mocker.patch("gceinfo.instance.logger")

    instance = (
        InstanceInfo.builder(instance_id, machine_type)
        .attached_disks([data_disk])
        .network_interfaces([nic])
        .build()
    )

    assert instance.boot_disk is None
    mock_logger.warning.assert_called_once()
    assert "0 boot disks" in mock_logger.warning.call_args[0][0]


def test_single_boot_disk_does_not_warn(mocker, full_instance):
    mock_logger = mocker.patch("gceinfo.instance.logger")

    full_instance.to_builder().build()

    mock_logger.warning.assert_not_called()


def test_with_project_id_rewrites_every_identity(full_instance):
    rebound = full_instance.with_project_id("p2")

    assert rebound.instance_id.project == "p2"
    assert rebound.machine_type.project == "p2"
    for nic in rebound.network_interfaces:
        assert nic.network.project == "p2"
        assert nic.subnetwork is not None
        assert nic.subnetwork.project == "p2"

    boot, data = rebound.attached_disks
    assert boot.configuration.source_image.project == "p2"
    assert boot.configuration.disk_type.project == "p2"
    assert data.configuration.source_disk.project == "p2"

    payload = str(rebound.to_wire())
    assert "projects/p2/" in payload
    assert "projects/p1/" not in payload


def test_with_project_id_fills_missing_project(instance_id, machine_type, boot_disk):
    unbound = (
        InstanceInfo.builder(
            instance_id.model_copy(update={"project": None}),
            machine_type.model_copy(update={"project": None}),
        )
        .attached_disks([boot_disk])
        .network_interfaces([NetworkInterface.of("default")])
        .build()
    )

    rebound = unbound.with_project_id("p1")

    assert unbound.instance_id.self_link() == "zones/us-west1-b/instances/vm-1"
    assert rebound.instance_id == instance_id
    assert rebound.network_interfaces[0].network.project == "p1"


def test_with_project_id_keeps_original_and_shares_the_rest(full_instance):
    rebound = full_instance.with_project_id("p2")

    assert full_instance.instance_id.project == "p1"
    assert rebound.metadata is full_instance.metadata
    assert rebound.service_accounts is full_instance.service_accounts


def test_with_project_id_requires_project(full_instance):
    with pytest.raises(InvalidArgumentError):
        full_instance.with_project_id("")
