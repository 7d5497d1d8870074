"""
Mapping between InstanceInfo and the Compute Engine REST payload for an
instance (the JSON `Instance` resource).

Fields absent from a payload stay unset on the domain object, and unset
fields are omitted from generated payloads, so partial updates keep
working. An absent list and an empty list are different things.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from .attached_disk import AttachedDisk
from .errors import InvalidArgumentError, MalformedWireDataError
from .identities import InstanceId, MachineTypeId
from .instance import InstanceInfo, InstanceInfoBuilder, Status
from .logger import logger
from .metadata import Metadata
from .network_interface import NetworkInterface
from .parsing import parse_enum, parse_int
from .scheduling import SchedulingOptions
from .service_account import ServiceAccount
from .tags import Tags
from .timestamps import format_timestamp, parse_timestamp

_T = TypeVar("_T")


def _convert(field: str, converter: Callable[[Any], _T], value: Any) -> _T:
    """Runs a sub-resource converter, reporting any failure as malformed data."""
    try:
        return converter(value)
    except MalformedWireDataError:
        raise
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise MalformedWireDataError(f"Malformed {field}: {e}") from e


def _convert_list(
    field: str, converter: Callable[[Any], _T], values: Any
) -> tuple[_T, ...]:
    if not isinstance(values, list):
        raise MalformedWireDataError(f"{field} must be a list, got {values!r}")
    return tuple(_convert(field, converter, value) for value in values)


def builder_from_wire(payload: dict[str, Any]) -> InstanceInfoBuilder:
    """
    Reads a payload into a builder. The instance identity is taken from
    `selfLink` only; the separate `name` field is not trusted.
    """
    if not isinstance(payload, dict):
        raise MalformedWireDataError(
            f"Instance payload must be a dict, got {payload!r}"
        )
    if payload.get("selfLink") is None:
        raise MalformedWireDataError("Instance payload has no selfLink")
    if payload.get("machineType") is None:
        raise MalformedWireDataError("Instance payload has no machineType")

    builder = InstanceInfoBuilder(
        InstanceId.from_url(payload["selfLink"]),
        MachineTypeId.from_url(payload["machineType"]),
    )

    if payload.get("id") is not None:
        builder._server_id(str(parse_int(payload["id"], "id")))
    if payload.get("creationTimestamp") is not None:
        builder._creation_timestamp(parse_timestamp(payload["creationTimestamp"]))
    if payload.get("status") is not None:
        builder._status(parse_enum(Status, payload["status"], "status"))
    builder._status_message(payload.get("statusMessage"))
    builder._cpu_platform(payload.get("cpuPlatform"))

    builder.description(payload.get("description"))
    builder.can_ip_forward(payload.get("canIpForward"))

    if payload.get("tags") is not None:
        builder.tags(_convert("tags", Tags.from_wire, payload["tags"]))
    if payload.get("networkInterfaces") is not None:
        builder.network_interfaces(
            _convert_list(
                "networkInterfaces",
                NetworkInterface.from_wire,
                payload["networkInterfaces"],
            )
        )
    if payload.get("disks") is not None:
        builder.attached_disks(
            _convert_list("disks", AttachedDisk.from_wire, payload["disks"])
        )
    if payload.get("metadata") is not None:
        builder.metadata(_convert("metadata", Metadata.from_wire, payload["metadata"]))
    if payload.get("serviceAccounts") is not None:
        builder.service_accounts(
            _convert_list(
                "serviceAccounts", ServiceAccount.from_wire, payload["serviceAccounts"]
            )
        )
    if payload.get("scheduling") is not None:
        builder.scheduling_options(
            _convert("scheduling", SchedulingOptions.from_wire, payload["scheduling"])
        )

    return builder


def instance_from_wire(payload: dict[str, Any]) -> InstanceInfo:
    builder = builder_from_wire(payload)
    try:
        instance = builder.build()
    except InvalidArgumentError as e:
        raise MalformedWireDataError(f"Incomplete instance payload: {e}") from e
    except ValidationError as e:
        raise MalformedWireDataError(f"Invalid instance payload: {e}") from e

    logger.debug(f"Mapped instance payload {instance.instance_id.self_link()}")
    return instance


def instance_to_wire(instance: InstanceInfo) -> dict[str, Any]:
    """Renders an instance as a payload, leaving out every unset field."""
    instance_id = instance.instance_id
    payload: dict[str, Any] = {
        "name": instance_id.instance,
        "selfLink": instance_id.self_link(),
        "zone": instance_id.zone_id.self_link(),
        "machineType": instance.machine_type.self_link(),
        "networkInterfaces": [nic.to_wire() for nic in instance.network_interfaces],
        "disks": [disk.to_wire() for disk in instance.attached_disks],
    }

    if instance.server_id is not None:
        payload["id"] = instance.server_id
    if instance.creation_timestamp is not None:
        payload["creationTimestamp"] = format_timestamp(instance.creation_timestamp)
    if instance.description is not None:
        payload["description"] = instance.description
    if instance.status is not None:
        payload["status"] = instance.status.name
    if instance.status_message is not None:
        payload["statusMessage"] = instance.status_message
    if instance.tags is not None:
        payload["tags"] = instance.tags.to_wire()
    if instance.can_ip_forward is not None:
        payload["canIpForward"] = instance.can_ip_forward
    if instance.metadata is not None:
        payload["metadata"] = instance.metadata.to_wire()
    if instance.service_accounts is not None:
        payload["serviceAccounts"] = [
            account.to_wire() for account in instance.service_accounts
        ]
    if instance.scheduling_options is not None:
        payload["scheduling"] = instance.scheduling_options.to_wire()
    if instance.cpu_platform is not None:
        payload["cpuPlatform"] = instance.cpu_platform

    return payload
