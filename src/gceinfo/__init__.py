import warnings

# Suppress Google SDK FutureWarning messages about Python version deprecation
# These clutter the output of callers that only need the data model.
warnings.filterwarnings("ignore", category=FutureWarning, module="google.api_core")
warnings.filterwarnings("ignore", category=FutureWarning, module="google.cloud")

from .attached_disk import (  # noqa: E402
    AttachedDisk,
    CreateDiskConfiguration,
    DiskMode,
    InterfaceType,
    PersistentDiskConfiguration,
    ScratchDiskConfiguration,
)
from .errors import (  # noqa: E402
    GceInfoError,
    InvalidArgumentError,
    MalformedWireDataError,
)
from .identities import (  # noqa: E402
    DiskId,
    DiskTypeId,
    ImageId,
    InstanceId,
    MachineTypeId,
    NetworkId,
    SubnetworkId,
    ZoneId,
)
from .instance import InstanceInfo, InstanceInfoBuilder, Status  # noqa: E402
from .metadata import Metadata  # noqa: E402
from .network_interface import AccessConfig, AccessType, NetworkInterface  # noqa: E402
from .scheduling import Maintenance, SchedulingOptions  # noqa: E402
from .service_account import ServiceAccount  # noqa: E402
from .tags import Tags  # noqa: E402

__all__ = [
    "AccessConfig",
    "AccessType",
    "AttachedDisk",
    "CreateDiskConfiguration",
    "DiskId",
    "DiskMode",
    "DiskTypeId",
    "GceInfoError",
    "ImageId",
    "InstanceId",
    "InstanceInfo",
    "InstanceInfoBuilder",
    "InterfaceType",
    "InvalidArgumentError",
    "MachineTypeId",
    "Maintenance",
    "MalformedWireDataError",
    "Metadata",
    "NetworkId",
    "NetworkInterface",
    "PersistentDiskConfiguration",
    "ScratchDiskConfiguration",
    "SchedulingOptions",
    "ServiceAccount",
    "Status",
    "SubnetworkId",
    "Tags",
    "ZoneId",
]
