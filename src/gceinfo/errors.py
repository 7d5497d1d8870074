class GceInfoError(Exception):
    """Base class for every error raised by gceinfo."""


class InvalidArgumentError(GceInfoError, ValueError):
    """A required value was missing or None when building a resource."""


class MalformedWireDataError(GceInfoError, ValueError):
    """A wire payload field did not match its expected format."""
