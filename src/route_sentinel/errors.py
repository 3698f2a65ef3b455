"""Exception types raised by Route Sentinel components."""


class RouteSentinelError(Exception):
    """Base class for all Route Sentinel errors."""


class InvalidRequestError(RouteSentinelError, ValueError):
    """A required request field is missing or blank."""


class ReplyParseError(RouteSentinelError, ValueError):
    """The model reply could not be parsed into the expected structure."""
