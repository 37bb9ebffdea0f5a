# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure the server can produce is one of four kinds:
#
#   ValidationError     tool arguments don't match the tool's schema.
#                       Raised BEFORE any network call.
#   ApiError            RunPod answered with a non-2xx status.
#   TransportError      RunPod could not be reached at all (DNS, refused,
#                       timeout).
#   ConfigurationError  required startup configuration is missing.  Fatal.
#
# None of them are retried here.  They are logged once where they are
# detected and then propagated to the caller (FastMCP turns them into an
# MCP tool error for the client).
# =============================================================================


class RunPodMCPError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(RunPodMCPError):
    """Tool arguments failed the tool's parameter schema."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid argument '{field}': {message}")


class ApiError(RunPodMCPError):
    """RunPod responded with a non-success HTTP status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"RunPod API Error: {status} - {body}")


class TransportError(RunPodMCPError):
    """The request never got a response from RunPod."""


class ConfigurationError(RunPodMCPError):
    """Required configuration is missing or malformed."""
