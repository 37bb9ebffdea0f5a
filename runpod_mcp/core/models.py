# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# Nothing here is persisted.  Every shape below lives for at most one tool
# call, except Operation, which is built once at import time and never
# changes afterwards.
#
#   Operation          one tool: its name, schema and which HTTP call it makes
#   RequestDescriptor  the concrete HTTP call built for one invocation
#   text_envelope()    the Result Envelope returned to the MCP client
# =============================================================================

from dataclasses import dataclass, field
import json
from typing import Any, Optional

from runpod_mcp.core.schema import ToolSchema


# Operation kinds.  Each kind has exactly one rule for building the request.
LIST = "list"
GET = "get"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"
ACTION = "action"

HTTP_METHODS = ("GET", "POST", "PATCH", "DELETE")


# -----------------------------------------------------------------------------
# Operation - one entry in the tool catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Operation:
    """A named tool and the REST call behind it."""

    name: str                          # "list-pods", unique across the catalog
    description: str                   # shown to the MCP client
    kind: str                          # LIST / GET / CREATE / UPDATE / DELETE / ACTION
    method: str                        # "GET", "POST", "PATCH", "DELETE"
    path: str                          # "/pods/{podId}/start"
    schema: ToolSchema
    id_param: Optional[str] = None     # path parameter, e.g. "podId"


# -----------------------------------------------------------------------------
# RequestDescriptor - what the transport is asked to do
# -----------------------------------------------------------------------------
@dataclass
class RequestDescriptor:
    """One HTTP request against the RunPod API."""

    method: str
    path: str
    # Ordered (key, value) pairs.  A key may repeat: gpuTypeId=A&gpuTypeId=B
    query: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[dict[str, Any]] = None


def text_envelope(result: Any) -> dict[str, Any]:
    """Wrap an API result as the single-item text Result Envelope."""
    return {
        "content": [
            {
                "type": "text",
                "text": json.dumps(result, indent=2, ensure_ascii=False),
            }
        ]
    }
