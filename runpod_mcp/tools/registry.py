# =============================================================================
# tools/registry.py  -  Tool Dispatch
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns "call tool X with arguments Y" into exactly one RunPod request
#   and exactly one Result Envelope.
#
# HOW IT WORKS (the flow):
#   1. Look up the Operation by name (core/catalog.py)
#   2. Validate the arguments against the operation's schema.  Bad input
#      stops HERE, before any network call.
#   3. Build a RequestDescriptor from the operation's kind:
#        list / get   supplied params -> query string (arrays repeat the key)
#        create       supplied params -> JSON body, POST to the collection
#        update       supplied params minus the id -> JSON body, PATCH
#        delete       DELETE the item, no body
#        action       POST {item}/{action}, no body
#   4. Hand the descriptor to the RunPod client (core/client.py)
#   5. Pretty-print the result into a text Result Envelope
#
# The registry knows nothing about FastMCP.  tools/mcp_server.py adapts it
# to the MCP protocol; tests drive it directly with a stub client.
# =============================================================================

import json
import logging
from typing import Any, Iterable, Iterator, Mapping, Optional
from urllib.parse import quote

from runpod_mcp.core import models
from runpod_mcp.core.catalog import OPERATIONS
from runpod_mcp.core.errors import RunPodMCPError, ValidationError
from runpod_mcp.core.models import Operation, RequestDescriptor, text_envelope

logger = logging.getLogger(__name__)

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

# Never echo these argument values into the log.
_SECRET_PARAMS = frozenset({"password"})


def _log_request(tool_name: str, arguments: Mapping[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(
        f"{k}={'***' if k in _SECRET_PARAMS else repr(v)}" for k, v in arguments.items()
    )
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: Any) -> None:
    """Log the upstream result as compact JSON in GREEN."""
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'))}{_RESET}"
    )


class UnknownToolError(RunPodMCPError, KeyError):
    """No tool is registered under the requested name."""


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(values: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Translate supplied parameters into ordered query pairs.

    Lists become one pair per element under the same key, in order.
    """
    query: list[tuple[str, str]] = []
    for key, value in values.items():
        if isinstance(value, list):
            query.extend((key, _query_value(item)) for item in value)
        else:
            query.append((key, _query_value(value)))
    return query


def build_request(operation: Operation, values: Mapping[str, Any]) -> RequestDescriptor:
    """Build the HTTP request for an already-validated set of arguments."""
    values = dict(values)
    path = operation.path
    if operation.id_param:
        # The id is a single path segment; quote everything, including "/".
        resource_id = values.pop(operation.id_param)
        path = path.replace(f"{{{operation.id_param}}}", quote(resource_id, safe=""))

    if operation.kind in (models.LIST, models.GET):
        return RequestDescriptor(method=operation.method, path=path, query=build_query(values))
    if operation.kind in (models.CREATE, models.UPDATE):
        return RequestDescriptor(method=operation.method, path=path, body=values)
    return RequestDescriptor(method=operation.method, path=path)


class ToolRegistry:
    """Name -> Operation lookup plus dispatch through a RunPod client.

    Args:
        client: Anything with an async ``request(path, method, body, params)``
            coroutine (normally core.client.RunPodClient).
        operations: The operations to register.  Defaults to the full catalog.
    """

    def __init__(self, client: Any, operations: Optional[Iterable[Operation]] = None):
        self._client = client
        self._operations: dict[str, Operation] = {}
        for operation in OPERATIONS if operations is None else operations:
            self.register(operation)

    def register(self, operation: Operation) -> None:
        if operation.name in self._operations:
            raise ValueError(f"Tool already registered: {operation.name}")
        self._operations[operation.name] = operation

    def get(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Run one tool and return its Result Envelope.

        Raises:
            UnknownToolError: no such tool.
            ValidationError: arguments rejected; no request was sent.
            ApiError / TransportError: propagated from the client.
        """
        operation = self.get(name)
        _log_request(name, arguments if isinstance(arguments, Mapping) else {})

        try:
            values = operation.schema.validate(arguments)
        except ValidationError as exc:
            logger.warning(f"{_YELLOW}  → {name} rejected: {exc}{_RESET}")
            raise

        request = build_request(operation, values)
        _log_status(f"{request.method} {request.path}")

        result = await self._client.request(
            request.path,
            method=request.method,
            body=request.body,
            params=request.query or None,
        )

        _log_response(name, result)
        return text_envelope(result)
