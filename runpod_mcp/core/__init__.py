# =============================================================================
# core/__init__.py
# =============================================================================
# Everything needed to talk to the RunPod REST API, with no knowledge of MCP.
#
#   config.py   Settings, read once from the environment
#   errors.py   ValidationError / ApiError / TransportError / ConfigurationError
#   schema.py   declarative parameter schemas (validation + JSON Schema)
#   models.py   Operation, RequestDescriptor, the Result Envelope
#   catalog.py  resource families -> the full list of operations
#   client.py   the authenticated HTTP transport
# =============================================================================
