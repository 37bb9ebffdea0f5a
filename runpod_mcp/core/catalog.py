# =============================================================================
# core/catalog.py  -  The Tool Catalog (resource families as data)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every tool the server exposes.  Instead of writing ~26
#   near-identical tool functions, each RunPod resource family is ONE
#   ResourceFamily row, and the row generates its own list / get /
#   create / update / delete (and action) operations.
#
# NAMING:
#   list-<plural>, get-<singular>, create-<singular>, update-<singular>,
#   delete-<singular>, <action>-<singular>
#   e.g. list-pods, get-pod, start-pod, delete-network-volume
#
# ADDING A FAMILY:
#   Add a ResourceFamily to FAMILIES.  Leave create_params / update_params
#   as None for families that don't support that operation.
# =============================================================================

from dataclasses import dataclass, field
from typing import Mapping, Optional

from runpod_mcp.core import models
from runpod_mcp.core.models import Operation
from runpod_mcp.core.schema import (
    Param,
    ToolSchema,
    boolean,
    enum,
    number,
    string,
    string_list,
    string_map,
)


COMPUTE_TYPES = ("GPU", "CPU")
CLOUD_TYPES = ("SECURE", "COMMUNITY")
SCALER_TYPES = ("QUEUE_DELAY", "REQUEST_COUNT")

# RunPod network volumes are 1-4000 GB.
VOLUME_SIZE_MIN = 1
VOLUME_SIZE_MAX = 4000


@dataclass(frozen=True)
class ResourceFamily:
    """One RunPod resource type and the operations it supports."""

    singular: str                      # "network-volume"
    plural: str                        # "network-volumes"
    label: str                         # "network volume" (for descriptions)
    path: str                          # "/networkvolumes"
    id_param: str                      # "networkVolumeId"
    list_params: Mapping[str, Param] = field(default_factory=dict)
    get_params: Mapping[str, Param] = field(default_factory=dict)
    create_params: Optional[Mapping[str, Param]] = None
    update_params: Optional[Mapping[str, Param]] = None
    actions: tuple[str, ...] = ()      # POST {path}/{id}/{action}, no body
    deletable: bool = True

    @property
    def item_path(self) -> str:
        return f"{self.path}/{{{self.id_param}}}"

    def _id(self, verb: str) -> Param:
        return string(f"ID of the {self.label} to {verb}", required=True, min_length=1)

    def operations(self) -> list[Operation]:
        ops = [
            Operation(
                name=f"list-{self.plural}",
                description=f"List {self.label}s in your RunPod account",
                kind=models.LIST,
                method="GET",
                path=self.path,
                schema=ToolSchema(f"list-{self.plural}", self.list_params),
            ),
            Operation(
                name=f"get-{self.singular}",
                description=f"Get details of a specific {self.label}",
                kind=models.GET,
                method="GET",
                path=self.item_path,
                schema=ToolSchema(
                    f"get-{self.singular}",
                    {self.id_param: self._id("retrieve"), **self.get_params},
                ),
                id_param=self.id_param,
            ),
        ]

        if self.create_params is not None:
            ops.append(Operation(
                name=f"create-{self.singular}",
                description=f"Create a new {self.label}",
                kind=models.CREATE,
                method="POST",
                path=self.path,
                schema=ToolSchema(f"create-{self.singular}", self.create_params),
            ))

        if self.update_params is not None:
            ops.append(Operation(
                name=f"update-{self.singular}",
                description=f"Update an existing {self.label}",
                kind=models.UPDATE,
                method="PATCH",
                path=self.item_path,
                schema=ToolSchema(
                    f"update-{self.singular}",
                    {self.id_param: self._id("update"), **self.update_params},
                ),
                id_param=self.id_param,
            ))

        for action in self.actions:
            ops.append(Operation(
                name=f"{action}-{self.singular}",
                description=f"{action.capitalize()} a {self.label}",
                kind=models.ACTION,
                method="POST",
                path=f"{self.item_path}/{action}",
                schema=ToolSchema(f"{action}-{self.singular}", {self.id_param: self._id(action)}),
                id_param=self.id_param,
            ))

        if self.deletable:
            ops.append(Operation(
                name=f"delete-{self.singular}",
                description=f"Delete a {self.label}",
                kind=models.DELETE,
                method="DELETE",
                path=self.item_path,
                schema=ToolSchema(f"delete-{self.singular}", {self.id_param: self._id("delete")}),
                id_param=self.id_param,
            ))

        return ops


# =============================================================================
# PODS
# =============================================================================
_POD_INCLUDES = {
    "includeMachine": boolean("Include information about the machine"),
    "includeNetworkVolume": boolean("Include information about attached network volumes"),
}

PODS = ResourceFamily(
    singular="pod",
    plural="pods",
    label="pod",
    path="/pods",
    id_param="podId",
    list_params={
        "computeType": enum(COMPUTE_TYPES, "Filter to only GPU or only CPU Pods"),
        "gpuTypeId": string_list("Filter to Pods with any of the listed GPU types"),
        "dataCenterId": string_list("Filter to Pods in any of the provided data centers"),
        "name": string("Filter to Pods with the provided name"),
        **_POD_INCLUDES,
    },
    get_params=_POD_INCLUDES,
    create_params={
        "name": string("Name for the pod"),
        "imageName": string("Docker image to use", required=True),
        "cloudType": enum(CLOUD_TYPES, "SECURE or COMMUNITY cloud"),
        "gpuTypeIds": string_list("List of acceptable GPU types"),
        "gpuCount": number("Number of GPUs", minimum=0),
        "containerDiskInGb": number("Container disk size in GB", minimum=0),
        "volumeInGb": number("Volume size in GB", minimum=0),
        "volumeMountPath": string("Path to mount the volume"),
        "ports": string_list("Ports to expose (e.g., '8888/http', '22/tcp')"),
        "env": string_map("Environment variables"),
        "dataCenterIds": string_list("List of data centers"),
    },
    update_params={
        "name": string("New name for the pod"),
        "imageName": string("New Docker image"),
        "containerDiskInGb": number("New container disk size in GB", minimum=0),
        "volumeInGb": number("New volume size in GB", minimum=0),
        "volumeMountPath": string("New path to mount the volume"),
        "ports": string_list("New ports to expose"),
        "env": string_map("New environment variables"),
    },
    actions=("start", "stop"),
)


# =============================================================================
# SERVERLESS ENDPOINTS
# =============================================================================
_ENDPOINT_INCLUDES = {
    "includeTemplate": boolean("Include template information"),
    "includeWorkers": boolean("Include information about workers"),
}

ENDPOINTS = ResourceFamily(
    singular="endpoint",
    plural="endpoints",
    label="endpoint",
    path="/endpoints",
    id_param="endpointId",
    list_params=_ENDPOINT_INCLUDES,
    get_params=_ENDPOINT_INCLUDES,
    create_params={
        "name": string("Name for the endpoint"),
        "templateId": string("Template ID to use", required=True),
        "computeType": enum(COMPUTE_TYPES, "GPU or CPU endpoint"),
        "gpuTypeIds": string_list("List of acceptable GPU types"),
        "gpuCount": number("Number of GPUs per worker", minimum=0),
        "workersMin": number("Minimum number of workers", minimum=0),
        "workersMax": number("Maximum number of workers", minimum=0),
        "dataCenterIds": string_list("List of data centers"),
    },
    update_params={
        "name": string("New name for the endpoint"),
        "workersMin": number("New minimum number of workers", minimum=0),
        "workersMax": number("New maximum number of workers", minimum=0),
        "idleTimeout": number("New idle timeout in seconds", minimum=0),
        "scalerType": enum(SCALER_TYPES, "Scaler type"),
        "scalerValue": number("Scaler value"),
    },
)


# =============================================================================
# TEMPLATES
# =============================================================================
TEMPLATES = ResourceFamily(
    singular="template",
    plural="templates",
    label="template",
    path="/templates",
    id_param="templateId",
    create_params={
        "name": string("Name for the template", required=True),
        "imageName": string("Docker image to use", required=True),
        "isServerless": boolean("Is this a serverless template"),
        "ports": string_list("Ports to expose"),
        "dockerEntrypoint": string_list("Docker entrypoint commands"),
        "dockerStartCmd": string_list("Docker start commands"),
        "env": string_map("Environment variables"),
        "containerDiskInGb": number("Container disk size in GB", minimum=0),
        "volumeInGb": number("Volume size in GB", minimum=0),
        "volumeMountPath": string("Path to mount the volume"),
        "readme": string("README content in markdown format"),
    },
    update_params={
        "name": string("New name for the template"),
        "imageName": string("New Docker image"),
        "ports": string_list("New ports to expose"),
        "env": string_map("New environment variables"),
        "readme": string("New README content in markdown format"),
    },
)


# =============================================================================
# NETWORK VOLUMES
# =============================================================================
# The API only lets a volume grow.  We can't check that without a second
# request, so the rule is stated in the description and enforced upstream.
NETWORK_VOLUMES = ResourceFamily(
    singular="network-volume",
    plural="network-volumes",
    label="network volume",
    path="/networkvolumes",
    id_param="networkVolumeId",
    create_params={
        "name": string("Name for the network volume", required=True),
        "size": number(
            "Size in GB (1-4000)", required=True,
            minimum=VOLUME_SIZE_MIN, maximum=VOLUME_SIZE_MAX,
        ),
        "dataCenterId": string("Data center ID", required=True),
    },
    update_params={
        "name": string("New name for the network volume"),
        "size": number(
            "New size in GB (must be larger than current)",
            minimum=VOLUME_SIZE_MIN, maximum=VOLUME_SIZE_MAX,
        ),
    },
)


# =============================================================================
# CONTAINER REGISTRY AUTHS
# =============================================================================
REGISTRY_AUTHS = ResourceFamily(
    singular="container-registry-auth",
    plural="container-registry-auths",
    label="container registry auth",
    path="/containerregistryauth",
    id_param="containerRegistryAuthId",
    create_params={
        "name": string("Name for the container registry auth", required=True),
        "username": string("Registry username", required=True),
        "password": string("Registry password", required=True),
    },
)


FAMILIES: tuple[ResourceFamily, ...] = (
    PODS,
    ENDPOINTS,
    TEMPLATES,
    NETWORK_VOLUMES,
    REGISTRY_AUTHS,
)


def build_operations(families: tuple[ResourceFamily, ...] = FAMILIES) -> list[Operation]:
    """Expand resource families into a flat list of operations.

    Raises:
        ValueError: two operations ended up with the same name.
    """
    operations: list[Operation] = []
    seen: set[str] = set()
    for family in families:
        for op in family.operations():
            if op.name in seen:
                raise ValueError(f"Duplicate tool name: {op.name}")
            seen.add(op.name)
            operations.append(op)
    return operations


OPERATIONS: list[Operation] = build_operations()
