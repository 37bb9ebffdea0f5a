"""Tests for the generated tool catalog."""

import pytest

from runpod_mcp.core import models
from runpod_mcp.core.catalog import (
    FAMILIES,
    OPERATIONS,
    PODS,
    ResourceFamily,
    build_operations,
)
from runpod_mcp.core.schema import string

EXPECTED_TOOLS = {
    "list-pods", "get-pod", "create-pod", "update-pod", "start-pod", "stop-pod", "delete-pod",
    "list-endpoints", "get-endpoint", "create-endpoint", "update-endpoint", "delete-endpoint",
    "list-templates", "get-template", "create-template", "update-template", "delete-template",
    "list-network-volumes", "get-network-volume", "create-network-volume",
    "update-network-volume", "delete-network-volume",
    "list-container-registry-auths", "get-container-registry-auth",
    "create-container-registry-auth", "delete-container-registry-auth",
}


def _op(name):
    return next(op for op in OPERATIONS if op.name == name)


class TestCatalog:
    """Tests for the catalog generated from FAMILIES."""

    def test_tool_names(self):
        names = [op.name for op in OPERATIONS]

        assert set(names) == EXPECTED_TOOLS
        assert len(names) == len(set(names)) == 26

    def test_five_families(self):
        assert [family.path for family in FAMILIES] == [
            "/pods", "/endpoints", "/templates", "/networkvolumes", "/containerregistryauth",
        ]

    @pytest.mark.parametrize("name,method,path", [
        ("list-pods", "GET", "/pods"),
        ("get-pod", "GET", "/pods/{podId}"),
        ("create-pod", "POST", "/pods"),
        ("update-pod", "PATCH", "/pods/{podId}"),
        ("start-pod", "POST", "/pods/{podId}/start"),
        ("stop-pod", "POST", "/pods/{podId}/stop"),
        ("delete-pod", "DELETE", "/pods/{podId}"),
        ("update-network-volume", "PATCH", "/networkvolumes/{networkVolumeId}"),
        ("delete-container-registry-auth", "DELETE",
         "/containerregistryauth/{containerRegistryAuthId}"),
    ])
    def test_method_and_path(self, name, method, path):
        op = _op(name)

        assert op.method == method
        assert op.path == path

    def test_item_operations_require_id(self):
        for op in OPERATIONS:
            if op.kind in (models.LIST, models.CREATE):
                assert op.id_param is None
            else:
                assert op.id_param in op.schema.required

    def test_registry_auths_cannot_be_updated(self):
        assert not any(op.name == "update-container-registry-auth" for op in OPERATIONS)

    def test_required_create_fields(self):
        assert _op("create-pod").schema.required == ["imageName"]
        assert _op("create-endpoint").schema.required == ["templateId"]
        assert _op("create-template").schema.required == ["name", "imageName"]
        assert _op("create-network-volume").schema.required == ["name", "size", "dataCenterId"]
        assert _op("create-container-registry-auth").schema.required == [
            "name", "username", "password",
        ]

    def test_every_operation_has_description(self):
        assert all(op.description for op in OPERATIONS)

    def test_duplicate_names_rejected(self):
        clone = ResourceFamily(
            singular="pod", plural="pods", label="pod", path="/other", id_param="podId",
        )

        with pytest.raises(ValueError, match="Duplicate tool name"):
            build_operations((PODS, clone))

    def test_minimal_family(self):
        family = ResourceFamily(
            singular="widget",
            plural="widgets",
            label="widget",
            path="/widgets",
            id_param="widgetId",
            get_params={"verbose": string("Verbose")},
            deletable=False,
        )

        ops = family.operations()

        assert [op.name for op in ops] == ["list-widgets", "get-widget"]
        assert ops[1].schema.required == ["widgetId"]
