# =============================================================================
# core/schema.py  -  Declarative Tool Parameter Schemas
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Describes a tool's parameters as plain data (Param objects) and
#   compiles them into a pydantic model.  That one model is used twice:
#     1. As the VALIDATION GATE: ToolSchema.validate() is the single entry
#        point every tool call goes through before any network I/O.
#     2. As DOCUMENTATION: ToolSchema.json_schema() is the JSON Schema the
#        MCP client sees in tools/list.
#
# PARAMETER KINDS:
#   string       "abc"
#   number       1, 2.5           (ints stay ints, so request bodies
#                                  serialize exactly as the caller sent them)
#   boolean      true / false
#   string_list  ["A", "B"]
#   string_map   {"KEY": "value"}
#   enum         one of a fixed set of strings
#
# STRICTNESS:
#   Types are strict: "5" is not a number and "true" is not a boolean.
#   Optional parameters may be omitted but not sent as null.  Unknown keys
#   are dropped, never forwarded upstream.
# =============================================================================

from dataclasses import dataclass
import re
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError as PydanticValidationError,
    confloat,
    conint,
    constr,
    create_model,
)

from runpod_mcp.core.errors import ValidationError


STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
STRING_LIST = "string_list"
STRING_MAP = "string_map"
ENUM = "enum"

KINDS = (STRING, NUMBER, BOOLEAN, STRING_LIST, STRING_MAP, ENUM)


@dataclass(frozen=True)
class Param:
    """One named parameter of a tool."""

    kind: str
    description: str
    required: bool = False
    choices: tuple[str, ...] = ()          # enum only
    minimum: Optional[float] = None        # number only
    maximum: Optional[float] = None        # number only
    min_length: Optional[int] = None       # string only

    def __post_init__(self):
        if self.kind not in KINDS:
            raise ValueError(f"Unknown parameter kind: {self.kind!r}")
        if self.kind == ENUM and not self.choices:
            raise ValueError("enum parameters need at least one choice")


# -----------------------------------------------------------------------------
# Shorthand constructors used by the catalog
# -----------------------------------------------------------------------------
def string(description: str, required: bool = False, min_length: Optional[int] = None) -> Param:
    return Param(STRING, description, required, min_length=min_length)


def number(
    description: str,
    required: bool = False,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> Param:
    return Param(NUMBER, description, required, minimum=minimum, maximum=maximum)


def boolean(description: str, required: bool = False) -> Param:
    return Param(BOOLEAN, description, required)


def string_list(description: str, required: bool = False) -> Param:
    return Param(STRING_LIST, description, required)


def string_map(description: str, required: bool = False) -> Param:
    return Param(STRING_MAP, description, required)


def enum(choices: tuple[str, ...], description: str, required: bool = False) -> Param:
    return Param(ENUM, description, required, choices=tuple(choices))


def _python_type(param: Param) -> Any:
    if param.kind == STRING:
        return constr(strict=True, min_length=param.min_length)
    if param.kind == NUMBER:
        bounds = {"ge": param.minimum, "le": param.maximum}
        return Union[conint(strict=True, **bounds), confloat(strict=True, **bounds)]
    if param.kind == BOOLEAN:
        return StrictBool
    if param.kind == STRING_LIST:
        return list[StrictStr]
    if param.kind == STRING_MAP:
        return dict[StrictStr, StrictStr]
    return Literal[param.choices]


def _model_name(tool_name: str) -> str:
    words = re.split(r"[^0-9A-Za-z]+", tool_name)
    return "".join(word.capitalize() for word in words if word) + "Arguments"


class _Arguments(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ToolSchema:
    """Compiled parameter schema for one tool."""

    def __init__(self, tool_name: str, params: Mapping[str, Param]):
        self.tool_name = tool_name
        self.params = dict(params)

        fields = {}
        for name, param in self.params.items():
            if param.required:
                default = Field(..., description=param.description)
            else:
                default = Field(default=None, description=param.description)
            fields[name] = (_python_type(param), default)

        self.model = create_model(_model_name(tool_name), __base__=_Arguments, **fields)

    @property
    def required(self) -> list[str]:
        return [name for name, param in self.params.items() if param.required]

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        """Validate raw tool arguments.

        Returns only the parameters the caller actually supplied, in schema
        order.  Raises ValidationError naming the first offending field.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ValidationError("arguments", "expected an object")

        try:
            parsed = self.model.model_validate(dict(arguments))
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            loc = error.get("loc") or ("arguments",)
            raise ValidationError(str(loc[0]), error.get("msg", "invalid value")) from exc

        return parsed.model_dump(exclude_unset=True)

    def json_schema(self) -> dict[str, Any]:
        schema = self.model.model_json_schema()
        schema.pop("title", None)
        return schema
