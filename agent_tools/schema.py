"""
JSON Schema -> pydantic translator for tool input schemas.

Tool definitions arrive as plain JSON Schema (MCP style). translate() turns a
schema into a pydantic type that LangChain can use as args_schema and that
validate() uses for runtime argument checks. Only the subset tools actually
use is understood: string (optionally enum), number/integer with bounds,
boolean, array, object with required/optional partition. Anything else
becomes Any. Translation never raises; errors surface during validation.
"""
import keyword
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional, Union, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    create_model,
)

from agent_tools.base import ToolValidationError

logger = logging.getLogger(__name__)

_NAME_CHARS = re.compile(r"[\W_]+")

# Strict float still accepts ints, which JSON numbers often are.
StrictNumber = Annotated[float, Strict()]


class SchemaNode(BaseModel):
    """One node of a tool input schema. Build with SchemaNode.parse(raw)."""
    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None
    description: Optional[str] = None
    enum: Optional[tuple[str, ...]] = None
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    items: Optional["SchemaNode"] = None
    properties: Optional[dict[str, Optional["SchemaNode"]]] = None
    required: Optional[tuple[str, ...]] = None
    default: Any = None

    @classmethod
    def parse(cls, raw: Any) -> Optional["SchemaNode"]:
        """Parse a raw JSON Schema mapping. Malformed nodes (and only them) become None."""
        if isinstance(raw, SchemaNode):
            return raw
        if not isinstance(raw, Mapping):
            return None
        props = raw.get("properties")
        required = raw.get("required")
        try:
            return cls(
                type=_str_or_none(raw.get("type")),
                description=_str_or_none(raw.get("description")),
                enum=_enum_or_none(raw.get("enum")),
                minimum=_number_or_none(raw.get("minimum")),
                maximum=_number_or_none(raw.get("maximum")),
                items=cls.parse(raw.get("items")),
                properties={str(k): cls.parse(v) for k, v in props.items()} if isinstance(props, Mapping) else None,
                required=tuple(r for r in required if isinstance(r, str)) if isinstance(required, (list, tuple)) else None,
                default=raw.get("default"),
            )
        except ValidationError as e:
            logger.warning("Unparseable schema node, accepting anything: %s", e)
            return None


SchemaNode.model_rebuild()


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _enum_or_none(value: Any) -> Optional[tuple[str, ...]]:
    if not isinstance(value, (list, tuple)):
        return None
    return tuple(v for v in value if isinstance(v, str)) or None


def _number_or_none(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as seen by the agent: id, description and translated input model."""
    id: str
    description: str
    input_schema: type[BaseModel]


def translate(schema: Any, name: str = "Input") -> Any:
    """
    Recursively map a schema (raw mapping or SchemaNode) to a pydantic type.
    Objects with properties become models named after `name`; unknown or
    missing schemas become Any.
    """
    node = SchemaNode.parse(schema)
    if node is None:
        return Any

    if node.type == "string":
        if node.enum:
            return Literal[node.enum]
        return StrictStr

    if node.type in ("number", "integer"):
        base = StrictInt if node.type == "integer" else StrictNumber
        if node.minimum is None and node.maximum is None:
            return base
        return Annotated[base, Field(ge=node.minimum, le=node.maximum)]

    if node.type == "boolean":
        return StrictBool

    if node.type == "array":
        if node.items is None:
            return list[Any]
        return list[translate(node.items, f"{name}Item")]

    if node.type == "object":
        if node.properties is None:
            return dict[str, Any]
        return _object_model(node, name)

    return Any


def _object_model(node: SchemaNode, name: str) -> type[BaseModel]:
    required = set(node.required or ())
    taken = set(node.properties)
    fields: dict[str, Any] = {}
    for index, (key, child) in enumerate(node.properties.items()):
        annotation = translate(child, _child_model_name(name, key))
        description = child.description if child is not None else None
        field_name, alias = _field_name(key, index, taken)
        if key in required:
            info = Field(..., description=description, alias=alias)
        else:
            # Default is not validated, mirrors an optional key that may be absent.
            default = child.default if child is not None else None
            info = Field(default=default, description=description, alias=alias)
        fields[field_name] = (annotation, info)
    return create_model(
        name,
        __config__=ConfigDict(extra="ignore"),
        __doc__=node.description,
        **fields,
    )


def _child_model_name(parent: str, key: str) -> str:
    suffix = "".join(part.title() for part in _NAME_CHARS.split(key) if part)
    return f"{parent}{suffix or 'Field'}"


def _field_name(key: str, index: int, taken: set[str]) -> tuple[str, Optional[str]]:
    """Python field name for a property; non-identifiers are kept as an alias."""
    if (
        key.isidentifier()
        and not keyword.iskeyword(key)
        and not key.startswith(("_", "model_"))
        and not hasattr(BaseModel, key)
    ):
        return key, None
    candidate = f"field_{index}"
    while candidate in taken:
        candidate += "_"
    taken.add(candidate)
    return candidate, key


def json_schema_to_model(schema: Any, name: str = "ToolInput") -> type[BaseModel]:
    """Translate a top-level tool schema; always returns a model class."""
    annotation = translate(schema, name)
    if _is_model(annotation):
        return annotation
    node = SchemaNode.parse(schema)
    return create_model(
        name,
        __config__=ConfigDict(extra="allow"),
        __doc__=node.description if node is not None else None,
    )


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and get_origin(annotation) is None and issubclass(annotation, BaseModel)


def convert_tool_definition(definition: Mapping[str, Any]) -> ToolDescriptor:
    """MCP-style {name, description, inputSchema} -> ToolDescriptor."""
    tool_id = definition["name"]
    model_name = "".join(part.title() for part in _NAME_CHARS.split(tool_id) if part) + "Input"
    return ToolDescriptor(
        id=tool_id,
        description=definition.get("description") or "",
        input_schema=json_schema_to_model(definition.get("inputSchema"), model_name),
    )


def validate(descriptor: Any, value: Any, tool_id: str = "input") -> Any:
    """Validate value against a translated descriptor; ToolValidationError names failing paths."""
    try:
        if _is_model(descriptor):
            return descriptor.model_validate(value)
        return TypeAdapter(descriptor).validate_python(value)
    except ValidationError as e:
        errors = [(".".join(str(part) for part in err["loc"]), err["msg"]) for err in e.errors()]
        raise ToolValidationError(tool_id, errors) from e


def validate_arguments(model: type[BaseModel], arguments: Any, tool_id: str) -> dict[str, Any]:
    """Validate tool arguments and return them as a plain dict keyed by the schema's names."""
    return validate(model, arguments, tool_id).model_dump(by_alias=True)
