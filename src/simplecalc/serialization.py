"""
Pydantic-based serialization helpers for simplecalc.

Tool results and arguments are plain numbers or pydantic models, so JSON
conversion goes through pydantic in both directions.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, create_model

Serializable = BaseModel | str | int | float | bool | None | list | dict


def to_json_dict(obj: Serializable) -> Any:
    """Convert a result to a JSON-compatible value using Pydantic."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    adapter = TypeAdapter(type(obj))
    return adapter.dump_python(obj, mode="json")


def to_json_str(obj: Serializable) -> str:
    """Convert a result to a JSON string using Pydantic."""
    if isinstance(obj, BaseModel):
        return obj.model_dump_json()

    adapter = TypeAdapter(type(obj))
    return adapter.dump_json(obj).decode("utf-8")


def create_model_from_field_definitions(
    model_name: str,
    field_definitions: dict[str, tuple[Any, Any]],
    config: ConfigDict | None = None,
) -> type[BaseModel]:
    """Create a Pydantic model from field definitions.

    Args:
        model_name: Name for the generated model class
        field_definitions: Dict mapping field names to (type, FieldInfo) tuples
        config: Optional Pydantic config, defaults to forbidding extra properties in the schema

    Returns:
        Dynamically created Pydantic model class
    """
    if config is None:
        config = ConfigDict(json_schema_extra={"additionalProperties": False})

    return create_model(model_name, __config__=config, **field_definitions)  # type: ignore
