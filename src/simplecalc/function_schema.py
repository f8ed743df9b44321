"""Function schema extraction and JSON schema generation."""

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field
from typing_extensions import TypedDict

from simplecalc.docstring import DocstringInfo, extract_docs_from_string
from simplecalc.serialization import create_model_from_field_definitions


class FunctionSchema(TypedDict):
    name: str
    description: str
    parameters: dict[str, Any]


class JSONSchema(TypedDict):
    type: str
    function: FunctionSchema


def function_schema_from_args(args_json_schema: dict, name: str, doc: str) -> JSONSchema:
    """Build an OpenAI-compatible tool schema from an argument model schema."""
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": doc.strip(),
            "parameters": args_json_schema,
        },
    }


class FunctionDescription:
    """A callable tool together with its validated argument model and schema."""

    function: Callable
    function_schema: JSONSchema
    name: str
    description: str
    tags: list[str]
    docstring_info: DocstringInfo

    args_model: type[BaseModel]
    args_json_schema: dict

    def __init__(
        self,
        func: Callable,
        name: str | None = None,
        doc_override: str | None = None,
        description: str = "",
        tags: list[str] | None = None,
    ):
        """Describe func for tool calling.

        Args:
            func: The function to wrap
            name: Override for function name
            doc_override: Override for function documentation
            description: Tool description
            tags: List of tags for categorization
        """
        self.function = func
        self.name = name or func.__name__
        self.description = description or func.__doc__ or ""
        self.tags = tags or []

        self.sig = inspect.signature(func)

        doc_text = doc_override or func.__doc__ or f"Function {self.name}"
        self.docstring_info = extract_docs_from_string(doc_text)

        self.args_model = self._create_args_model()
        self.args_json_schema = self.args_model.model_json_schema()
        self.function_schema = function_schema_from_args(
            self.args_json_schema,
            self.name,
            self.docstring_info.description or doc_text,
        )

    def _create_args_model(self) -> type[BaseModel]:
        """Create a Pydantic model for the function's parameters."""
        field_definitions = {}

        for param_name, param in self.sig.parameters.items():
            param_type = param.annotation if param.annotation is not inspect.Parameter.empty else Any
            param_description = self.docstring_info.parameters.get(param_name, "")

            if param.default is not inspect.Parameter.empty:
                field = Field(default=param.default, description=param_description)
            else:
                field = Field(description=param_description)
            field_definitions[param_name] = (param_type, field)

        model_name = f"{self.name.title()}Args"
        return create_model_from_field_definitions(model_name, field_definitions)

    def arg_model_from_args(self, *args: Any, **kwargs: Any) -> BaseModel:
        """Construct the argument model from positional and keyword arguments."""
        bound_args = self.sig.bind(*args, **kwargs)
        bound_args.apply_defaults()
        return self.args_model(**bound_args.arguments)

    def validate_and_parse_args(self, json_args: dict) -> dict:
        """Validate JSON arguments and return parsed values.

        Args:
            json_args: Raw JSON arguments from a tool call

        Returns:
            Validated arguments ready for the function call

        Raises:
            ValidationError: If the arguments do not match the signature
        """
        parsed_args = self.args_model.model_validate(json_args)
        return {k: getattr(parsed_args, k) for k in self.args_model.model_fields}

    def call(self, *args, **kwargs) -> Any:
        """Call the wrapped function directly."""
        return self.function(*args, **kwargs)
