"""Google-style docstring parsing with griffe."""

import logging

from griffe import Docstring
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class DocstringInfo(BaseModel):
    """Summary, return and parameter text pulled out of a docstring."""

    description: str
    returns: str
    parameters: dict[str, str]


def extract_docs_from_string(docstring_text: str) -> DocstringInfo:
    """Parse a Google-style docstring.

    Args:
        docstring_text: The docstring text to parse

    Returns:
        DocstringInfo with the description, return text and per-parameter docs
    """
    if not docstring_text:
        return DocstringInfo(description="", returns="", parameters={})

    parsed = Docstring(docstring_text, lineno=1).parse("google", warnings=False)

    description = ""
    returns = ""
    parameters: dict[str, str] = {}

    for section in parsed:
        kind = section.kind.value
        if kind == "text" and section.value:
            # Free text after the Args/Returns blocks must not clobber the summary
            if not description:
                description = section.value
        elif kind == "returns" and section.value:
            returns = section.value[0].description
        elif kind == "parameters" and section.value:
            for param in section.value:
                parameters[param.name] = param.description

    logger.debug(f"Parsed docstring with parameters: {list(parameters)}")
    return DocstringInfo(description=description, returns=returns, parameters=parameters)
