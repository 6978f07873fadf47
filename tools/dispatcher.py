"""Catalog-driven tool dispatch: validate, resolve path, fetch, wrap."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from tools.catalog import Catalog, EndpointSpec, ParamSpec, ParamType, ToolDescriptor
from uw_client import UnusualWhalesError

if TYPE_CHECKING:
    from uw_client import UnusualWhalesClient

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    """The invoked tool name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(ValueError):
    """Arguments do not satisfy the endpoint's parameter contract."""

    def __init__(self, tool: str, problems: list[str]):
        self.tool = tool
        self.problems = problems
        super().__init__(f"Invalid arguments for {tool}: {'; '.join(problems)}")


@dataclass(frozen=True)
class TextBlock:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResponse:
    """Protocol envelope: exactly one text block plus an error flag."""

    content: list[TextBlock] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, result: Any) -> ToolResponse:
        return cls([TextBlock(json.dumps(result, indent=2, ensure_ascii=False))])

    @classmethod
    def failure(cls, message: str) -> ToolResponse:
        return cls([TextBlock(message)], is_error=True)

    @property
    def text(self) -> str:
        return self.content[0].text if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": block.type, "text": block.text} for block in self.content],
            "isError": self.is_error,
        }


def _check_value(param: ParamSpec, value: Any) -> tuple[Any, str | None]:
    """Return (normalized value, problem). Problem is None when the value is valid."""
    kind = param.type
    if kind is ParamType.STRING:
        if not isinstance(value, str):
            return value, f"'{param.name}' must be a string"
        if param.enum is not None and value not in param.enum:
            return value, f"'{param.name}' must be one of {list(param.enum)}, got '{value}'"
        return value, None

    if kind is ParamType.BOOLEAN:
        if not isinstance(value, bool):
            return value, f"'{param.name}' must be a boolean"
        return value, None

    if kind is ParamType.STRING_ARRAY:
        if not isinstance(value, list | tuple) or not all(isinstance(v, str) for v in value):
            return value, f"'{param.name}' must be an array of strings"
        if param.enum is not None:
            bad = [v for v in value if v not in param.enum]
            if bad:
                return value, f"'{param.name}' has invalid values {bad}; allowed: {list(param.enum)}"
        return list(value), None

    # NUMBER / INTEGER; bool is an int subclass and never a valid number here.
    if isinstance(value, bool) or not isinstance(value, int | float):
        return value, f"'{param.name}' must be a number"
    if kind is ParamType.INTEGER:
        if isinstance(value, float):
            if not value.is_integer():
                return value, f"'{param.name}' must be an integer"
            value = int(value)
    if param.minimum is not None and value < param.minimum:
        return value, f"'{param.name}' must be >= {param.minimum:g}"
    if param.maximum is not None and value > param.maximum:
        return value, f"'{param.name}' must be <= {param.maximum:g}"
    return value, None


def _check_segment(name: str, value: Any) -> str | None:
    """A path value must fill exactly one segment of the template."""
    text = str(value)
    if not text.strip():
        return f"'{name}' must not be empty"
    if text in (".", ".."):
        return f"'{name}' must not be a dot segment, got '{text}'"
    return None


def validate_arguments(spec: EndpointSpec, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Check arguments against the endpoint contract.

    Returns the cleaned argument record: declared names only, None-valued
    optionals and empty arrays dropped, integral floats normalized to int.

    Raises:
        InvalidArgumentsError: Listing every problem found.
    """
    arguments = dict(arguments or {})
    problems: list[str] = []
    declared = {p.name: p for p in spec.params}
    path_names = {p.name for p in spec.path_params}

    unknown = sorted(set(arguments) - set(declared))
    if unknown:
        problems.append(f"unknown arguments {unknown}")

    cleaned: dict[str, Any] = {}
    for name, param in declared.items():
        value = arguments.get(name)
        if value is None:
            if param.required:
                problems.append(f"'{name}' is required")
            continue
        value, problem = _check_value(param, value)
        if problem is None and name in path_names:
            problem = _check_segment(name, value)
        if problem:
            problems.append(problem)
            continue
        # An empty array encodes to no query key at all; treat it like None.
        if param.type is ParamType.STRING_ARRAY and not value:
            if param.required:
                problems.append(f"'{name}' must not be empty")
            continue
        cleaned[name] = value

    if problems:
        raise InvalidArgumentsError(spec.name, problems)
    return cleaned


def resolve_path(spec: EndpointSpec, arguments: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Substitute path parameters once; return (path, remaining query arguments)."""
    query = dict(arguments)
    values = {p.name: quote(str(query.pop(p.name)), safe="") for p in spec.path_params}
    return spec.path.format(**values), query


class Dispatcher:
    """Maps a tool invocation onto one catalog endpoint and one GET."""

    def __init__(self, catalog: Catalog, client: UnusualWhalesClient):
        self.catalog = catalog
        self.client = client

    def list_tools(self) -> list[ToolDescriptor]:
        return self.catalog.descriptors()

    async def invoke(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResponse:
        """Run one tool call.

        Structural faults raise before any network call:
            UnknownToolError: name is not in the catalog
            InvalidArgumentsError: arguments break the endpoint contract

        Everything after validation is reported in-band on the response.
        """
        spec = self.catalog.get(name)
        if spec is None:
            raise UnknownToolError(name)

        cleaned = validate_arguments(spec, arguments)
        path, query = resolve_path(spec, cleaned)

        try:
            result = await self.client.get(path, params=query)
        except UnusualWhalesError as e:
            return ToolResponse.failure(e.message)
        except Exception as e:
            logger.exception("Unexpected error calling tool %s", name)
            return ToolResponse.failure(f"Error: {e}")

        return ToolResponse.success(result)
