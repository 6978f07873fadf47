"""Endpoint catalog: the single table behind tool discovery and dispatch."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class CatalogError(ValueError):
    """Raised when an endpoint definition breaks a catalog invariant."""


class ParamType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING_ARRAY = "string_array"


@dataclass(frozen=True)
class ParamSpec:
    """One declared tool argument."""

    name: str
    type: ParamType
    description: str = ""
    required: bool = False
    enum: tuple[str, ...] | None = None
    minimum: float | None = None
    maximum: float | None = None

    def __post_init__(self) -> None:
        if self.enum is not None and self.type not in (ParamType.STRING, ParamType.STRING_ARRAY):
            raise CatalogError(f"enum on non-string parameter '{self.name}'")
        numeric = self.type in (ParamType.NUMBER, ParamType.INTEGER)
        if (self.minimum is not None or self.maximum is not None) and not numeric:
            raise CatalogError(f"bounds on non-numeric parameter '{self.name}'")
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise CatalogError(f"minimum > maximum on parameter '{self.name}'")

    def json_schema(self) -> dict[str, Any]:
        if self.type is ParamType.STRING_ARRAY:
            items: dict[str, Any] = {"type": "string"}
            if self.enum is not None:
                items["enum"] = list(self.enum)
            schema: dict[str, Any] = {"type": "array", "items": items}
        else:
            schema = {"type": self.type.value}
            if self.enum is not None:
                schema["enum"] = list(self.enum)
            if self.minimum is not None:
                schema["minimum"] = self.minimum
            if self.maximum is not None:
                schema["maximum"] = self.maximum
        if self.description:
            schema["description"] = self.description
        return schema


@dataclass(frozen=True)
class EndpointSpec:
    """A tool name bound to one GET endpoint and its parameter contract."""

    name: str
    path: str
    description: str
    path_params: tuple[ParamSpec, ...] = ()
    query_params: tuple[ParamSpec, ...] = ()
    family: str = ""

    def __post_init__(self) -> None:
        placeholders = _PLACEHOLDER.findall(self.path)
        declared = [p.name for p in self.path_params]
        if placeholders != declared:
            raise CatalogError(
                f"{self.name}: path placeholders {placeholders} do not match path params {declared}"
            )
        names = [p.name for p in self.params]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise CatalogError(f"{self.name}: duplicate parameters {duplicates}")
        if any(not p.required for p in self.path_params):
            raise CatalogError(f"{self.name}: path parameters must be required")

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return self.path_params + self.query_params

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.params if p.required]

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": self.required,
            "additionalProperties": False,
        }


@dataclass(frozen=True)
class ToolDescriptor:
    """What the protocol's list-tools call advertises for one endpoint."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(hash=False)
    family: str = ""


class Catalog:
    """Read-only, ordered mapping of tool name to EndpointSpec."""

    def __init__(self, endpoints: Iterable[EndpointSpec]):
        entries: dict[str, EndpointSpec] = {}
        for spec in endpoints:
            if spec.name in entries:
                raise CatalogError(f"duplicate tool name '{spec.name}'")
            entries[spec.name] = spec
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EndpointSpec]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def get(self, name: str) -> EndpointSpec | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    @cached_property
    def _descriptors(self) -> tuple[ToolDescriptor, ...]:
        return tuple(
            ToolDescriptor(
                name=spec.name,
                description=spec.description,
                input_schema=spec.input_schema(),
                family=spec.family,
            )
            for spec in self._entries.values()
        )

    def descriptors(self) -> list[ToolDescriptor]:
        """Tool list for discovery, derived once from the endpoint table."""
        return list(self._descriptors)


def build_catalog() -> Catalog:
    """Assemble the catalog from every family module."""
    from tools import (
        alerts,
        congress,
        darkpool,
        earnings,
        etfs,
        market,
        news,
        options,
        ownership,
        screeners,
        seasonality,
        shorts,
        stock,
    )

    modules = (
        alerts,
        congress,
        darkpool,
        earnings,
        etfs,
        options,
        ownership,
        market,
        news,
        screeners,
        seasonality,
        shorts,
        stock,
    )
    return Catalog(spec for module in modules for spec in module.ENDPOINTS)
