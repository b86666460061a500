"""Declarative table of CoinMarketCap endpoints exposed as MCP tools.

Every module in the ``tools`` package exposes ``get_tools()`` returning a
mapping of tool name to metadata::

    {
        "cryptoQuotesLatest": {
            "path": "/v2/cryptocurrency/quotes/latest",
            "title": "Latest quotes",
            "description": "Returns the latest market quote ...",
            "tier": AccessTier.BASIC,
            "params": {"symbol": Param("string"), ...},
        },
    }

The registry turns those entries into immutable ToolDefinition records and
decides which of them are visible for a subscription level.
"""
from dataclasses import dataclass, field
from functools import cached_property, lru_cache
from importlib import import_module
from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping
import logging
import pkgutil

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from core.errors import CallerError
from core.tiers import AccessTier

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "tools"

_KINDS: dict[str, Any] = {
    "string": str,
    "number": float,
    "boolean": bool,
    "string_or_number": str | float,
}


@dataclass(frozen=True)
class Param:
    kind: str = "string"
    required: bool = False
    default: Any = None
    ge: float | None = None
    le: float | None = None
    choices: tuple[str, ...] | None = None
    description: str | None = None

    def __post_init__(self):
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown parameter kind {self.kind!r}")
        if self.choices is not None:
            object.__setattr__(self, "choices", tuple(self.choices))

    def annotation(self) -> Any:
        base = Literal[self.choices] if self.choices else _KINDS[self.kind]
        constraints = {"ge": self.ge, "le": self.le, "description": self.description}
        base = Annotated[base, Field(**{k: v for k, v in constraints.items() if v is not None})]
        if self.required or self.default is not None:
            return base
        return base | None

    def field_default(self) -> Any:
        """Default for the pydantic field; Ellipsis marks a required field."""
        if self.required:
            return ...
        return self.default


def to_query_value(value: Any) -> str:
    """Stringify a parameter value the way CoinMarketCap expects it in a query."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "params"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    path: str
    description: str
    tier: AccessTier = AccessTier.BASIC
    title: str | None = None
    params: Mapping[str, Param] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not self.path.startswith("/v"):
            raise ValueError(f"Tool {self.name} has an unversioned path {self.path!r}")
        object.__setattr__(self, "tier", AccessTier.parse(self.tier))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def fields(self) -> dict[str, tuple[Any, Any]]:
        """Parameter name -> (annotated type, default) in schema order."""
        return {name: (p.annotation(), p.field_default()) for name, p in self.params.items()}

    @cached_property
    def model(self) -> type[BaseModel]:
        return create_model(
            f"{self.name}Params",
            __config__=ConfigDict(extra="ignore"),
            **self.fields(),
        )

    def validate(self, params: Mapping[str, Any] | None) -> dict[str, str]:
        """Check `params` against the schema and return the upstream query.

        Parameters left out (or passed as None) are dropped; defaults are
        filled in. Raises CallerError when the schema is not satisfied.
        """
        try:
            parsed = self.model.model_validate(dict(params or {}))
        except ValidationError as e:
            raise CallerError(f"Invalid parameters for {self.name}: {_describe(e)}")
        return {k: to_query_value(v) for k, v in parsed.model_dump(exclude_none=True).items()}


def build_definitions(mapping: Mapping[str, Any]) -> list[ToolDefinition]:
    """Turn a module's get_tools() mapping into ToolDefinition records."""
    definitions = []
    for tool_name, meta in mapping.items():
        definitions.append(
            ToolDefinition(
                name=tool_name,
                path=meta["path"],
                description=meta["description"],
                tier=meta.get("tier", AccessTier.BASIC),
                title=meta.get("title"),
                params=meta.get("params", {}),
            )
        )
    return definitions


@lru_cache(maxsize=None)
def load_definitions() -> Mapping[str, ToolDefinition]:
    """Import every module in the tools package and collect its definitions."""
    package = import_module(TOOLS_PACKAGE)
    definitions: dict[str, ToolDefinition] = {}
    for _, name, _ in pkgutil.iter_modules(package.__path__):
        if name.startswith("_"):
            continue
        module_name = f"{TOOLS_PACKAGE}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            logger.warning(f"Module {module_name} has no get_tools(); skipping")
            continue
        for definition in build_definitions(mod.get_tools()):
            if definition.name in definitions:
                raise ValueError(f"Duplicate tool name {definition.name!r} in {module_name}")
            definitions[definition.name] = definition
        logger.debug(f"Loaded tool definitions from {module_name}")
    return MappingProxyType(definitions)


def register_all(configured_tier: AccessTier | int | str) -> list[ToolDefinition]:
    """Return the definitions available at `configured_tier`, ordered by tier then name."""
    tier = AccessTier.parse(configured_tier)
    active = [d for d in load_definitions().values() if d.tier <= tier]
    return sorted(active, key=lambda d: (d.tier, d.name))


def get_definition(name: str) -> ToolDefinition:
    try:
        return load_definitions()[name]
    except KeyError:
        raise CallerError(f"Unknown tool {name!r}")
