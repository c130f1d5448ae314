# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Layered configuration for repositories and logging.

Values come from, highest priority first:

1. ``QUERYSPEC_*`` environment variables (``queryspec.repository.default_alias``
   is overridden by ``QUERYSPEC_REPOSITORY_DEFAULT_ALIAS``)
2. a dict, or a YAML/TOML file plus its profile overlays
3. the defaults of the ``@config_properties`` dataclass being bound

String values may reference the environment or other keys with
``${NAME}``, ``${some.key}`` or ``${some.key:fallback}``.
"""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

_PREFIX_ATTR = "__queryspec_config_prefix__"
_ENV_PREFIX = "QUERYSPEC_"
_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10

_TRUE = frozenset({"true", "1", "yes", "on"})

_COERCE: dict[Any, Callable[[str], Any]] = {
    int: int,
    float: float,
    bool: lambda raw: raw.strip().lower() in _TRUE,
}


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Bind a dataclass to the configuration section at *prefix*.

    Usage:
        @config_properties(prefix="queryspec.repository")
        @dataclass
        class RepositoryProperties:
            default_alias: str = "e"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with path.open("rb") as fh:
            return tomllib.load(fh)
    with path.open() as fh:
        return yaml.safe_load(fh) or {}


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _env_name(key: str) -> str:
    return _ENV_PREFIX + key.removeprefix("queryspec.").upper().replace(".", "_").replace("-", "_")


class Config:
    """Nested settings addressed with dotted keys."""

    def __init__(self, data: dict[str, Any] | None = None, sources: Iterable[str] = ()) -> None:
        self._data: dict[str, Any] = data or {}
        self._sources = list(sources)

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: Iterable[str] | None = None) -> Config:
        """Load *path* (``.yaml``, ``.yml`` or ``.toml``) and its profile overlays.

        For ``queryspec.yaml`` and profile ``dev`` the overlay is
        ``queryspec-dev.yaml`` in the same directory. Overlays are merged in
        the order given; missing files are skipped, so a missing *path*
        yields an empty configuration.
        """
        path = Path(path)
        if not path.exists():
            return cls()

        data = _read(path)
        sources = [str(path)]
        for profile in active_profiles or ():
            overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
            if overlay.exists():
                data = _merge(data, _read(overlay))
                sources.append(str(overlay))
        return cls(data, sources)

    @property
    def loaded_sources(self) -> list[str]:
        """Files this configuration was read from, in merge order."""
        return list(self._sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at dotted *key*, or *default* when unset."""
        from_env = os.environ.get(_env_name(key))
        if from_env is not None:
            return from_env

        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, str):
            return self._interpolate(value, 0)
        return value

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Return the mapping stored under *prefix*, or an empty dict."""
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, properties_cls: type[T]) -> T:
        """Instantiate a ``@config_properties`` dataclass from this configuration.

        Unset fields keep their dataclass defaults. String values (from the
        environment, typically) are coerced to ``int``, ``float`` or ``bool``
        fields.
        """
        prefix = getattr(properties_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ValueError(f"{properties_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(properties_cls)
        values: dict[str, Any] = {}
        for field in dataclasses.fields(properties_cls):  # type: ignore[arg-type]
            value = self.get(f"{prefix}.{field.name}")
            if value is None:
                continue
            coerce = _COERCE.get(hints.get(field.name))
            values[field.name] = coerce(value) if coerce and isinstance(value, str) else value
        return properties_cls(**values)

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def _interpolate(self, value: str, depth: int) -> str:
        if "${" not in value:
            return value
        if depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Max recursion depth exceeded resolving '{value}'; check for circular references")

        def resolve(match: re.Match[str]) -> str:
            name, has_fallback, fallback = match.group(1).partition(":")
            from_env = os.environ.get(name)
            if from_env is not None:
                return from_env
            referenced = self._lookup(name)
            if referenced is not None:
                return self._interpolate(str(referenced), depth + 1)
            if has_fallback:
                return fallback
            raise ValueError(f"Cannot resolve placeholder '${{{name}}}' from the environment or configuration")

        return _PLACEHOLDER.sub(resolve, value)
