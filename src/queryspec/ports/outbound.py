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
"""Outbound ports: the query-building and query-execution collaborators.

The specification core only talks to these two surfaces. Filters and
query modifiers receive a :class:`QueryBuilderPort` together with the
alias they are scoped to; result modifiers receive a :class:`QueryPort`.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class HydrationMode(str, Enum):
    """How result rows are materialised."""

    OBJECT = "object"
    ARRAY = "array"


@runtime_checkable
class QueryPort(Protocol):
    """A fully built, executable query."""

    def set_hydration_mode(self, mode: HydrationMode) -> None: ...

    def set_max_results(self, max_results: int | None) -> None: ...

    def set_execution_options(self, **options: Any) -> None: ...

    def execute(self) -> list[Any]: ...

    def get_single_result(self) -> Any: ...

    def get_single_scalar_result(self) -> Any: ...

    def get_scalar_result(self) -> list[dict[str, Any]]: ...

    def iterate(self, batch_size: int | None = None) -> Iterator[Any]: ...


@runtime_checkable
class QueryBuilderPort(Protocol):
    """Mutable query under construction, scoped to a root alias."""

    @property
    def root_alias(self) -> str: ...

    def entity(self, alias: str) -> Any: ...

    def column(self, alias: str, field: str) -> Any: ...

    def and_where(self, *predicates: Any) -> None: ...

    def having(self, *predicates: Any) -> None: ...

    def order_by(self, *clauses: Any) -> None: ...

    def group_by(self, *clauses: Any) -> None: ...

    def join(self, alias: str, field: str, new_alias: str, *, outer: bool = False) -> None: ...

    def select(self, *columns: Any) -> None: ...

    def set_first_result(self, first_result: int | None) -> None: ...

    def set_max_results(self, max_results: int | None) -> None: ...

    def get_query(self) -> QueryPort: ...
