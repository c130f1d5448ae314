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
"""Filter capability: contributes a WHERE predicate scoped to an alias."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from queryspec.composable import Composable
from queryspec.ports.outbound import QueryBuilderPort


class Filter(Composable, ABC):
    """Produces a boolean predicate for the entity behind an alias.

    ``get_filter`` returns ``None`` when the filter contributes no
    condition. It may read the builder (to resolve aliases and columns)
    but never changes the query's structure.
    """

    @abstractmethod
    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any | None: ...


class AliasedFilter(Filter, ABC):
    """Leaf filter on one field, optionally pinned to its own alias.

    A pinned alias targets a joined entity instead of the alias the
    filter is applied with.
    """

    def __init__(self, field: str, alias: str | None = None) -> None:
        self.field = field
        self.alias = alias

    def column(self, qb: QueryBuilderPort, alias: str) -> Any:
        return qb.column(self.alias or alias, self.field)
