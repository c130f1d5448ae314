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
"""Set membership filter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from queryspec.filter.filter import AliasedFilter
from queryspec.kernel.exceptions import InvalidArgumentError
from queryspec.ports.outbound import QueryBuilderPort


class In(AliasedFilter):
    """Value is one of *values*. An empty collection is rejected."""

    def __init__(self, field: str, values: Iterable[Any], alias: str | None = None) -> None:
        if isinstance(values, (str, bytes)):
            raise InvalidArgumentError(f"In() on '{field}' expects a collection of values, got a string")
        values = tuple(values)
        if not values:
            raise InvalidArgumentError(f"In() on '{field}' requires at least one value", context={"field": field})
        super().__init__(field, alias)
        self.values = values

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any:
        return self.column(qb, alias).in_(self.values)
