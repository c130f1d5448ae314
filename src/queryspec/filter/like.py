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
"""SQL LIKE pattern filter."""

from __future__ import annotations

from enum import Enum
from typing import Any

from queryspec.filter.filter import AliasedFilter
from queryspec.ports.outbound import QueryBuilderPort


class LikeFormat(str, Enum):
    """Where the wildcard goes around the searched value."""

    CONTAINS = "%{}%"
    STARTS_WITH = "{}%"
    ENDS_WITH = "%{}"
    EXACT = "{}"


class Like(AliasedFilter):
    """``field LIKE pattern``, the pattern built from *value* and *format*."""

    def __init__(
        self,
        field: str,
        value: str,
        format: LikeFormat = LikeFormat.CONTAINS,
        alias: str | None = None,
    ) -> None:
        super().__init__(field, alias)
        self.value = value
        self.format = LikeFormat(format)

    @property
    def pattern(self) -> str:
        return self.format.value.format(self.value)

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any:
        return self.column(qb, alias).like(self.pattern)
