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
"""Pagination bounds: first result and maximum number of rows."""

from __future__ import annotations

from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier


def _non_negative(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an int, {type_name(value)} given")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}", context={name: value})
    return value


class Offset(QueryModifier):
    """Start returning rows at index *offset*."""

    def __init__(self, offset: int) -> None:
        self.offset = _non_negative("offset", offset)

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.set_first_result(self.offset)


class Limit(QueryModifier):
    """Return at most *limit* rows."""

    def __init__(self, limit: int) -> None:
        self.limit = _non_negative("limit", limit)

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.set_max_results(self.limit)


class Slice(QueryModifier):
    """Page *index* (0-based) of *size* rows."""

    def __init__(self, size: int, index: int = 0) -> None:
        self.size = _non_negative("size", size)
        self.index = _non_negative("index", index)

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.set_first_result(self.index * self.size)
        qb.set_max_results(self.size)
