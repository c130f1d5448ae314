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
"""Column comparison filters."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from queryspec.filter.filter import AliasedFilter
from queryspec.kernel.exceptions import InvalidArgumentError
from queryspec.ports.outbound import QueryBuilderPort

EQ = "="
NEQ = "<>"
LT = "<"
LTE = "<="
GT = ">"
GTE = ">="

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    EQ: operator.eq,
    NEQ: operator.ne,
    LT: operator.lt,
    LTE: operator.le,
    GT: operator.gt,
    GTE: operator.ge,
}


class Comparison(AliasedFilter):
    """``field <operator> value`` for one of ``= <> < <= > >=``."""

    def __init__(self, operator: str, field: str, value: Any, alias: str | None = None) -> None:
        if operator not in _OPERATORS:
            raise InvalidArgumentError(
                f'"{operator}" is not a valid comparison operator. Valid operators are: {", ".join(_OPERATORS)}',
                context={"operator": operator},
            )
        super().__init__(field, alias)
        self.operator = operator
        self.value = value

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any:
        return _OPERATORS[self.operator](self.column(qb, alias), self.value)


class Between(AliasedFilter):
    """Value is between *low* and *high* (inclusive)."""

    def __init__(self, field: str, low: Any, high: Any, alias: str | None = None) -> None:
        super().__init__(field, alias)
        self.low = low
        self.high = high

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any:
        return self.column(qb, alias).between(self.low, self.high)
