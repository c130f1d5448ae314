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
"""HAVING modifier."""

from __future__ import annotations

from queryspec.filter.filter import Filter
from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier


class Having(QueryModifier):
    """Attach a filter's predicate to the HAVING clause instead of WHERE."""

    def __init__(self, filter: Filter) -> None:
        if not isinstance(filter, Filter):
            raise InvalidArgumentError(
                f'Expected argument of type "{type_name(Filter)}", "{type_name(filter)}" given.'
            )
        self.filter = filter

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        predicate = self.filter.get_filter(qb, alias)
        if predicate is not None:
            qb.having(predicate)
