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
"""ORDER BY and GROUP BY modifiers."""

from __future__ import annotations

from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier

ASC = "asc"
DESC = "desc"


class OrderBy(QueryModifier):
    """Order by *field*, appended after any ordering already present."""

    def __init__(self, field: str, direction: str = ASC, alias: str | None = None) -> None:
        if not isinstance(direction, str):
            raise InvalidArgumentError(f"direction must be a str, {type_name(direction)} given")
        normalized = direction.lower()
        if normalized not in (ASC, DESC):
            raise InvalidArgumentError(
                f'"{direction}" is not a valid order direction. Valid directions are: {ASC}, {DESC}',
                context={"direction": direction},
            )
        self.field = field
        self.direction = normalized
        self.alias = alias

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        col = qb.column(self.alias or alias, self.field)
        qb.order_by(col.asc() if self.direction == ASC else col.desc())


class GroupBy(QueryModifier):
    """Group by *field*, appended after any grouping already present."""

    def __init__(self, field: str, alias: str | None = None) -> None:
        self.field = field
        self.alias = alias

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.group_by(qb.column(self.alias or alias, self.field))
