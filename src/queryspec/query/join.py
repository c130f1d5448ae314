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
"""Relationship joins.

A join registers *new_alias* with the builder, so filters and modifiers
declared after it can target the joined entity::

    Join("posts", "p") & Spec.eq("title", "Hello", alias="p")
"""

from __future__ import annotations

from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier


class Join(QueryModifier):
    """Inner join of relationship *field* on *alias* (or the applied alias)."""

    outer = False

    def __init__(self, field: str, new_alias: str, alias: str | None = None) -> None:
        self.field = field
        self.new_alias = new_alias
        self.alias = alias

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.join(self.alias or alias, self.field, self.new_alias, outer=self.outer)


class InnerJoin(Join):
    """Explicit spelling of :class:`Join`."""


class LeftJoin(Join):
    """Left outer join."""

    outer = True
