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
"""Logical combinators: AND, OR, NOT.

Children that contribute no predicate are left out of the combination.
When no child contributes one, the combinator contributes none either:
``AndX()`` and ``Not(Offset(5))`` are *nothing*, never a ``TRUE`` or
``FALSE`` literal.

Structural mutation is not exclusive: every child that is a query
modifier gets to modify the builder, in declaration order, regardless of
whether the node is an AND, an OR or a NOT.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from sqlalchemy import and_, not_, or_

from queryspec.filter.filter import Filter
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier
from queryspec.specification.specification import Specification, ensure_capable


class LogicX(Specification):
    """Combine children's predicates with :attr:`combine`."""

    combine: ClassVar[Callable[..., Any]]

    def __init__(self, *children: Filter | QueryModifier) -> None:
        owner = type(self).__name__
        self._children = tuple(ensure_capable(child, owner) for child in children)

    @property
    def children(self) -> tuple[Filter | QueryModifier, ...]:
        return self._children

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        for child in self._children:
            if isinstance(child, QueryModifier):
                child.modify(qb, alias)

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any | None:
        predicates = []
        for child in self._children:
            if isinstance(child, Filter):
                predicate = child.get_filter(qb, alias)
                if predicate is not None:
                    predicates.append(predicate)

        if not predicates:
            return None
        if len(predicates) == 1:
            return predicates[0]
        return type(self).combine(*predicates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._children))})"


class AndX(LogicX):
    """All children must match."""

    combine = staticmethod(and_)


class OrX(LogicX):
    """Any child may match."""

    combine = staticmethod(or_)


class Not(Specification):
    """Negate the child's predicate; a child without one stays without one."""

    def __init__(self, child: Filter | QueryModifier) -> None:
        self.child = ensure_capable(child, type(self).__name__)

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        if isinstance(self.child, QueryModifier):
            self.child.modify(qb, alias)

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any | None:
        if not isinstance(self.child, Filter):
            return None
        predicate = self.child.get_filter(qb, alias)
        if predicate is None:
            return None
        return not_(predicate)

    def __repr__(self) -> str:
        return f"Not({self.child!r})"
