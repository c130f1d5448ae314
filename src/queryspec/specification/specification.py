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
"""Composable specifications: filters and query modifiers in one object.

Inspired by Spring Data's ``Specification`` pattern, a *specification*
is a small, named, reusable object that contributes a WHERE predicate,
mutates the query structure, or both. Specifications combine with
``&`` (AND), ``|`` (OR) and ``~`` (NOT) into an immutable tree that the
repository walks once per build.

Example::

    class ActiveAdmins(BaseSpecification):
        def get_spec(self):
            return Spec.eq("active", True) & Spec.eq("role", "admin") & Spec.order_by("name")

    admins = repo.match(ActiveAdmins() & Spec.offset(10))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import func

from queryspec.filter.filter import Filter
from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier


def ensure_capable(value: Any, owner: str) -> Filter | QueryModifier:
    """Return *value* if it is a Filter or a QueryModifier, else raise."""
    if not isinstance(value, (Filter, QueryModifier)):
        raise InvalidArgumentError(
            f"Child passed to {owner} must be an instance of "
            f'"{type_name(Filter)}" or "{type_name(QueryModifier)}", "{type_name(value)}" given.'
        )
    return value


class Specification(Filter, QueryModifier, ABC):
    """Dual capability: contributes a predicate *and* may modify the query."""


class BaseSpecification(Specification):
    """Named specification wrapping a tree returned by :meth:`get_spec`.

    Subclass to give a reusable name to a composition. When *alias* is
    set, the wrapped tree is applied with it instead of the alias the
    specification receives, which lets a specification target a joined
    entity.
    """

    def __init__(self, alias: str | None = None) -> None:
        self.alias = alias

    @abstractmethod
    def get_spec(self) -> Filter | QueryModifier | None:
        """Return the specification tree this object stands for."""

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any | None:
        spec = self._resolved_spec()
        if isinstance(spec, Filter):
            return spec.get_filter(qb, self.alias or alias)
        return None

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        spec = self._resolved_spec()
        if isinstance(spec, QueryModifier):
            spec.modify(qb, self.alias or alias)

    def _resolved_spec(self) -> Filter | QueryModifier | None:
        spec = self.get_spec()
        return ensure_capable(spec, type(self).__name__) if spec is not None else None


class CountOf(Specification):
    """Select ``COUNT(*)`` of the rows matched by *child*."""

    def __init__(self, child: Filter | QueryModifier | None = None) -> None:
        self.child = ensure_capable(child, type(self).__name__) if child is not None else None

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        qb.select(func.count())
        if isinstance(self.child, QueryModifier):
            self.child.modify(qb, alias)

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any | None:
        if isinstance(self.child, Filter):
            return self.child.get_filter(qb, alias)
        return None
