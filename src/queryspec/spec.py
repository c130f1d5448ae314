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
"""Factory shortcuts for building specification trees.

:class:`Spec` gathers one static constructor per node type so callers
need a single import, and :class:`FilterUtils` generates equality
specifications from keyword arguments, dicts or example objects
(Spring Data's *Query by Example*, but more Pythonic).

Example::

    spec = Spec.and_x(
        Spec.eq("role", "admin"),
        Spec.gte("age", 18),
        Spec.order_by("name"),
        Spec.offset(20),
    )
    users = repo.match(spec, Spec.max_results(10))

    # From keyword arguments (eq, ANDed; None values skipped by from_dict)
    spec = FilterUtils.by(name="Alice", active=True)
    spec = FilterUtils.from_example(UserFilter(role="admin"))
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Any

from queryspec.filter import Between, Comparison, Filter, In, IsNotNull, IsNull, Like, LikeFormat
from queryspec.filter.comparison import EQ, GT, GTE, LT, LTE, NEQ
from queryspec.query import GroupBy, Having, Join, LeftJoin, Limit, Offset, OrderBy, QueryModifier, Slice
from queryspec.result import AsArray, ExecutionOptions, MaxResults, ResultModifier, ResultModifierCollection
from queryspec.specification import AndX, CountOf, Not, OrX


class Spec:
    """Static constructors for filters, modifiers and combinators."""

    # ------------------------------------------------------------------
    # Logic
    # ------------------------------------------------------------------

    @staticmethod
    def and_x(*children: Filter | QueryModifier) -> AndX:
        return AndX(*children)

    @staticmethod
    def or_x(*children: Filter | QueryModifier) -> OrX:
        return OrX(*children)

    @staticmethod
    def not_(child: Filter | QueryModifier) -> Not:
        return Not(child)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @staticmethod
    def eq(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Equal to."""
        return Comparison(EQ, field, value, alias)

    @staticmethod
    def neq(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Not equal to."""
        return Comparison(NEQ, field, value, alias)

    @staticmethod
    def lt(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Less than."""
        return Comparison(LT, field, value, alias)

    @staticmethod
    def lte(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Less than or equal."""
        return Comparison(LTE, field, value, alias)

    @staticmethod
    def gt(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Greater than."""
        return Comparison(GT, field, value, alias)

    @staticmethod
    def gte(field: str, value: Any, alias: str | None = None) -> Comparison:
        """Greater than or equal."""
        return Comparison(GTE, field, value, alias)

    @staticmethod
    def between(field: str, low: Any, high: Any, alias: str | None = None) -> Between:
        return Between(field, low, high, alias)

    @staticmethod
    def in_(field: str, values: Iterable[Any], alias: str | None = None) -> In:
        return In(field, values, alias)

    @staticmethod
    def not_in(field: str, values: Iterable[Any], alias: str | None = None) -> Not:
        return Not(In(field, values, alias))

    @staticmethod
    def like(
        field: str, value: str, format: LikeFormat = LikeFormat.CONTAINS, alias: str | None = None
    ) -> Like:
        return Like(field, value, format, alias)

    @staticmethod
    def is_null(field: str, alias: str | None = None) -> IsNull:
        return IsNull(field, alias)

    @staticmethod
    def is_not_null(field: str, alias: str | None = None) -> IsNotNull:
        return IsNotNull(field, alias)

    # ------------------------------------------------------------------
    # Query modifiers
    # ------------------------------------------------------------------

    @staticmethod
    def join(field: str, new_alias: str, alias: str | None = None) -> Join:
        return Join(field, new_alias, alias)

    @staticmethod
    def left_join(field: str, new_alias: str, alias: str | None = None) -> LeftJoin:
        return LeftJoin(field, new_alias, alias)

    @staticmethod
    def order_by(field: str, direction: str = "asc", alias: str | None = None) -> OrderBy:
        return OrderBy(field, direction, alias)

    @staticmethod
    def group_by(field: str, alias: str | None = None) -> GroupBy:
        return GroupBy(field, alias)

    @staticmethod
    def having(filter: Filter) -> Having:
        return Having(filter)

    @staticmethod
    def offset(offset: int) -> Offset:
        return Offset(offset)

    @staticmethod
    def limit(limit: int) -> Limit:
        return Limit(limit)

    @staticmethod
    def slice(size: int, index: int = 0) -> Slice:
        return Slice(size, index)

    @staticmethod
    def count_of(child: Filter | QueryModifier | None = None) -> CountOf:
        return CountOf(child)

    # ------------------------------------------------------------------
    # Result modifiers
    # ------------------------------------------------------------------

    @staticmethod
    def as_array() -> AsArray:
        return AsArray()

    @staticmethod
    def max_results(max_results: int) -> MaxResults:
        return MaxResults(max_results)

    @staticmethod
    def execution_options(**options: Any) -> ExecutionOptions:
        return ExecutionOptions(**options)

    @staticmethod
    def result_modifiers(*children: ResultModifier) -> ResultModifierCollection:
        return ResultModifierCollection(*children)


class FilterUtils:
    """Generate equality specifications from entities, dicts, or kwargs.

    Usage::

        # From keyword arguments (eq by default)
        spec = FilterUtils.by(name="Alice", active=True)

        # From a dict
        spec = FilterUtils.from_dict({"name": "Alice", "active": True})

        # From a partial entity (non-None fields become eq filters)
        spec = FilterUtils.from_example(User(name="Alice"))
    """

    @staticmethod
    def by(**kwargs: Any) -> AndX:
        """Create a specification from keyword arguments (all eq, ANDed)."""
        return AndX(*(Spec.eq(field, value) for field, value in kwargs.items()))

    @staticmethod
    def from_dict(filters: dict[str, Any]) -> AndX:
        """Create a specification from a dict of field->value pairs (all eq, ANDed).

        ``None`` values are skipped.
        """
        return AndX(*(Spec.eq(field, value) for field, value in filters.items() if value is not None))

    @staticmethod
    def from_example(example: Any) -> AndX:
        """Create a specification from an example entity/DTO.

        Extracts non-``None`` field values and creates eq filters for each.
        Supports dataclasses and any object with ``__dict__``; private
        attributes (leading underscore) are ignored.
        """
        if dataclasses.is_dataclass(example) and not isinstance(example, type):
            fields = {f.name: getattr(example, f.name) for f in dataclasses.fields(example)}
        else:
            fields = {k: v for k, v in vars(example).items() if not k.startswith("_")}
        return FilterUtils.from_dict(fields)
