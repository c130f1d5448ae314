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
"""queryspec: composable query specifications for SQLAlchemy.

Build queries out of small, reusable, named objects instead of
hand-written ``select()`` chains:

* **Filters** contribute WHERE predicates (``Spec.eq``, ``Spec.in_``, ...).
* **Query modifiers** change structure (joins, ordering, grouping,
  having, pagination).
* **Specifications** are both, and compose with ``&``, ``|`` and ``~``.
* **Result modifiers** adjust how the built query fetches rows.

:class:`SpecificationRepository` builds the query for a specification tree
and executes it under one of six result contracts, mapping backend errors
onto :class:`NoResultError` and :class:`NonUniqueResultError`.
"""

from queryspec.adapters.sqlalchemy import Query, QueryBuilder, ResultIterator
from queryspec.core import Config, config_properties
from queryspec.filter import Between, Comparison, Filter, In, IsNotNull, IsNull, Like, LikeFormat
from queryspec.kernel import InvalidArgumentError, NonUniqueResultError, NoResultError, QuerySpecException
from queryspec.ports import HydrationMode, QueryBuilderPort, QueryPort
from queryspec.query import GroupBy, Join, LeftJoin, Limit, Offset, OrderBy, QueryModifier, Slice
from queryspec.repository import RepositoryProperties, SpecificationRepository
from queryspec.result import AsArray, ExecutionOptions, MaxResults, ResultModifier, ResultModifierCollection
from queryspec.spec import FilterUtils, Spec
from queryspec.specification import AndX, BaseSpecification, CountOf, Not, OrX, Specification

__all__ = [
    # Capabilities
    "Filter",
    "QueryModifier",
    "ResultModifier",
    "Specification",
    # Specifications
    "AndX",
    "BaseSpecification",
    "CountOf",
    "Not",
    "OrX",
    # Filters
    "Between",
    "Comparison",
    "In",
    "IsNotNull",
    "IsNull",
    "Like",
    "LikeFormat",
    # Query modifiers
    "GroupBy",
    "Join",
    "LeftJoin",
    "Limit",
    "Offset",
    "OrderBy",
    "Slice",
    # Result modifiers
    "AsArray",
    "ExecutionOptions",
    "MaxResults",
    "ResultModifierCollection",
    # Factories
    "FilterUtils",
    "Spec",
    # Repository
    "RepositoryProperties",
    "SpecificationRepository",
    # Ports and adapter
    "HydrationMode",
    "Query",
    "QueryBuilder",
    "QueryBuilderPort",
    "QueryPort",
    "ResultIterator",
    # Configuration
    "Config",
    "config_properties",
    # Errors
    "InvalidArgumentError",
    "NoResultError",
    "NonUniqueResultError",
    "QuerySpecException",
]
