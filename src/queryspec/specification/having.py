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
"""Deprecated combined having wrapper.

.. deprecated::
    Use :class:`queryspec.query.Having` instead.
"""

from __future__ import annotations

import warnings
from typing import Any

from sqlalchemy import ColumnElement, text

from queryspec.filter.filter import Filter
from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier


class Having(QueryModifier):
    """Inject a filter, a query modifier or a raw expression into HAVING.

    Only a query modifier: it is never a :class:`Filter`, so it can not
    contribute to the WHERE clause. :meth:`get_filter` is kept for callers
    written against the old dual interface and always returns ``None``.

    *child* may be a Filter, a QueryModifier, a SQLAlchemy expression, or
    a raw SQL string (wrapped in ``text()``).
    """

    def __init__(self, child: Filter | QueryModifier | ColumnElement[Any] | str) -> None:
        warnings.warn(
            "queryspec.specification.Having is deprecated, use queryspec.query.Having instead",
            DeprecationWarning,
            stacklevel=2,
        )
        if isinstance(child, str):
            child = text(child)
        elif not isinstance(child, (Filter, QueryModifier, ColumnElement)):
            raise InvalidArgumentError(
                f'Expected argument of type "{type_name(Filter)}", "{type_name(QueryModifier)}", '
                f'expression or string, "{type_name(child)}" given.'
            )
        self.child = child

    def modify(self, qb: QueryBuilderPort, alias: str) -> None:
        child = self.child
        if isinstance(child, QueryModifier):
            child.modify(qb, alias)

        if isinstance(child, Filter):
            predicate = child.get_filter(qb, alias)
            if predicate is not None:
                qb.having(predicate)
        elif not isinstance(child, QueryModifier):
            qb.having(child)

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> None:
        return None
