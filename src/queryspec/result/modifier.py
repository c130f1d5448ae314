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
"""ResultModifier capability and the built-in result modifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from queryspec.kernel.exceptions import InvalidArgumentError, type_name
from queryspec.ports.outbound import HydrationMode, QueryPort


class ResultModifier(ABC):
    """Adjusts how a fully built query fetches its results.

    Runs after every filter and query modifier has been applied and
    before the query executes. Never touches predicate logic.
    """

    @abstractmethod
    def modify(self, query: QueryPort) -> None: ...


class AsArray(ResultModifier):
    """Hydrate rows as dicts of column values instead of entities."""

    def modify(self, query: QueryPort) -> None:
        query.set_hydration_mode(HydrationMode.ARRAY)


class MaxResults(ResultModifier):
    """Return at most *max_results* rows."""

    def __init__(self, max_results: int) -> None:
        if not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 0:
            raise InvalidArgumentError(f"max_results must be a non-negative int, {max_results!r} given")
        self.max_results = max_results

    def modify(self, query: QueryPort) -> None:
        query.set_max_results(self.max_results)


class ExecutionOptions(ResultModifier):
    """Forward backend execution options (e.g. ``populate_existing=True``)."""

    def __init__(self, **options: Any) -> None:
        if not options:
            raise InvalidArgumentError("ExecutionOptions requires at least one option")
        self.options = options

    def modify(self, query: QueryPort) -> None:
        query.set_execution_options(**self.options)


class ResultModifierCollection(ResultModifier):
    """Apply several result modifiers in order.

    Every child is checked when the collection is constructed, in order;
    the first one that is not a :class:`ResultModifier` raises
    :class:`InvalidArgumentError`, so a collection that exists is always
    applied in full.
    """

    def __init__(self, *children: ResultModifier) -> None:
        for child in children:
            if not isinstance(child, ResultModifier):
                raise InvalidArgumentError(
                    f"Child passed to ResultModifierCollection must be an instance of "
                    f"{type_name(ResultModifier)}, but instance of {type_name(child)} found"
                )
        self._children = children

    @property
    def children(self) -> tuple[ResultModifier, ...]:
        return self._children

    def modify(self, query: QueryPort) -> None:
        for child in self._children:
            child.modify(query)
