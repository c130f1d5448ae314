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
"""QueryModifier capability: mutates query structure."""

from __future__ import annotations

from abc import ABC, abstractmethod

from queryspec.composable import Composable
from queryspec.ports.outbound import QueryBuilderPort


class QueryModifier(Composable, ABC):
    """Adds joins, ordering, grouping, having criteria or pagination bounds.

    ``modify`` is invoked once per build with the builder and the alias
    the modifier is scoped to.
    """

    @abstractmethod
    def modify(self, qb: QueryBuilderPort, alias: str) -> None: ...
