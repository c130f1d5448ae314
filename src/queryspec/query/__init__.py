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
"""Query modifiers: structural mutations of the query builder."""

from queryspec.query.having import Having
from queryspec.query.join import InnerJoin, Join, LeftJoin
from queryspec.query.modifier import QueryModifier
from queryspec.query.ordering import GroupBy, OrderBy
from queryspec.query.pagination import Limit, Offset, Slice

__all__ = [
    "GroupBy",
    "Having",
    "InnerJoin",
    "Join",
    "LeftJoin",
    "Limit",
    "Offset",
    "OrderBy",
    "QueryModifier",
    "Slice",
]
