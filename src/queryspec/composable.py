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
"""Operator overloads shared by every filter and query modifier.

* ``a & b``: :class:`~queryspec.specification.logic.AndX`
* ``a | b``: :class:`~queryspec.specification.logic.OrX`
* ``~a``: :class:`~queryspec.specification.logic.Not`

Chained operators of the same kind flatten into one node, so
``a & b & c`` is ``AndX(a, b, c)`` rather than ``AndX(AndX(a, b), c)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from queryspec.specification.logic import AndX, Not, OrX


class Composable:
    """Mixin adding the ``&``, ``|`` and ``~`` combinators."""

    __slots__ = ()

    def __and__(self, other: Any) -> AndX:
        from queryspec.specification.logic import AndX

        left = self.children if isinstance(self, AndX) else (self,)
        return AndX(*left, other)

    def __or__(self, other: Any) -> OrX:
        from queryspec.specification.logic import OrX

        left = self.children if isinstance(self, OrX) else (self,)
        return OrX(*left, other)

    def __invert__(self) -> Not:
        from queryspec.specification.logic import Not

        return Not(self)
