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
"""Specifications: the compositional core.

``Having`` here is the deprecated combined wrapper; new code should use
:class:`queryspec.query.Having`.
"""

from queryspec.specification.having import Having
from queryspec.specification.logic import AndX, LogicX, Not, OrX
from queryspec.specification.specification import BaseSpecification, CountOf, Specification

__all__ = [
    "AndX",
    "BaseSpecification",
    "CountOf",
    "Having",
    "LogicX",
    "Not",
    "OrX",
    "Specification",
]
