"""Result modifiers: post-build, pre-execution adjustments of a query."""

from queryspec.result.modifier import (
    AsArray,
    ExecutionOptions,
    MaxResults,
    ResultModifier,
    ResultModifierCollection,
)

__all__ = [
    "AsArray",
    "ExecutionOptions",
    "MaxResults",
    "ResultModifier",
    "ResultModifierCollection",
]
