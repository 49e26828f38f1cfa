"""构建器模块导出."""

from elasticfluent.builders.analysis import Analysis, Analyzer, TokenFilter, Tokenizer
from elasticfluent.builders.clauses import (
    Bool,
    BoolFilter,
    Filter,
    Must,
    MustNot,
    Query,
    Should,
    Sort,
)
from elasticfluent.builders.query import QueryBuilder
from elasticfluent.builders.settings import IndexSettingsBuilder

__all__ = [
    "QueryBuilder",
    "IndexSettingsBuilder",
    "Query",
    "Filter",
    "Bool",
    "Must",
    "Should",
    "MustNot",
    "BoolFilter",
    "Sort",
    "Analysis",
    "Analyzer",
    "Tokenizer",
    "TokenFilter",
]
