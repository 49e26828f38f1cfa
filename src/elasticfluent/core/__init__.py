"""核心模块导出."""

from elasticfluent.core.composite import CompositeBase, validate_template
from elasticfluent.core.config import FormatConfig
from elasticfluent.core.constants import JsonStructure, TemplateCharacters
from elasticfluent.core.document import DocumentBuilder
from elasticfluent.core.operators import (
    MatchOperator,
    RangeOperator,
    SortOrder,
)
from elasticfluent.core.query_string import validate_query_string
from elasticfluent.core.utils import (
    alt_quote,
    as_string,
    beautify_json,
    json_value,
    smart_quote_format,
)

__all__ = [
    "TemplateCharacters",
    "JsonStructure",
    "FormatConfig",
    "SortOrder",
    "MatchOperator",
    "RangeOperator",
    "CompositeBase",
    "DocumentBuilder",
    "validate_template",
    "validate_query_string",
    "alt_quote",
    "as_string",
    "json_value",
    "smart_quote_format",
    "beautify_json",
]
