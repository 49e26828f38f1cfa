"""elasticfluent - Fluent Elasticsearch Query Document Builder.

这是一个通过链式调用逐段组装 Elasticsearch 查询文档（JSON）的 Python 库。

主要功能:
    - QueryBuilder: 构建完整的查询请求体
    - IndexSettingsBuilder: 构建索引设置（含 analysis 段）
    - CompositeBase: 所有构建器共享的片段注册与模板渲染机制
    - beautify_json: 美化紧凑 JSON

模板中可以使用 ' 代替 "，最终输出时统一转换。

使用示例:
    from elasticfluent import QueryBuilder, SortOrder

    builder = (
        QueryBuilder()
        .query(lambda q: q.match("message", "timeout"))
        .sort(lambda s: s.field("create_time", SortOrder.DESC))
        .size(20)
    )
    body = builder.build()
"""

__version__ = "0.1.0"

# 导出构建器
from elasticfluent.builders import (
    Analysis,
    Analyzer,
    Bool,
    Filter,
    IndexSettingsBuilder,
    Query,
    QueryBuilder,
    Sort,
    TokenFilter,
    Tokenizer,
)

# 导出核心组件
from elasticfluent.core import (
    CompositeBase,
    DocumentBuilder,
    FormatConfig,
    MatchOperator,
    SortOrder,
    alt_quote,
    as_string,
    beautify_json,
    json_value,
    smart_quote_format,
)

# 导出异常
from elasticfluent.exceptions import (
    BeautifyError,
    ConfigError,
    ElasticFluentError,
    JsonRenderError,
    QueryStringParseError,
    TemplateError,
)

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "QueryBuilder",
    "IndexSettingsBuilder",
    "Query",
    "Filter",
    "Bool",
    "Sort",
    "Analysis",
    "Analyzer",
    "Tokenizer",
    "TokenFilter",
    # 核心组件
    "CompositeBase",
    "DocumentBuilder",
    "FormatConfig",
    "SortOrder",
    "MatchOperator",
    # 文本工具
    "alt_quote",
    "as_string",
    "json_value",
    "smart_quote_format",
    "beautify_json",
    # 异常
    "ElasticFluentError",
    "TemplateError",
    "BeautifyError",
    "JsonRenderError",
    "QueryStringParseError",
    "ConfigError",
]
