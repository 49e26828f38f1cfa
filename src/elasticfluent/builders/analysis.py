"""索引分析配置构建器模块.

提供 analysis 段的构建器:
- Analysis: analysis 段本身
- Analyzer: 分析器
- Tokenizer: 分词器
- TokenFilter: 词元过滤器
"""

from __future__ import annotations

from typing import Any

from elasticfluent.core.composite import CompositeBase
from elasticfluent.core.utils import json_value, smart_quote_format
from elasticfluent.typing import Transform


class Analyzer(CompositeBase):
    """
    analyzer 段构建器.

    示例:
        Analyzer().custom("my_analyzer", tokenizer="standard", filters=["lowercase"])
        # 'analyzer': { "my_analyzer": { 'type': 'custom','tokenizer': "standard",'filter': ["lowercase"] } }
    """

    TEMPLATE = "'analyzer': { {0} }"

    def custom(
        self,
        name: str,
        tokenizer: str,
        filters: list[str] | None = None,
        char_filters: list[str] | None = None,
    ) -> Analyzer:
        """
        自定义分析器.

        Args:
            name: 分析器名称
            tokenizer: 分词器名称
            filters: 词元过滤器名称列表
            char_filters: 字符过滤器名称列表

        Returns:
            self，支持链式调用
        """
        options = ["'type': 'custom'", smart_quote_format("'tokenizer': {0}", json_value(tokenizer))]
        if filters:
            options.append(smart_quote_format("'filter': {0}", json_value(filters)))
        if char_filters:
            options.append(smart_quote_format("'char_filter': {0}", json_value(char_filters)))
        return self._add_definition(name, options)

    def standard(
        self,
        name: str,
        stopwords: list[str] | str | None = None,
        max_token_length: int | None = None,
    ) -> Analyzer:
        """标准分析器."""
        options = ["'type': 'standard'"]
        if stopwords is not None:
            options.append(smart_quote_format("'stopwords': {0}", json_value(stopwords)))
        if max_token_length is not None:
            options.append(smart_quote_format("'max_token_length': {0}", max_token_length))
        return self._add_definition(name, options)

    def custom_part(self, custom_format: str, *args: Any) -> Analyzer:
        """添加自定义片段，可以使用 ' 代替 "."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self

    def _add_definition(self, name: str, options: list[str]) -> Analyzer:
        self.register_fragment(
            smart_quote_format("{0}: { {1} }", json_value(name), ",".join(options))
        )
        return self


class Tokenizer(CompositeBase):
    """tokenizer 段构建器."""

    TEMPLATE = "'tokenizer': { {0} }"

    def standard(self, name: str, max_token_length: int = 255) -> Tokenizer:
        """标准分词器，默认最大词元长度 255."""
        self.register_fragment(
            smart_quote_format(
                "{0}: { 'type': 'standard','max_token_length': {1} }",
                json_value(name),
                max_token_length,
            )
        )
        return self

    def ngram(
        self,
        name: str,
        min_gram: int = 1,
        max_gram: int = 2,
        token_chars: list[str] | None = None,
    ) -> Tokenizer:
        """
        N-gram 分词器.

        Args:
            name: 分词器名称
            min_gram: 最小长度，默认 1
            max_gram: 最大长度，默认 2
            token_chars: 保留的字符类别，如 ["letter", "digit"]

        Returns:
            self，支持链式调用
        """
        options = [
            "'type': 'ngram'",
            smart_quote_format("'min_gram': {0}", min_gram),
            smart_quote_format("'max_gram': {0}", max_gram),
        ]
        if token_chars:
            options.append(smart_quote_format("'token_chars': {0}", json_value(token_chars)))
        self.register_fragment(
            smart_quote_format("{0}: { {1} }", json_value(name), ",".join(options))
        )
        return self

    def custom_part(self, custom_format: str, *args: Any) -> Tokenizer:
        """添加自定义片段，可以使用 ' 代替 "."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self


class TokenFilter(CompositeBase):
    """filter 段（词元过滤器）构建器."""

    TEMPLATE = "'filter': { {0} }"

    def stop(self, name: str, stopwords: list[str] | str) -> TokenFilter:
        """停用词过滤器."""
        self.register_fragment(
            smart_quote_format(
                "{0}: { 'type': 'stop','stopwords': {1} }",
                json_value(name),
                json_value(stopwords),
            )
        )
        return self

    def lowercase(self, name: str, language: str | None = None) -> TokenFilter:
        """小写过滤器."""
        options = ["'type': 'lowercase'"]
        if language is not None:
            options.append(smart_quote_format("'language': {0}", json_value(language)))
        self.register_fragment(
            smart_quote_format("{0}: { {1} }", json_value(name), ",".join(options))
        )
        return self

    def custom_part(self, custom_format: str, *args: Any) -> TokenFilter:
        """添加自定义片段，可以使用 ' 代替 "."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self


class Analysis(CompositeBase):
    """
    analysis 段构建器.

    示例:
        str(
            Analysis()
            .analyzer(lambda a: a.custom_part("Analyzers"))
            .tokenizer(lambda t: t.custom_part("Tokenizers"))
            .custom_part("{ Custom }")
        )
        # "analysis": { "analyzer": { Analyzers },"tokenizer": { Tokenizers },{ Custom } }
    """

    TEMPLATE = "'analysis': { {0} }"

    def analyzer(self, analyzer: Transform[Analyzer] | None) -> Analysis:
        """添加 analyzer 段."""
        self.register_nested(Analyzer, analyzer)
        return self

    def tokenizer(self, tokenizer: Transform[Tokenizer] | None) -> Analysis:
        """添加 tokenizer 段."""
        self.register_nested(Tokenizer, tokenizer)
        return self

    def token_filter(self, token_filter: Transform[TokenFilter] | None) -> Analysis:
        """添加 filter 段."""
        self.register_nested(TokenFilter, token_filter)
        return self

    def custom_part(self, custom_format: str, *args: Any) -> Analysis:
        """添加自定义片段，可以使用 ' 代替 "."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self
