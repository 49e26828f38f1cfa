"""索引设置构建器模块."""

from __future__ import annotations

from typing import Any

from elasticfluent.builders.analysis import Analysis
from elasticfluent.core.document import DocumentBuilder
from elasticfluent.core.utils import json_value, smart_quote_format
from elasticfluent.typing import Transform


class IndexSettingsBuilder(DocumentBuilder):
    """
    索引设置构建器.

    使用示例:
        settings = (
            IndexSettingsBuilder()
            .number_of_shards(3)
            .number_of_replicas(1)
            .analysis(
                lambda a: a.analyzer(
                    lambda an: an.custom("lower_kw", tokenizer="keyword", filters=["lowercase"])
                )
            )
        )

        es.indices.create(index="alerts", settings=settings.to_dict())
    """

    def number_of_shards(self, number_of_shards: int = 1) -> IndexSettingsBuilder:
        """主分片数量，默认 1."""
        self.register_fragment(smart_quote_format(" 'number_of_shards': {0}", number_of_shards))
        return self

    def number_of_replicas(self, number_of_replicas: int = 1) -> IndexSettingsBuilder:
        """副本数量，默认 1."""
        self.register_fragment(
            smart_quote_format(" 'number_of_replicas': {0}", number_of_replicas)
        )
        return self

    def refresh_interval(self, refresh_interval: str = "1s") -> IndexSettingsBuilder:
        """刷新间隔，默认 1s，设为 "-1" 关闭自动刷新."""
        self.register_fragment(
            smart_quote_format(" 'refresh_interval': {0}", json_value(refresh_interval))
        )
        return self

    def analysis(self, analysis: Transform[Analysis] | None) -> IndexSettingsBuilder:
        """设置 analysis 段."""
        self.register_nested(Analysis, analysis)
        return self

    def custom(self, custom_format: str, *args: Any) -> IndexSettingsBuilder:
        """添加自定义片段，可以使用 ' 代替 "."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self
