"""顶层文档构建器模块."""

from __future__ import annotations

import json
from typing import Any

from elasticfluent.core.composite import CompositeBase
from elasticfluent.core.config import FormatConfig
from elasticfluent.core.utils import alt_quote, beautify_json
from elasticfluent.exceptions import JsonRenderError


class DocumentBuilder(CompositeBase):
    """
    顶层文档构建器基类.

    在组合构建器之上提供终结操作:
    - build: 输出紧凑 JSON，引号约定在这里统一转换一次
    - build_beautified: 输出美化后的 JSON
    - to_dict: 解析为字典

    str(builder) 等价于 build_beautified()。
    """

    TEMPLATE = "{ {0} }"

    def __init__(self, format_config: FormatConfig | None = None) -> None:
        """
        初始化构建器.

        Args:
            format_config: 美化输出配置，默认使用 FormatConfig 的默认值
        """
        super().__init__()
        self.format_config = format_config or FormatConfig()

    def build(self) -> str:
        """构建紧凑 JSON."""
        return alt_quote(self.render())

    def build_beautified(self) -> str:
        """构建美化后的 JSON."""
        return beautify_json(self.build(), self.format_config)

    def to_dict(self) -> dict[str, Any]:
        """
        导出为字典格式.

        Returns:
            解析后的文档字典

        Raises:
            JsonRenderError: 构建结果不是合法 JSON 时抛出，通常由 custom 片段引起
        """
        document = self.build()
        try:
            return json.loads(document)
        except json.JSONDecodeError as e:
            raise JsonRenderError(f"构建结果不是合法 JSON: {e}, 文档: {document}") from e

    def __str__(self) -> str:
        return self.build_beautified()
