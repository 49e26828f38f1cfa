"""组合构建器基础模块.

所有构建器共享的片段注册协议和模板渲染逻辑:
- register_fragment: 注册预先格式化好的字面量片段
- register_nested: 通过变换函数构造嵌套构建器并注册其渲染结果
- render: 用分隔符拼接所有片段并代入模板
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from elasticfluent.core.constants import TemplateCharacters
from elasticfluent.core.utils import alt_quote, count_placeholders
from elasticfluent.exceptions import TemplateError
from elasticfluent.typing import BuilderT, Fragment, Transform

logger = logging.getLogger(__name__)


def validate_template(template: str, owner: str) -> None:
    """
    校验模板只包含唯一的 {0} 占位符.

    Args:
        template: 模板字符串
        owner: 模板所属构建器名称，用于错误信息

    Raises:
        TemplateError: 占位符缺失、重复或不是 {0} 时抛出
    """
    placeholders = count_placeholders(template)
    if placeholders != [TemplateCharacters.PLACEHOLDER]:
        raise TemplateError(
            f"{owner} 的模板必须且只能包含一个 {TemplateCharacters.PLACEHOLDER} 占位符，"
            f"当前模板: {template!r}"
        )


class CompositeBase:
    """
    组合构建器基类.

    维护一个按注册顺序排列的片段列表和一个包含唯一 {0} 占位符的模板。
    渲染时用逗号拼接所有片段并代入模板，构建器可以任意层级嵌套。

    子类通过覆盖 TEMPLATE 定义自身的包裹形式，模板使用单引号约定，
    除 {0} 以外的花括号均为字面量:

        class Analyzer(CompositeBase):
            TEMPLATE = "'analyzer': { {0} }"

    构建器是可变的，所有流式方法原地修改并返回 self。
    """

    TEMPLATE: ClassVar[str] = TemplateCharacters.PLACEHOLDER

    def __init__(self) -> None:
        validate_template(self.TEMPLATE, type(self).__name__)
        self._fragments: list[Fragment] = []

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """已注册的片段，按注册顺序排列."""
        return tuple(self._fragments)

    def register_fragment(self, fragment: Fragment | None) -> None:
        """
        注册字面量片段.

        空值（None、空字符串或仅包含空白）不产生任何内容，直接忽略；
        其他片段按原样追加，不做转义。

        Args:
            fragment: 预先格式化好的片段，可以使用单引号约定
        """
        if fragment is None or not fragment.strip():
            logger.debug(f"{type(self).__name__} 跳过空片段: {fragment!r}")
            return
        self._fragments.append(fragment)

    def render_nested(
        self,
        factory: Callable[[], BuilderT],
        transform: Transform[BuilderT] | None,
    ) -> Fragment | None:
        """
        构造并渲染嵌套构建器.

        使用 factory 创建一个全新的嵌套构建器，立即交给 transform 处理，
        再把返回的构建器渲染为片段。transform 为 None 时返回 None；
        transform 没有返回值时使用新创建的构建器本身。

        Args:
            factory: 嵌套构建器工厂，通常是构建器类本身
            transform: 调用方提供的变换函数，例如 lambda q: q.term("status", "error")

        Returns:
            嵌套构建器的片段文本，transform 为 None 时返回 None
        """
        if transform is None:
            logger.debug(f"{type(self).__name__} 跳过空的嵌套表达式")
            return None

        nested = factory()
        result = transform(nested)
        if result is None:
            result = nested

        if not isinstance(result, CompositeBase):
            return str(result)

        if result.is_empty():
            logger.warning(f"{type(self).__name__} 注册了空的 {type(result).__name__} 子句")
        return result.render()

    def register_nested(
        self,
        factory: Callable[[], BuilderT],
        transform: Transform[BuilderT] | None,
    ) -> None:
        """
        注册嵌套构建器.

        渲染规则见 render_nested，渲染结果按 register_fragment 的规则注册。
        """
        self.register_fragment(self.render_nested(factory, transform))

    def is_empty(self) -> bool:
        """是否尚未注册任何片段."""
        return not self._fragments

    def render(self) -> Fragment:
        """
        渲染当前构建器.

        用分隔符按注册顺序拼接所有片段，并代入模板的占位符。
        渲染不修改状态，可以多次调用。

        Returns:
            当前构建器的片段文本（仍使用单引号约定）

        Raises:
            TemplateError: 模板占位符不合法时抛出
        """
        validate_template(self.TEMPLATE, type(self).__name__)
        joined = TemplateCharacters.SEPARATOR.join(self._fragments)
        return self.TEMPLATE.replace(TemplateCharacters.PLACEHOLDER, joined)

    def to_json(self) -> Fragment:
        """render 的别名."""
        return self.render()

    def clear(self):
        """清空所有已注册片段."""
        self._fragments.clear()
        return self

    def __str__(self) -> str:
        return alt_quote(self.render())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"
