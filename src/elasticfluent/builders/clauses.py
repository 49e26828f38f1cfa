"""查询子句构建器模块.

提供 Query、Filter、Bool、Sort 等叶子构建器，均基于 CompositeBase 的片段注册协议。
泛型参数 T 只用于类型检查，标识查询针对的文档类型，不影响运行时行为。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from elasticfluent.core.composite import CompositeBase
from elasticfluent.core.operators import MatchOperator, RangeOperator, SortOrder
from elasticfluent.core.query_string import validate_query_string
from elasticfluent.core.utils import json_value, smart_quote_format
from elasticfluent.typing import Transform

logger = logging.getLogger(__name__)

T = TypeVar("T")
ClauseT = TypeVar("ClauseT", bound="_FilterClauses")


class _FilterClauses(ABC):
    """过滤类子句方法，Query、Filter 和 bool 子句列表共用."""

    @abstractmethod
    def _add_clause(self, clause: str) -> None:
        """注册单个子句，由具体构建器决定包裹形式."""

    def term(self: ClauseT, field: str, value: Any, boost: float | None = None) -> ClauseT:
        """
        精确匹配单个值.

        Args:
            field: 字段名
            value: 匹配值
            boost: 权重

        Returns:
            self，支持链式调用
        """
        if boost is None:
            clause = smart_quote_format(
                "'term': { {0}: {1} }", json_value(field), json_value(value)
            )
        else:
            clause = smart_quote_format(
                "'term': { {0}: { 'value': {1},'boost': {2} } }",
                json_value(field),
                json_value(value),
                boost,
            )
        self._add_clause(clause)
        return self

    def terms(self: ClauseT, field: str, values: list[Any]) -> ClauseT:
        """
        精确匹配多个值中的任意一个.

        Args:
            field: 字段名
            values: 匹配值列表

        Returns:
            self，支持链式调用
        """
        clause = smart_quote_format(
            "'terms': { {0}: {1} }", json_value(field), json_value(list(values))
        )
        self._add_clause(clause)
        return self

    def range(  # noqa: A003
        self: ClauseT,
        field: str,
        gt: Any = None,
        gte: Any = None,
        lt: Any = None,
        lte: Any = None,
    ) -> ClauseT:
        """
        范围匹配.

        未提供任何边界时不注册子句。

        Args:
            field: 字段名
            gt: 大于
            gte: 大于等于
            lt: 小于
            lte: 小于等于

        Returns:
            self，支持链式调用
        """
        bounds = [
            smart_quote_format("'{0}': {1}", name, json_value(value))
            for name, value in (
                (RangeOperator.GT, gt),
                (RangeOperator.GTE, gte),
                (RangeOperator.LT, lt),
                (RangeOperator.LTE, lte),
            )
            if value is not None
        ]
        if not bounds:
            logger.debug(f"range 子句 {field} 没有任何边界，已忽略")
            return self

        clause = smart_quote_format(
            "'range': { {0}: { {1} } }", json_value(field), ",".join(bounds)
        )
        self._add_clause(clause)
        return self

    def exists(self: ClauseT, field: str) -> ClauseT:
        """字段存在."""
        self._add_clause(smart_quote_format("'exists': { 'field': {0} }", json_value(field)))
        return self

    def bool_(self: ClauseT, bool_query: Transform[Bool[Any]] | None) -> ClauseT:
        """
        bool 组合查询.

        示例:
            query.bool_(lambda b: b.must(lambda m: m.term("status", "error")))
        """
        clause = self.render_nested(Bool, bool_query)
        if clause is not None:
            self._add_clause(clause)
        return self

    def custom(self: ClauseT, custom_format: str, *args: Any) -> ClauseT:
        """
        添加自定义子句.

        可以使用 ' 代替 " 简化模板书写。
        """
        self._add_clause(smart_quote_format(custom_format, *args))
        return self


class _QueryClauses(_FilterClauses):
    """全文检索类子句方法."""

    def match(
        self: ClauseT,
        field: str,
        query: Any,
        operator: MatchOperator | str | None = None,
    ) -> ClauseT:
        """
        全文匹配.

        Args:
            field: 字段名
            query: 查询文本
            operator: 多个词之间的关系，默认由 ES 决定（or）

        Returns:
            self，支持链式调用
        """
        options = [smart_quote_format("'query': {0}", json_value(query))]
        if operator is not None:
            options.append(
                smart_quote_format("'operator': {0}", json_value(MatchOperator(operator)))
            )
        clause = smart_quote_format(
            "'match': { {0}: { {1} } }", json_value(field), ",".join(options)
        )
        self._add_clause(clause)
        return self

    def match_all(self: ClauseT, boost: float | None = None) -> ClauseT:
        """匹配所有文档."""
        if boost is None:
            self._add_clause(smart_quote_format("'match_all': {}"))
        else:
            self._add_clause(smart_quote_format("'match_all': { 'boost': {0} }", boost))
        return self

    def query_string(
        self: ClauseT,
        query: str | None,
        default_field: str | None = None,
        default_operator: MatchOperator | str | None = None,
    ) -> ClauseT:
        """
        Query String 查询.

        注册前会校验 Lucene 语法，空查询直接忽略。

        Args:
            query: Query String
            default_field: 未指定字段时使用的默认字段
            default_operator: 默认逻辑关系

        Returns:
            self，支持链式调用

        Raises:
            QueryStringParseError: 语法非法时抛出
        """
        if query is None or not query.strip():
            logger.debug("query_string 为空，已忽略")
            return self

        options = [smart_quote_format("'query': {0}", json_value(validate_query_string(query)))]
        if default_field is not None:
            options.append(smart_quote_format("'default_field': {0}", json_value(default_field)))
        if default_operator is not None:
            options.append(
                smart_quote_format(
                    "'default_operator': {0}",
                    json_value(MatchOperator(default_operator).value.upper()),
                )
            )
        self._add_clause(smart_quote_format("'query_string': { {0} }", ",".join(options)))
        return self


class Query(_QueryClauses, CompositeBase, Generic[T]):
    """
    query 子句构建器.

    示例:
        Query().term("status", "error")
        # 'query': { 'term': { "status": "error" } }
    """

    TEMPLATE = "'query': { {0} }"

    def _add_clause(self, clause: str) -> None:
        self.register_fragment(clause)


class Filter(_FilterClauses, CompositeBase, Generic[T]):
    """filter 子句构建器."""

    TEMPLATE = "'filter': { {0} }"

    def _add_clause(self, clause: str) -> None:
        self.register_fragment(clause)


class _ClauseList(_QueryClauses, CompositeBase, Generic[T]):
    """bool 查询中的子句列表，每个子句单独包裹为一个对象."""

    def _add_clause(self, clause: str) -> None:
        self.register_fragment("{ " + clause + " }")


class Must(_ClauseList[T]):
    """must 子句列表."""

    TEMPLATE = "'must': [ {0} ]"


class Should(_ClauseList[T]):
    """should 子句列表."""

    TEMPLATE = "'should': [ {0} ]"


class MustNot(_ClauseList[T]):
    """must_not 子句列表."""

    TEMPLATE = "'must_not': [ {0} ]"


class BoolFilter(_ClauseList[T]):
    """bool 查询中的 filter 子句列表."""

    TEMPLATE = "'filter': [ {0} ]"


class Bool(CompositeBase, Generic[T]):
    """
    bool 组合查询构建器.

    示例:
        Bool().must(lambda m: m.term("status", "error")).should(
            lambda s: s.match("message", "timeout")
        )
    """

    TEMPLATE = "'bool': { {0} }"

    def must(self, must: Transform[Must[T]] | None) -> Bool[T]:
        """所有子句都必须匹配."""
        self.register_nested(Must, must)
        return self

    def should(self, should: Transform[Should[T]] | None) -> Bool[T]:
        """至少匹配一个子句."""
        self.register_nested(Should, should)
        return self

    def must_not(self, must_not: Transform[MustNot[T]] | None) -> Bool[T]:
        """所有子句都不能匹配."""
        self.register_nested(MustNot, must_not)
        return self

    def filter(self, bool_filter: Transform[BoolFilter[T]] | None) -> Bool[T]:  # noqa: A003
        """过滤上下文中的子句，不参与评分."""
        self.register_nested(BoolFilter, bool_filter)
        return self

    def minimum_should_match(self, value: int | str) -> Bool[T]:
        """should 子句最少匹配数量，可以是整数或百分比字符串."""
        self.register_fragment(
            smart_quote_format("'minimum_should_match': {0}", json_value(value))
        )
        return self

    def boost(self, boost: float = 1.0) -> Bool[T]:
        """权重."""
        self.register_fragment(smart_quote_format("'boost': {0}", boost))
        return self

    def custom(self, custom_format: str, *args: Any) -> Bool[T]:
        """添加自定义片段."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self


class Sort(CompositeBase, Generic[T]):
    """
    sort 子句构建器.

    示例:
        Sort().field("create_time", SortOrder.DESC).score()
        # 'sort': [ { "create_time": { "order": "desc" } },{ "_score": { "order": "desc" } } ]
    """

    TEMPLATE = "'sort': [ {0} ]"

    def field(
        self,
        field: str,
        order: SortOrder | str = SortOrder.ASC,
        missing: Any = None,
    ) -> Sort[T]:
        """
        按字段排序.

        Args:
            field: 字段名
            order: 排序方向，默认升序
            missing: 缺失值的排序位置，如 "_last"、"_first" 或具体值

        Returns:
            self，支持链式调用
        """
        options = [smart_quote_format("'order': {0}", json_value(SortOrder(order)))]
        if missing is not None:
            options.append(smart_quote_format("'missing': {0}", json_value(missing)))
        self.register_fragment(
            smart_quote_format("{ {0}: { {1} } }", json_value(field), ",".join(options))
        )
        return self

    def score(self, order: SortOrder | str = SortOrder.DESC) -> Sort[T]:
        """按相关性评分排序，默认降序."""
        self.register_fragment(
            smart_quote_format("{ '_score': { 'order': {0} } }", json_value(SortOrder(order)))
        )
        return self

    def custom(self, custom_format: str, *args: Any) -> Sort[T]:
        """添加自定义排序片段."""
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self
