"""查询文档构建器模块."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from elasticsearch.dsl import Search

from elasticfluent.builders.clauses import Filter, Query, Sort
from elasticfluent.core.document import DocumentBuilder
from elasticfluent.core.utils import json_value, smart_quote_format
from elasticfluent.typing import Transform

T = TypeVar("T")


class QueryBuilder(DocumentBuilder, Generic[T]):
    """
    ES 查询文档构建器.

    通过链式调用逐段组装完整的查询请求体，支持:
    - 查询 (query) 与过滤 (filter)
    - 分页 (from/size)
    - 排序 (sort) 与评分跟踪 (track_scores)
    - 自定义片段 (custom)，可以使用 ' 代替 " 书写模板

    使用示例:
        builder = (
            QueryBuilder()
            .query(lambda q: q.term("status", "error"))
            .sort(lambda s: s.field("create_time", SortOrder.DESC))
            .from_(20)
            .size(20)
        )

        builder.build()
        # {  "query": { "term": { "status": "error" } }, "sort": [ ... ], "from": 20, "size": 20 }

        print(builder)  # 美化后的 JSON

        search = builder.to_search(index="alerts")
        result = search.execute()
    """

    def query(self, query: Transform[Query[T]] | None) -> QueryBuilder[T]:
        """
        设置查询.

        Args:
            query: 作用于全新 Query 构建器的变换函数

        Returns:
            self，支持链式调用
        """
        self.register_nested(Query, query)
        return self

    def filter(self, filter_: Transform[Filter[T]] | None) -> QueryBuilder[T]:  # noqa: A003
        """
        设置过滤.

        Args:
            filter_: 作用于全新 Filter 构建器的变换函数

        Returns:
            self，支持链式调用
        """
        self.register_nested(Filter, filter_)
        return self

    def from_(self, from_: int = 0) -> QueryBuilder[T]:
        """返回结果的起始位置，默认 0."""
        self.register_fragment(smart_quote_format(" 'from': {0}", from_))
        return self

    def size(self, size: int = 10) -> QueryBuilder[T]:
        """返回结果的数量，默认 10."""
        self.register_fragment(smart_quote_format(" 'size': {0}", size))
        return self

    def track_scores(self, track_scores: bool = False) -> QueryBuilder[T]:
        """
        按字段排序时是否仍然计算评分.

        Args:
            track_scores: 是否跟踪评分，默认 False

        Returns:
            self，支持链式调用
        """
        self.register_fragment(smart_quote_format(" 'track_scores': {0}", track_scores))
        return self

    def sort(self, sort: Transform[Sort[T]] | None) -> QueryBuilder[T]:
        """
        设置排序.

        示例:
            builder.sort(lambda s: s.field("create_time", SortOrder.DESC).score())
        """
        self.register_nested(Sort, sort)
        return self

    def fields(self, *fields: str) -> QueryBuilder[T]:
        """返回的字段列表."""
        self.register_fragment(smart_quote_format(" 'fields': {0}", json_value(list(fields))))
        return self

    def explain(self, explain: bool = True) -> QueryBuilder[T]:
        """是否返回评分解释."""
        self.register_fragment(smart_quote_format(" 'explain': {0}", explain))
        return self

    def min_score(self, min_score: float) -> QueryBuilder[T]:
        """最低评分，低于该评分的文档不返回."""
        self.register_fragment(smart_quote_format(" 'min_score': {0}", min_score))
        return self

    def version(self, version: bool = True) -> QueryBuilder[T]:
        """是否返回文档版本号."""
        self.register_fragment(smart_quote_format(" 'version': {0}", version))
        return self

    def custom(self, custom_format: str, *args: Any) -> QueryBuilder[T]:
        """
        添加自定义片段.

        可以使用 ' 代替 " 简化模板书写，{0}、{1} ... 按位置替换为参数。

        示例:
            builder.custom("'highlight': { 'fields': { {0}: {} } }", '"message"')
        """
        self.register_fragment(smart_quote_format(custom_format, *args))
        return self

    def to_search(self, index: str | list[str] | None = None, using: Any = None) -> Search:
        """
        转换为 elasticsearch.dsl.Search 对象.

        Args:
            index: 索引名称
            using: ES 客户端或连接别名，默认使用 "default" 连接

        Returns:
            elasticsearch.dsl.Search 对象

        Raises:
            JsonRenderError: 构建结果不是合法 JSON 时抛出
        """
        kwargs: dict[str, Any] = {"index": index}
        if using is not None:
            kwargs["using"] = using
        search = Search(**kwargs)
        return search.update_from_dict(self.to_dict())
