"""查询文档构建示例.

本示例展示如何使用 elasticfluent 组装查询请求体:
1. 基础查询、排序与分页
2. bool 组合查询
3. 自定义片段与单引号约定
4. 带 analysis 段的索引设置
"""

from elasticfluent import IndexSettingsBuilder, QueryBuilder, SortOrder


# ==================== 示例 1: 基础查询 ====================
def example_basic_query():
    """示例: 查询状态为 error 的告警，按创建时间倒序，每页 20 条."""
    builder = (
        QueryBuilder()
        .query(lambda q: q.term("status", "error"))
        .sort(lambda s: s.field("create_time", SortOrder.DESC))
        .from_(0)
        .size(20)
    )

    print("紧凑输出:")
    print(builder.build())
    print("美化输出:")
    print(builder)


# ==================== 示例 2: bool 组合查询 ====================
def example_bool_query():
    """示例: (status = error AND level >= 3) 且 message 不包含 heartbeat."""
    builder = QueryBuilder().query(
        lambda q: q.bool_(
            lambda b: b.must(lambda m: m.term("status", "error").range("level", gte=3))
            .must_not(lambda m: m.match("message", "heartbeat"))
        )
    )

    print(builder)

    # 转换为 elasticsearch.dsl.Search 后即可执行
    search = builder.to_search(index="alerts")
    print(search.to_dict())


# ==================== 示例 3: 自定义片段 ====================
def example_custom_fragment():
    """示例: 使用单引号约定书写高亮配置."""
    builder = (
        QueryBuilder()
        .query(lambda q: q.query_string("message: timeout AND host: web*"))
        .custom("'highlight': { 'fields': { {0}: {} } }", '"message"')
    )

    print(builder)


# ==================== 示例 4: 索引设置 ====================
def example_index_settings():
    """示例: 定义一个小写关键字分析器."""
    settings = (
        IndexSettingsBuilder()
        .number_of_shards(3)
        .number_of_replicas(1)
        .analysis(
            lambda a: a.analyzer(
                lambda an: an.custom("lower_kw", tokenizer="keyword", filters=["lowercase"])
            ).tokenizer(lambda t: t.ngram("autocomplete", 2, 10, token_chars=["letter"]))
        )
    )

    print(settings)


if __name__ == "__main__":
    # 运行所有示例
    example_basic_query()
    example_bool_query()
    example_custom_fragment()
    example_index_settings()
