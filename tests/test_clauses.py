"""查询子句构建器单元测试."""

import pytest

from elasticfluent import (
    CompositeBase,
    Filter,
    MatchOperator,
    Query,
    QueryBuilder,
    QueryStringParseError,
    Sort,
    SortOrder,
)
from elasticfluent.builders.clauses import _QueryClauses


class TestQuery:
    """Query 构建器测试类."""

    def test_term(self):
        """测试 term 查询."""
        assert str(Query().term("status", "error")) == '"query": { "term": { "status": "error" } }'

    def test_term_with_boost(self):
        """测试带权重的 term 查询."""
        result = str(Query().term("level", 3, boost=2.0))
        assert result == '"query": { "term": { "level": { "value": 3,"boost": 2.0 } } }'

    def test_terms(self):
        """测试 terms 查询."""
        result = str(Query().terms("status", ["error", "warning"]))
        assert result == '"query": { "terms": { "status": ["error", "warning"] } }'

    def test_range(self):
        """测试 range 查询."""
        result = str(Query().range("level", gte=1, lt=5))
        assert result == '"query": { "range": { "level": { "gte": 1,"lt": 5 } } }'

    def test_range_without_bounds(self):
        """测试没有边界的 range 查询被忽略."""
        assert Query().range("level").is_empty()

    def test_exists(self):
        """测试 exists 查询."""
        assert str(Query().exists("host")) == '"query": { "exists": { "field": "host" } }'

    def test_match(self):
        """测试 match 查询."""
        result = str(Query().match("message", "time out", operator=MatchOperator.AND))
        assert result == (
            '"query": { "match": { "message": { "query": "time out","operator": "and" } } }'
        )

    def test_match_invalid_operator(self):
        """测试 match 查询使用非法操作符."""
        with pytest.raises(ValueError):
            Query().match("message", "timeout", operator="xor")

    def test_match_all(self):
        """测试 match_all 查询."""
        assert str(Query().match_all()) == '"query": { "match_all": {} }'
        assert str(Query().match_all(boost=1.2)) == '"query": { "match_all": { "boost": 1.2 } }'

    def test_query_string(self):
        """测试 query_string 查询."""
        result = str(Query().query_string(" status: error ", default_field="message"))
        assert result == (
            '"query": { "query_string": { "query": "status: error","default_field": "message" } }'
        )

    def test_query_string_default_operator(self):
        """测试 query_string 默认逻辑关系."""
        result = str(Query().query_string("error timeout", default_operator="and"))
        assert '"default_operator": "AND"' in result

    def test_query_string_invalid(self):
        """测试非法 query_string."""
        with pytest.raises(QueryStringParseError):
            Query().query_string("status: (error")

    def test_query_string_empty(self):
        """测试空 query_string 被忽略."""
        assert Query().query_string(None).query_string("  ").is_empty()

    def test_custom(self):
        """测试自定义子句."""
        result = str(Query().custom("'wildcard': { {0}: {1} }", '"host"', '"web-*"'))
        assert result == '"query": { "wildcard": { "host": "web-*" } }'

    def test_clause_builder_requires_add_clause(self):
        """测试未实现 _add_clause 的子句构建器不能实例化."""
        incomplete = type(
            "Incomplete", (_QueryClauses, CompositeBase), {"TEMPLATE": "{ {0} }"}
        )
        with pytest.raises(TypeError):
            incomplete()


class TestBool:
    """Bool 构建器测试类."""

    def test_bool_query(self):
        """测试 bool 组合查询."""
        builder = QueryBuilder().query(
            lambda q: q.bool_(
                lambda b: b.must(lambda m: m.term("status", "error").exists("host"))
                .must_not(lambda m: m.term("level", 1))
                .minimum_should_match(1)
            )
        )
        assert builder.to_dict() == {
            "query": {
                "bool": {
                    "must": [
                        {"term": {"status": "error"}},
                        {"exists": {"field": "host"}},
                    ],
                    "must_not": [{"term": {"level": 1}}],
                    "minimum_should_match": 1,
                }
            }
        }

    def test_should_and_filter(self):
        """测试 should 与 filter 子句列表."""
        builder = QueryBuilder().query(
            lambda q: q.bool_(
                lambda b: b.should(lambda s: s.match("message", "timeout").match("message", "refused"))
                .filter(lambda f: f.range("level", gte=3))
                .boost(2)
            )
        )
        assert builder.to_dict() == {
            "query": {
                "bool": {
                    "should": [
                        {"match": {"message": {"query": "timeout"}}},
                        {"match": {"message": {"query": "refused"}}},
                    ],
                    "filter": [{"range": {"level": {"gte": 3}}}],
                    "boost": 2,
                }
            }
        }

    def test_nested_bool(self):
        """测试 bool 子句中嵌套 bool."""
        builder = QueryBuilder().query(
            lambda q: q.bool_(
                lambda b: b.must(
                    lambda m: m.bool_(lambda inner: inner.should(lambda s: s.term("a", 1)))
                )
            )
        )
        assert builder.to_dict() == {
            "query": {"bool": {"must": [{"bool": {"should": [{"term": {"a": 1}}]}}]}}
        }

    def test_bool_none_transform(self):
        """测试 bool_ 变换函数为 None."""
        assert Query().bool_(None).is_empty()

    def test_filter_bool(self):
        """测试 filter 中的 bool 查询."""
        result = str(Filter().bool_(lambda b: b.must(lambda m: m.term("a", 1))))
        assert result == '"filter": { "bool": { "must": [ { "term": { "a": 1 } } ] } }'


class TestSort:
    """Sort 构建器测试类."""

    def test_field_default_order(self):
        """测试默认升序."""
        assert str(Sort().field("price")) == '"sort": [ { "price": { "order": "asc" } } ]'

    def test_field_with_missing(self):
        """测试缺失值位置."""
        result = str(Sort().field("price", SortOrder.DESC, missing="_last"))
        assert result == '"sort": [ { "price": { "order": "desc","missing": "_last" } } ]'

    def test_multiple_sorts(self):
        """测试多个排序字段."""
        result = str(Sort().field("a").score(SortOrder.ASC))
        assert result == '"sort": [ { "a": { "order": "asc" } },{ "_score": { "order": "asc" } } ]'

    def test_invalid_order(self):
        """测试非法排序方向."""
        with pytest.raises(ValueError):
            Sort().field("price", "up")

    def test_custom(self):
        """测试自定义排序片段."""
        result = str(Sort().custom("{ '_geo_distance': { 'unit': 'km' } }"))
        assert result == '"sort": [ { "_geo_distance": { "unit": "km" } } ]'
