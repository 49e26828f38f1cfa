"""IndexSettingsBuilder 单元测试."""

from elasticfluent import IndexSettingsBuilder


class TestIndexSettingsBuilder:
    """IndexSettingsBuilder 测试类."""

    def test_defaults(self):
        """测试默认值."""
        builder = IndexSettingsBuilder().number_of_shards().number_of_replicas().refresh_interval()
        assert builder.build() == (
            '{  "number_of_shards": 1, "number_of_replicas": 1, "refresh_interval": "1s" }'
        )

    def test_with_analysis(self):
        """测试包含 analysis 段的索引设置."""
        builder = (
            IndexSettingsBuilder()
            .number_of_shards(3)
            .number_of_replicas()
            .analysis(
                lambda a: a.analyzer(
                    lambda an: an.custom("lower_kw", tokenizer="keyword", filters=["lowercase"])
                )
            )
        )
        assert builder.to_dict() == {
            "number_of_shards": 3,
            "number_of_replicas": 1,
            "analysis": {
                "analyzer": {
                    "lower_kw": {
                        "type": "custom",
                        "tokenizer": "keyword",
                        "filter": ["lowercase"],
                    }
                }
            },
        }

    def test_custom(self):
        """测试自定义片段."""
        builder = IndexSettingsBuilder().custom("'max_result_window': {0}", 50000)
        assert builder.to_dict() == {"max_result_window": 50000}

    def test_str_is_beautified(self):
        """测试字符串形式为美化输出."""
        builder = IndexSettingsBuilder().number_of_shards(2)
        assert str(builder) == '{\n  "number_of_shards": 2\n}'
