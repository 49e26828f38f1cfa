"""JSON 美化单元测试."""

import json

import pytest

from elasticfluent import BeautifyError, FormatConfig, QueryBuilder, SortOrder
from elasticfluent.core.utils import beautify_json


def _strip_insignificant(text: str) -> str:
    """去掉字符串字面量之外的所有空白."""
    result = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            result.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            result.append(ch)
        elif not ch.isspace():
            result.append(ch)
    return "".join(result)


class TestBeautifyJson:
    """beautify_json 测试类."""

    def test_nested_structure(self):
        """测试对象与数组的缩进."""
        result = beautify_json('{"a":1,"b":[1,2]}')
        assert result == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'

    def test_existing_whitespace_collapsed(self):
        """测试原有空白被折叠."""
        assert beautify_json('{  "size": 10 }') == '{\n  "size": 10\n}'

    def test_empty_containers(self):
        """测试空容器."""
        assert beautify_json('{ "q": {  },"l": [] }') == '{\n  "q": {},\n  "l": []\n}'

    def test_structural_chars_inside_strings(self):
        """测试字符串中的结构字符不被当作文档结构."""
        result = beautify_json('{"a":"x,{y}:[z]"}')
        assert result == '{\n  "a": "x,{y}:[z]"\n}'

    def test_escaped_quotes_inside_strings(self):
        """测试字符串中的转义双引号."""
        text = '{"a":"say \\"hi\\", {ok}"}'
        result = beautify_json(text)
        assert result == '{\n  "a": "say \\"hi\\", {ok}"\n}'
        assert json.loads(result) == json.loads(text)

    def test_bare_tokens_keep_single_space(self):
        """测试相邻裸词之间保留一个空格."""
        assert beautify_json("{ Analyzers   Foo }") == "{\n  Analyzers Foo\n}"

    def test_custom_indent(self):
        """测试自定义缩进."""
        result = beautify_json('{"a":{"b":1}}', FormatConfig(indent=4))
        assert result == '{\n    "a": {\n        "b": 1\n    }\n}'

    def test_tab_indent_and_compact_separator(self):
        """测试制表符缩进与紧凑键值分隔符."""
        config = FormatConfig(indent=1, indent_char="\t", key_value_separator=":")
        assert beautify_json('{"a":1}', config) == '{\n\t"a":1\n}'

    def test_semantics_preserved(self):
        """测试美化不改变语义."""
        text = '{"query":{"bool":{"must":[{"term":{"s":"a:b"}}]}},"size":0}'
        assert json.loads(beautify_json(text)) == json.loads(text)

    def test_only_whitespace_inserted(self):
        """测试去掉空白后与构建结果一致."""
        builder = (
            QueryBuilder()
            .query(lambda q: q.bool_(lambda b: b.must(lambda m: m.term("msg", "a, b: {c}"))))
            .sort(lambda s: s.field("create_time", SortOrder.DESC))
            .from_()
            .size()
        )
        compact = builder.build()
        assert _strip_insignificant(beautify_json(compact)) == _strip_insignificant(compact)

    @pytest.mark.parametrize(
        "text",
        [
            '{"a":1',
            '{"a":1]',
            '"abc',
            "}",
            '[{"a":1}',
        ],
    )
    def test_unbalanced_input(self, text):
        """测试结构不平衡的输入."""
        with pytest.raises(BeautifyError):
            beautify_json(text)
