"""FormatConfig 单元测试."""

import pytest

from elasticfluent import ConfigError, FormatConfig


class TestFormatConfig:
    """FormatConfig 数据模型测试."""

    def test_defaults(self):
        """测试默认值."""
        config = FormatConfig()
        assert config.indent == 2
        assert config.indent_char == " "
        assert config.newline == "\n"
        assert config.key_value_separator == ": "
        assert config.indent_unit == "  "

    def test_tab_indent(self):
        """测试制表符缩进."""
        assert FormatConfig(indent=1, indent_char="\t").indent_unit == "\t"

    def test_zero_indent(self):
        """测试零缩进."""
        assert FormatConfig(indent=0).indent_unit == ""

    def test_negative_indent(self):
        """测试负数缩进."""
        with pytest.raises(ConfigError, match="indent"):
            FormatConfig(indent=-1)

    def test_invalid_indent_char(self):
        """测试非法缩进字符."""
        with pytest.raises(ConfigError, match="indent_char"):
            FormatConfig(indent_char="-")

    @pytest.mark.parametrize("newline", ["", "x", "\nx"])
    def test_invalid_newline(self, newline):
        """测试非法换行符."""
        with pytest.raises(ConfigError, match="newline"):
            FormatConfig(newline=newline)

    @pytest.mark.parametrize("separator", ["=", " : x", ""])
    def test_invalid_key_value_separator(self, separator):
        """测试非法键值分隔符."""
        with pytest.raises(ConfigError, match="key_value_separator"):
            FormatConfig(key_value_separator=separator)
