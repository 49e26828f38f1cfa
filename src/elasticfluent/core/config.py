"""格式化配置模块.

提供 JSON 美化输出的配置模型。
"""

from dataclasses import dataclass

from elasticfluent.exceptions import ConfigError


@dataclass
class FormatConfig:
    """JSON 美化配置模型.

    Attributes:
        indent: 每层缩进的字符个数，默认 2，必须 >= 0
        indent_char: 缩进字符，只能是空格或制表符
        newline: 换行符，只能由空白字符组成
        key_value_separator: 键值分隔符，去掉空白后必须是冒号

    Raises:
        ConfigError: 当参数不合法时抛出

    Examples:
        >>> config = FormatConfig(indent=4)
        >>> builder = QueryBuilder(format_config=config)
    """

    indent: int = 2
    indent_char: str = " "
    newline: str = "\n"
    key_value_separator: str = ": "

    def __post_init__(self) -> None:
        """校验格式化配置参数合法性."""
        if self.indent < 0:
            raise ConfigError(f"indent 必须 >= 0，当前值: {self.indent}")
        if self.indent_char not in (" ", "\t"):
            raise ConfigError(
                f"indent_char 只能是空格或制表符，当前值: {self.indent_char!r}"
            )
        if not self.newline or self.newline.strip():
            raise ConfigError(f"newline 只能由空白字符组成，当前值: {self.newline!r}")
        if self.key_value_separator.strip() != ":":
            raise ConfigError(
                f"key_value_separator 必须只包含冒号和空白，当前值: {self.key_value_separator!r}"
            )

    @property
    def indent_unit(self) -> str:
        """单层缩进字符串."""
        return self.indent_char * self.indent
