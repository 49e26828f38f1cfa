"""
elasticfluent 工具函数模块

提供引号转换、模板格式化、值渲染和 JSON 美化等文本处理函数
"""

import json
import re
from enum import Enum
from typing import Any

from elasticfluent.core.config import FormatConfig
from elasticfluent.core.constants import JsonStructure, TemplateCharacters
from elasticfluent.exceptions import BeautifyError, TemplateError

_PLACEHOLDER_RE = re.compile(TemplateCharacters.PLACEHOLDER_PATTERN)


def alt_quote(text: str) -> str:
    """
    将简化引号约定转换为 JSON 双引号。

    每个单引号都会被替换为双引号，不支持在值中保留字面单引号。
    转换是幂等的，多次调用结果相同。

    示例:
        >>> alt_quote("{ 'size': 10 }")
        '{ "size": 10 }'
    """
    return text.replace(TemplateCharacters.ALT_QUOTE, TemplateCharacters.QUOTE)


def as_string(value: Any) -> str:
    """
    将格式化参数转换为规范文本。

    布尔值输出为小写 true/false，None 输出为 null，枚举取其值，
    浮点数按 JSON 数字输出，其他类型使用默认的文本形式。

    Raises:
        ValueError: 浮点数为 inf 或 nan 时抛出，二者不是合法 JSON
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return as_string(value.value)
    if isinstance(value, float):
        return json_value(value)
    return str(value)


def json_value(value: Any) -> str:
    """
    将叶子方法接收的值渲染为 JSON 字面量。

    字符串中的单引号会被转义为 \\u0027，保证后续的引号转换不会破坏字符串内容。

    示例:
        >>> json_value("O'Neil")
        '"O\\\\u0027Neil"'
        >>> json_value([1, 2])
        '[1, 2]'
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, tuple):
        value = list(value)
    rendered = json.dumps(value, ensure_ascii=False, allow_nan=False)
    return rendered.replace(TemplateCharacters.ALT_QUOTE, "\\u0027")


def smart_quote_format(template: str, *args: Any) -> str:
    """
    按位置格式化模板并转换引号。

    先对模板做引号转换，再将 {0}、{1} ... 替换为对应参数的规范文本，
    参数本身不参与引号转换。模板中其他花括号均按字面保留，无需转义。
    不带参数时模板中也不能出现 {n} 占位符。

    示例:
        >>> smart_quote_format(" 'size': {0}", 10)
        ' "size": 10'
        >>> smart_quote_format("{ 'track_scores': {0} }", True)
        '{ "track_scores": true }'

    Args:
        template: 使用单引号约定的模板
        *args: 位置参数

    Returns:
        格式化后的文本

    Raises:
        TemplateError: 模板中的占位符没有对应参数时抛出
    """
    quoted = alt_quote(template)

    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index >= len(args):
            raise TemplateError(
                f"模板占位符 {{{index}}} 缺少参数，共提供 {len(args)} 个参数: {template!r}"
            )
        return as_string(args[index])

    return _PLACEHOLDER_RE.sub(replace, quoted)


def count_placeholders(template: str) -> list[str]:
    """返回模板中出现的所有占位符."""
    return [match.group(0) for match in _PLACEHOLDER_RE.finditer(template)]


def _scan_string(text: str, start: int) -> int:
    """从 start 处的双引号开始扫描字符串字面量，返回闭合引号之后的位置."""
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == JsonStructure.ESCAPE:
            i += 2
            continue
        if ch == TemplateCharacters.QUOTE:
            return i + 1
        i += 1
    raise BeautifyError(f"字符串未闭合，起始位置: {start}")


def _skip_whitespace(text: str, start: int) -> int:
    """返回 start 之后第一个非空白字符的位置."""
    while start < len(text) and text[start].isspace():
        start += 1
    return start


def beautify_json(text: str, config: FormatConfig | None = None) -> str:
    """
    将紧凑的单行 JSON 美化为缩进的多行文本。

    只在结构字符周围插入空白，字符串字面量中的内容（包括其中的结构字符）保持不变。
    结构字符之外的多余空白会被折叠，两个相邻的裸词之间保留一个空格。

    示例:
        >>> print(beautify_json('{ "query": { "match_all": {} },"size": 10 }'))
        {
          "query": {
            "match_all": {}
          },
          "size": 10
        }

    Args:
        text: 紧凑 JSON 文本
        config: 格式化配置，默认使用 FormatConfig 的默认值

    Returns:
        美化后的 JSON 文本

    Raises:
        BeautifyError: 结构字符不平衡或字符串未闭合时抛出
    """
    config = config or FormatConfig()
    unit = config.indent_unit
    output: list[str] = []
    stack: list[str] = []
    pending_space = False

    def new_line() -> None:
        output.append(config.newline + unit * len(stack))

    def needs_space() -> bool:
        # 仅在两个裸词之间补一个空格
        if not pending_space or not output:
            return False
        last = output[-1][-1:]
        return bool(last) and not last.isspace() and last not in JsonStructure.STRUCTURAL

    i = 0
    while i < len(text):
        ch = text[i]

        if ch == TemplateCharacters.QUOTE:
            end = _scan_string(text, i)
            if needs_space():
                output.append(" ")
            output.append(text[i:end])
            pending_space = False
            i = end
            continue

        if ch.isspace():
            pending_space = True
            i += 1
            continue

        if ch in (JsonStructure.OPEN_OBJECT, JsonStructure.OPEN_ARRAY):
            close = (
                JsonStructure.CLOSE_OBJECT
                if ch == JsonStructure.OPEN_OBJECT
                else JsonStructure.CLOSE_ARRAY
            )
            following = _skip_whitespace(text, i + 1)
            if following < len(text) and text[following] == close:
                # 空容器直接输出
                output.append(ch + close)
                i = following + 1
                pending_space = False
                continue
            stack.append(ch)
            output.append(ch)
            new_line()
        elif ch in JsonStructure.PAIRS:
            if not stack or stack[-1] != JsonStructure.PAIRS[ch]:
                raise BeautifyError(f"结构字符 {ch!r} 不匹配，位置: {i}")
            stack.pop()
            new_line()
            output.append(ch)
        elif ch == JsonStructure.COMMA:
            output.append(ch)
            new_line()
        elif ch == JsonStructure.COLON:
            output.append(config.key_value_separator)
        else:
            if needs_space():
                output.append(" ")
            output.append(ch)

        pending_space = False
        i += 1

    if stack:
        raise BeautifyError(f"存在 {len(stack)} 个未闭合的结构字符: {''.join(stack)}")

    return "".join(output)
