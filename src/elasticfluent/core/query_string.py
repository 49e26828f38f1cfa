"""Query String 校验模块."""

from luqum.exceptions import ParseError
from luqum.parser import lexer, parser

from elasticfluent.exceptions import QueryStringParseError


def validate_query_string(query_string: str) -> str:
    """
    校验 Lucene Query String 语法.

    基于 luqum 解析语法树，解析失败时抛出异常，避免把非法语法写入查询文档。

    示例:
        >>> validate_query_string("  status: error AND level: 3 ")
        'status: error AND level: 3'

    Args:
        query_string: 原始 Query String

    Returns:
        去掉首尾空白后的 Query String

    Raises:
        QueryStringParseError: 解析失败时抛出
    """
    query_string = query_string.strip()
    if query_string == "*":
        return query_string

    try:
        parser.parse(query_string, lexer=lexer)
    except ParseError as e:
        raise QueryStringParseError(f"Failed to parse query string: {e}") from e

    return query_string
