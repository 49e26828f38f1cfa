"""elasticfluent 操作符定义模块."""

from enum import Enum


class SortOrder(str, Enum):
    """排序方向."""

    ASC = "asc"
    DESC = "desc"


class MatchOperator(str, Enum):
    """match 查询中多个词之间的关系."""

    OR = "or"
    AND = "and"


class RangeOperator(str, Enum):
    """range 查询支持的比较操作符."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

