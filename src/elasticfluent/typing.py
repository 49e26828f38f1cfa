"""elasticfluent 类型定义模块."""

from collections.abc import Callable
from typing import Any, TypeVar

# 渲染后的 JSON 片段
Fragment = str

# 嵌套构建器类型
BuilderT = TypeVar("BuilderT")

# 调用方传入的嵌套构建器变换函数
# 接收一个全新的嵌套构建器，返回（可能继续链式调用后的）同类型构建器
Transform = Callable[[BuilderT], BuilderT | None]

# 叶子方法接受的 JSON 值
JsonValue = Any
