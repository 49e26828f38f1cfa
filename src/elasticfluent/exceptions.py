"""elasticfluent 异常定义模块."""


class ElasticFluentError(Exception):
    """elasticfluent 基础异常类."""

    pass


class TemplateError(ElasticFluentError):
    """模板配置异常.

    当构建器模板中 ``{0}`` 占位符缺失或重复，或格式化参数不足时抛出。
    属于叶子构建器的编程错误，而非运行时条件。
    """

    pass


class BeautifyError(ElasticFluentError):
    """JSON 美化异常.

    当输入的结构字符不平衡（括号不匹配、字符串未闭合）时抛出。
    """

    pass


class JsonRenderError(ElasticFluentError):
    """构建结果不是合法 JSON 时抛出."""

    pass


class QueryStringParseError(ElasticFluentError):
    """Query String 解析异常."""

    pass


class ConfigError(ElasticFluentError):
    """格式化配置校验异常."""

    pass
