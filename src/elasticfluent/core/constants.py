"""elasticfluent 常量定义模块."""


class TemplateCharacters:
    """模板相关字符常量."""

    # 模板中唯一的占位符
    PLACEHOLDER = "{0}"

    # 占位符匹配模式，{0} {1} ...
    PLACEHOLDER_PATTERN = r"\{(\d+)\}"

    # 片段之间的分隔符
    SEPARATOR = ","

    # 简化引号约定：用单引号代替双引号
    ALT_QUOTE = "'"
    QUOTE = '"'


class JsonStructure:
    """JSON 结构字符常量."""

    OPEN_OBJECT = "{"
    CLOSE_OBJECT = "}"
    OPEN_ARRAY = "["
    CLOSE_ARRAY = "]"
    COMMA = ","
    COLON = ":"
    ESCAPE = "\\"

    # 闭合字符到对应开启字符的映射
    PAIRS = {CLOSE_OBJECT: OPEN_OBJECT, CLOSE_ARRAY: OPEN_ARRAY}

    # 所有结构字符
    STRUCTURAL = "{}[],:"
