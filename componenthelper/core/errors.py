"""
组件构建错误定义

提供统一的异常分类：
- 行容量错误
- 必填字段缺失
- 表情解析失败（可恢复，仅在内部使用）
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举"""
    CAPACITY_ERROR = "capacity"            # 行容量超出范围
    MISSING_FIELD_ERROR = "missing_field"  # 序列化时缺少必填字段
    EMOJI_PARSE_ERROR = "emoji_parse"      # 自定义表情解析失败


class ComponentHelperError(Exception):
    """组件构建异常基类"""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        recoverable: bool = False,
        **context
    ):
        """
        初始化自定义异常

        Args:
            message: 错误消息
            category: 错误分类
            recoverable: 是否可恢复
            **context: 额外的上下文信息
        """
        super().__init__(message)
        self.category = category
        self.recoverable = recoverable
        self.context = context


class InvalidCapacityError(ComponentHelperError):
    """行容量不在 1-5 范围内"""

    def __init__(self, row_max, **context):
        super().__init__(
            f"行容量必须在 1 到 5 之间，实际为 {row_max!r}",
            ErrorCategory.CAPACITY_ERROR,
            row_max=row_max,
            **context
        )
        self.row_max = row_max


class MissingRequiredFieldError(ComponentHelperError):
    """组件序列化时缺少必填字段"""

    def __init__(self, component: str, field: str, **context):
        super().__init__(
            f"{component} 缺少必填字段: {field}",
            ErrorCategory.MISSING_FIELD_ERROR,
            component=component,
            field=field,
            **context
        )
        self.component = component
        self.field = field


class EmojiParseError(ComponentHelperError):
    """自定义表情字符串无法解析"""

    def __init__(self, text: str, **context):
        super().__init__(
            f"无法解析自定义表情: {text!r}",
            ErrorCategory.EMOJI_PARSE_ERROR,
            recoverable=True,
            text=text,
            **context
        )
        self.text = text
