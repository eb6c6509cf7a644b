"""
核心基础设施

提供组件构建器的错误分类与异常类型。
"""

from .errors import (
    ComponentHelperError,
    EmojiParseError,
    ErrorCategory,
    InvalidCapacityError,
    MissingRequiredFieldError
)

__all__ = [
    'ComponentHelperError',
    'EmojiParseError',
    'ErrorCategory',
    'InvalidCapacityError',
    'MissingRequiredFieldError'
]
