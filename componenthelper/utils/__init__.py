"""
工具模块

提供常量表、表情转换、配置管理和日志设置。
"""

from .constants import (
    BUTTON_COLORS,
    BUTTON_STYLES,
    COMPONENT_TYPES,
    DEFAULT_ROW_MAX,
    TEXT_INPUT_STYLES,
    ButtonStyle,
    ComponentType,
    TextInputStyle
)
from .emoji import emoji_to_partial, normalize_emoji, parse_custom_emoji, partial_from_discord

__all__ = [
    'BUTTON_COLORS',
    'BUTTON_STYLES',
    'COMPONENT_TYPES',
    'DEFAULT_ROW_MAX',
    'TEXT_INPUT_STYLES',
    'ButtonStyle',
    'ComponentType',
    'TextInputStyle',
    'emoji_to_partial',
    'normalize_emoji',
    'parse_custom_emoji',
    'partial_from_discord'
]
