"""
componenthelper - Discord 消息组件构建工具

将按钮、选择菜单和文本输入按规则分配到行中，
并导出为 Discord 组件的线上 JSON 格式。
"""

from componenthelper.core.errors import (
    ComponentHelperError,
    EmojiParseError,
    ErrorCategory,
    InvalidCapacityError,
    MissingRequiredFieldError
)
from componenthelper.helper import ComponentHelper
from componenthelper.structures import ActionRow, Button, Component, SelectMenu, SelectMenuOption, TextInput
from componenthelper.utils import constants
from componenthelper.utils.constants import (
    BUTTON_COLORS,
    BUTTON_STYLES,
    COMPONENT_TYPES,
    TEXT_INPUT_STYLES,
    ButtonStyle,
    ComponentType,
    TextInputStyle
)
from componenthelper.utils.emoji import emoji_to_partial

__version__ = "1.0.0"

__all__ = [
    'ActionRow',
    'BUTTON_COLORS',
    'BUTTON_STYLES',
    'Button',
    'ButtonStyle',
    'COMPONENT_TYPES',
    'Component',
    'ComponentHelper',
    'ComponentHelperError',
    'ComponentType',
    'EmojiParseError',
    'ErrorCategory',
    'InvalidCapacityError',
    'MissingRequiredFieldError',
    'SelectMenu',
    'SelectMenuOption',
    'TEXT_INPUT_STYLES',
    'TextInput',
    'TextInputStyle',
    'constants',
    'emoji_to_partial'
]
