"""
组件常量表

Discord 组件的类型代码与样式代码直接取自 discord.py 的枚举，
同时提供与线上格式一一对应的纯整数映射表。
"""

from typing import Dict, Union
import discord

ComponentType = discord.ComponentType
ButtonStyle = discord.ButtonStyle
TextInputStyle = discord.TextStyle

# 名称 -> 线上代码
COMPONENT_TYPES: Dict[str, int] = {
    'ACTION_ROW': ComponentType.action_row.value,
    'BUTTON': ComponentType.button.value,
    'SELECT_MENU': ComponentType.select.value,
    'TEXT_INPUT': ComponentType.text_input.value,
}

BUTTON_STYLES: Dict[str, int] = {
    'PRIMARY': ButtonStyle.primary.value,
    'SECONDARY': ButtonStyle.secondary.value,
    'SUCCESS': ButtonStyle.success.value,
    'DANGER': ButtonStyle.danger.value,
    'LINK': ButtonStyle.link.value,
}

# 按颜色命名的按钮样式别名
BUTTON_COLORS: Dict[str, int] = {
    'BLURPLE': ButtonStyle.blurple.value,
    'GREY': ButtonStyle.grey.value,
    'GREEN': ButtonStyle.green.value,
    'RED': ButtonStyle.red.value,
    'URL': ButtonStyle.url.value,
}

TEXT_INPUT_STYLES: Dict[str, int] = {
    'SHORT': TextInputStyle.short.value,
    'PARAGRAPH': TextInputStyle.paragraph.value,
}

ROW_MAX_RANGE = range(1, 6)
DEFAULT_ROW_MAX = 5


def resolve_button_style(style: Union[ButtonStyle, int]) -> ButtonStyle:
    """
    将整数代码或枚举成员统一转换为按钮样式枚举

    Args:
        style: 按钮样式枚举成员或线上代码 (1-5)

    Returns:
        按钮样式枚举成员

    Raises:
        ValueError: 未知的样式代码
    """
    if isinstance(style, ButtonStyle):
        return style
    return ButtonStyle(style)


def resolve_text_input_style(style: Union[TextInputStyle, int]) -> TextInputStyle:
    """将整数代码或枚举成员统一转换为文本输入样式枚举"""
    if isinstance(style, TextInputStyle):
        return style
    return TextInputStyle(style)


def is_valid_row_max(row_max) -> bool:
    """行容量必须是 1-5 的整数（不接受 bool 和浮点数）"""
    return isinstance(row_max, int) and not isinstance(row_max, bool) and row_max in ROW_MAX_RANGE
