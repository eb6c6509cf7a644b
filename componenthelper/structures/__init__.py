"""
组件结构

提供行组件以及按钮、选择菜单、文本输入三种消息组件。
"""

from .action_row import ActionRow
from .button import Button
from .component import Component
from .select_menu import SelectMenu, SelectMenuOption
from .text_input import TextInput

__all__ = [
    'ActionRow',
    'Button',
    'Component',
    'SelectMenu',
    'SelectMenuOption',
    'TextInput'
]
