"""
选择菜单组件

选择菜单在行内必须独占一行，放置规则由 ComponentHelper 负责。

@see https://discord.com/developers/docs/interactions/message-components#select-menu-object-select-menu-structure
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from componenthelper.core.errors import MissingRequiredFieldError
from componenthelper.structures.component import Component, drop_none
from componenthelper.utils.constants import ComponentType
from componenthelper.utils.emoji import PartialEmojiDict, normalize_emoji


@dataclass
class SelectMenuOption:
    """
    选择菜单选项

    @see https://discord.com/developers/docs/interactions/message-components#select-menu-object-select-option-structure
    """
    label: str                               # 用户可见名称，最长 100 字符
    value: str                               # 开发者定义的值，最长 100 字符
    description: Optional[str] = None        # 附加描述，最长 100 字符
    emoji: Optional[PartialEmojiDict] = None
    default: Optional[bool] = None           # 是否默认选中

    def __post_init__(self):
        self.emoji = normalize_emoji(self.emoji)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectMenuOption":
        """从线上格式的字典创建选项"""
        return cls(
            label=data['label'],
            value=data['value'],
            description=data.get('description'),
            emoji=data.get('emoji'),
            default=data.get('default')
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为线上格式，省略未设置的字段"""
        return drop_none({
            'label': self.label,
            'value': self.value,
            'description': self.description,
            'emoji': dict(self.emoji) if self.emoji is not None else None,
            'default': self.default,
        })


OptionLike = Union[SelectMenuOption, Dict[str, Any]]


class SelectMenu(Component):
    """选择菜单"""

    def __init__(self, custom_id: str):
        """
        创建选择菜单

        Args:
            custom_id: 开发者定义的标识，最长 100 字符
        """
        super().__init__(ComponentType.select)
        self.custom_id = custom_id
        self.options: List[SelectMenuOption] = []
        self.placeholder: Optional[str] = None
        self.min_values: Optional[int] = None
        self.max_values: Optional[int] = None

    def set_custom_id(self, custom_id: str) -> "SelectMenu":
        """设置选择菜单的 custom_id"""
        self.custom_id = custom_id
        return self

    def set_placeholder(self, placeholder: str) -> "SelectMenu":
        """设置未选择时显示的占位文字（最长 100 字符）"""
        self.placeholder = placeholder
        return self

    def set_values(self, min: Optional[int] = None, max: Optional[int] = None) -> "SelectMenu":
        """
        设置最少/最多可选数量

        Args:
            min: 最少选择数量，空值时保持原状
            max: 最多选择数量，空值时保持原状

        Returns:
            选择菜单自身
        """
        if min:
            self.min_values = min
        if max:
            self.max_values = max
        return self

    def add_option(
        self,
        label: str,
        value: str,
        description: Optional[str] = None,
        emoji: Optional[Any] = None,
        default: Optional[bool] = None
    ) -> "SelectMenu":
        """
        添加一个选项

        Args:
            label: 选项名称
            value: 选项值
            description: 附加描述
            emoji: 与名称一起显示的表情
            default: 是否默认选中

        Returns:
            选择菜单自身
        """
        self.options.append(SelectMenuOption(label, value, description, emoji, default))
        return self

    def add_options(self, *options: OptionLike) -> "SelectMenu":
        """批量添加选项，选项可以是 SelectMenuOption 或字典"""
        for option in options:
            if isinstance(option, dict):
                option = SelectMenuOption.from_dict(option)
            self.add_option(option.label, option.value, option.description, option.emoji, option.default)
        return self

    def clear_options(self) -> "SelectMenu":
        """清空所有选项"""
        self.options = []
        return self

    def load(
        self,
        custom_id: Optional[str] = None,
        options: Optional[List[OptionLike]] = None,
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None
    ) -> "SelectMenu":
        """批量设置字段；传入非空选项列表时替换现有选项"""
        if custom_id:
            self.set_custom_id(custom_id)
        if options:
            self.clear_options()
            self.add_options(*options)
        if placeholder:
            self.set_placeholder(placeholder)
        self.set_values(min_values, max_values)
        self._set_disabled(disabled)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为 Discord 线上格式

        Raises:
            MissingRequiredFieldError: 缺少 custom_id
        """
        if not self.custom_id:
            raise MissingRequiredFieldError('SelectMenu', 'custom_id')

        data = drop_none({
            'type': self.type.value,
            'custom_id': self.custom_id,
            'options': [option.to_dict() for option in self.options],
            'placeholder': self.placeholder,
            'min_values': self.min_values,
            'max_values': self.max_values,
        })
        data['disabled'] = self.disabled
        return data
