"""
按钮组件

支持交互按钮（样式 1-4，携带 custom_id）和链接按钮（样式 5，携带 url）。

@see https://discord.com/developers/docs/interactions/message-components#button-object-button-structure
"""

from typing import Any, Dict, Optional, Union
import discord

from componenthelper.core.errors import MissingRequiredFieldError
from componenthelper.structures.component import Component, drop_none
from componenthelper.utils.constants import ButtonStyle, ComponentType, resolve_button_style
from componenthelper.utils.emoji import PartialEmojiDict, normalize_emoji

EmojiLike = Union[str, PartialEmojiDict, discord.PartialEmoji]


class Button(Component):
    """
    按钮

    样式为 LINK 时第二个参数作为 url 保存，否则作为 custom_id 保存。
    """

    def __init__(self, style: Union[ButtonStyle, int], url_or_custom_id: str):
        """
        创建按钮

        Args:
            style: 按钮样式 - 1 蓝紫, 2 灰, 3 绿, 4 红, 5 链接
            url_or_custom_id: 链接按钮的 url，或交互按钮的 custom_id
        """
        super().__init__(ComponentType.button)
        self.style = resolve_button_style(style)
        self.custom_id: Optional[str] = None
        self.url: Optional[str] = None
        self.label: Optional[str] = None
        self.emoji: Optional[PartialEmojiDict] = None
        self._set_target(url_or_custom_id)

    @property
    def is_link(self) -> bool:
        """是否为链接按钮"""
        return self.style is ButtonStyle.link

    def _set_target(self, url_or_custom_id: str) -> None:
        if self.is_link:
            self.url = url_or_custom_id
        else:
            self.custom_id = url_or_custom_id

    def set_style(self, style: Union[ButtonStyle, int]) -> "Button":
        """
        设置按钮样式

        Args:
            style: 按钮样式枚举或代码 (1-5)

        Returns:
            按钮自身
        """
        self.style = resolve_button_style(style)
        return self

    def set_custom_id(self, custom_id: str) -> "Button":
        """设置交互按钮的 custom_id（最长 100 字符）"""
        self.custom_id = custom_id
        return self

    def set_url(self, url: str) -> "Button":
        """设置链接按钮点击后打开的 url"""
        self.url = url
        return self

    def set_label(self, label: str) -> "Button":
        """设置按钮文字（最长 80 字符）"""
        self.label = label
        return self

    def set_emoji(self, emoji: EmojiLike) -> "Button":
        """
        设置按钮表情

        Args:
            emoji: 部分表情字典、discord.PartialEmoji 或表情字符串

        Returns:
            按钮自身
        """
        self.emoji = normalize_emoji(emoji)
        return self

    def load(
        self,
        style: Optional[Union[ButtonStyle, int]] = None,
        url_or_custom_id: Optional[str] = None,
        label: Optional[str] = None,
        emoji: Optional[EmojiLike] = None,
        disabled: Optional[bool] = None
    ) -> "Button":
        """批量设置字段，空值参数会被忽略"""
        if style:
            self.set_style(style)
        if url_or_custom_id:
            self._set_target(url_or_custom_id)
        if label:
            self.set_label(label)
        if emoji:
            self.set_emoji(emoji)
        self._set_disabled(disabled)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为 Discord 线上格式

        Raises:
            MissingRequiredFieldError: 链接按钮缺少 url 或交互按钮缺少 custom_id
        """
        data = drop_none({
            'type': self.type.value,
            'style': self.style.value,
            'label': self.label,
            'emoji': dict(self.emoji) if self.emoji is not None else None,
        })
        data['disabled'] = self.disabled

        if self.is_link:
            if not self.url:
                raise MissingRequiredFieldError('Button', 'url')
            data['url'] = self.url
        else:
            if not self.custom_id:
                raise MissingRequiredFieldError('Button', 'custom_id')
            data['custom_id'] = self.custom_id
        return data
