"""
文本输入组件（仅用于模态框）

@see https://discord.com/developers/docs/interactions/message-components#text-inputs-text-input-structure
"""

from typing import Any, Dict, Optional, Union

from componenthelper.core.errors import MissingRequiredFieldError
from componenthelper.structures.component import Component, drop_none
from componenthelper.utils.constants import ComponentType, TextInputStyle, resolve_text_input_style


class TextInput(Component):
    """文本输入框"""

    def __init__(self, style: Union[TextInputStyle, int], label: str, custom_id: str):
        """
        创建文本输入框

        Args:
            style: 输入框样式 - 1 单行, 2 段落
            label: 输入框标签
            custom_id: 开发者定义的标识，最长 100 字符
        """
        super().__init__(ComponentType.text_input)
        self.style = resolve_text_input_style(style)
        self.label = label
        self.custom_id = custom_id
        self.min_length: Optional[int] = None
        self.max_length: Optional[int] = None
        self.required: Optional[bool] = None
        self.value: Optional[str] = None
        self.placeholder: Optional[str] = None

    def set_style(self, style: Union[TextInputStyle, int]) -> "TextInput":
        """设置输入框样式"""
        self.style = resolve_text_input_style(style)
        return self

    def set_custom_id(self, custom_id: str) -> "TextInput":
        self.custom_id = custom_id
        return self

    def set_label(self, label: str) -> "TextInput":
        self.label = label
        return self

    def set_placeholder(self, placeholder: str) -> "TextInput":
        """设置输入为空时显示的占位文字（最长 100 字符）"""
        self.placeholder = placeholder
        return self

    def set_length(self, min: Optional[int] = None, max: Optional[int] = None) -> "TextInput":
        """
        设置输入长度限制

        Args:
            min: 最小长度，空值时保持原状
            max: 最大长度，空值时保持原状

        Returns:
            文本输入框自身
        """
        if min:
            self.min_length = min
        if max:
            self.max_length = max
        return self

    def set_required(self, required: bool = True) -> "TextInput":
        """设置是否必填"""
        self.required = required
        return self

    def set_optional(self) -> "TextInput":
        """设置为选填"""
        self.required = False
        return self

    def set_value(self, value: str) -> "TextInput":
        """设置预填内容（最长 4000 字符）"""
        self.value = value
        return self

    def load(
        self,
        style: Optional[Union[TextInputStyle, int]] = None,
        label: Optional[str] = None,
        custom_id: Optional[str] = None,
        placeholder: Optional[str] = None,
        value: Optional[str] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        required: Optional[bool] = None
    ) -> "TextInput":
        """批量设置字段，空值参数会被忽略"""
        if style:
            self.set_style(style)
        if label:
            self.set_label(label)
        if custom_id:
            self.set_custom_id(custom_id)
        if placeholder:
            self.set_placeholder(placeholder)
        if value:
            self.set_value(value)
        self.set_length(min_length, max_length)
        if required is not None:
            self.set_required(required)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为 Discord 线上格式

        Raises:
            MissingRequiredFieldError: 缺少 custom_id 或 label
        """
        if not self.custom_id:
            raise MissingRequiredFieldError('TextInput', 'custom_id')
        if not self.label:
            raise MissingRequiredFieldError('TextInput', 'label')

        return drop_none({
            'type': self.type.value,
            'custom_id': self.custom_id,
            'style': self.style.value,
            'label': self.label,
            'min_length': self.min_length,
            'max_length': self.max_length,
            'required': self.required,
            'value': self.value,
            'placeholder': self.placeholder,
        })
