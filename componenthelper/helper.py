"""
组件构建器 - 将组件按规则分配到行中

负责维护有序的行列表并决定每个组件所在的行：
- 每行最多容纳 row_max 个按钮/文本输入 (1-5)
- 选择菜单必须独占一行
- 导出时自动清理空行
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from componenthelper.core.errors import InvalidCapacityError
from componenthelper.structures import ActionRow, Button, Component, SelectMenu, TextInput
from componenthelper.structures.button import EmojiLike
from componenthelper.structures.select_menu import OptionLike
from componenthelper.utils.config_manager import ConfigManager
from componenthelper.utils.constants import (
    DEFAULT_ROW_MAX,
    ButtonStyle,
    ComponentType,
    TextInputStyle,
    is_valid_row_max
)
from componenthelper.utils.emoji import PartialEmojiDict, emoji_to_partial
from componenthelper.utils.logger import HelperLogger


class ComponentHelper:
    """
    组件构建器

    组件逐个加入，构建器根据组件类型和当前行的占用情况决定：
    加入当前行、新建一行，或在放入后关闭当前行。
    一旦放入，组件所在的行不会再改变。

    所有添加方法都返回构建器自身，支持链式调用。
    """

    def __init__(self, row_max: Optional[int] = None):
        """
        初始化组件构建器

        Args:
            row_max: 每行最多容纳的非独占组件数量 (1-5)，默认 5

        Raises:
            InvalidCapacityError: row_max 不在 1-5 范围内
        """
        self.logger = HelperLogger("helper")
        self.rows: List[ActionRow] = []
        self.current_index = -1
        self.row_max = DEFAULT_ROW_MAX
        if row_max is not None:
            self.set_row_max(row_max)

    @classmethod
    def from_config(cls, config: ConfigManager) -> "ComponentHelper":
        """
        使用配置中的默认行容量创建构建器

        Args:
            config: 配置管理器

        Returns:
            新的组件构建器
        """
        return cls(config.get_default_row_max())

    def set_row_max(self, row_max: int) -> "ComponentHelper":
        """
        设置每行容量，已有的行不会重新排列

        Args:
            row_max: 每行最多容纳的非独占组件数量 (1-5)

        Returns:
            构建器自身

        Raises:
            InvalidCapacityError: row_max 不在 1-5 范围内
        """
        if not is_valid_row_max(row_max):
            raise InvalidCapacityError(row_max)
        self.row_max = row_max
        return self

    def add_row(self, components: Optional[Sequence[Component]] = None) -> "ComponentHelper":
        """
        开始新的一行

        Args:
            components: 新行的初始组件

        Returns:
            构建器自身
        """
        row = ActionRow().add_components(*(components or []))
        self.rows.append(row)
        self.current_index = len(self.rows) - 1
        self.logger.log_row_opened(self.current_index, row.size)
        return self

    def current_row(self) -> ActionRow:
        """
        获取游标所在的行，不存在时先追加一个空行

        Returns:
            当前行
        """
        if not 0 <= self.current_index < len(self.rows):
            self.add_row()
        return self.rows[self.current_index]

    def add_component(self, component: Component) -> "ComponentHelper":
        """
        将组件加入当前行，或根据规则放入新行

        Args:
            component: 要添加的组件

        Returns:
            构建器自身
        """
        current = self.current_row()

        if component.type is ComponentType.select:
            if current.is_empty():
                current.add_component(component)
                self._log_placement(component)
                # 选择菜单独占此行，后续组件进入新行
                return self.add_row()
            self.add_row([component])
            self._log_placement(component)
            return self.add_row()

        # 导出后游标可能回到选择菜单所在的行，此时同样视为已满
        if current.size >= self.row_max or current.has_exclusive_component():
            self.add_row([component])
        else:
            current.add_component(component)
        self._log_placement(component)
        return self

    def add_components(self, *components: Component) -> "ComponentHelper":
        """按顺序批量添加组件"""
        for component in components:
            self.add_component(component)
        return self

    def add_interaction_button(
        self,
        style: Union[ButtonStyle, int],
        custom_id: str,
        label: Optional[str] = None,
        emoji: Optional[EmojiLike] = None,
        disabled: Optional[bool] = None
    ) -> "ComponentHelper":
        """
        添加交互按钮

        Args:
            style: 按钮样式 (1-4)
            custom_id: 开发者定义的标识，最长 100 字符
            label: 按钮文字，最长 80 字符
            emoji: 按钮表情
            disabled: 是否禁用

        Returns:
            构建器自身
        """
        button = Button(style, custom_id).load(style, custom_id, label, emoji, disabled)
        return self.add_component(button)

    def add_url_button(
        self,
        url: str,
        label: Optional[str] = None,
        emoji: Optional[EmojiLike] = None,
        disabled: Optional[bool] = None
    ) -> "ComponentHelper":
        """
        添加链接按钮

        Args:
            url: 点击后打开的链接
            label: 按钮文字，最长 80 字符
            emoji: 按钮表情
            disabled: 是否禁用

        Returns:
            构建器自身
        """
        button = Button(ButtonStyle.link, url).load(ButtonStyle.link, url, label, emoji, disabled)
        return self.add_component(button)

    add_link_button = add_url_button

    def add_select_menu(
        self,
        custom_id: str,
        options: Sequence[OptionLike],
        placeholder: Optional[str] = None,
        min_values: Optional[int] = None,
        max_values: Optional[int] = None,
        disabled: Optional[bool] = None
    ) -> "ComponentHelper":
        """
        添加选择菜单（当前行为空时放入当前行，否则放入新行）

        Args:
            custom_id: 开发者定义的标识，最长 100 字符
            options: 选项列表，最多 25 个
            placeholder: 未选择时的占位文字
            min_values: 最少选择数量
            max_values: 最多选择数量
            disabled: 是否禁用

        Returns:
            构建器自身
        """
        menu = SelectMenu(custom_id).load(custom_id, list(options), placeholder, min_values, max_values, disabled)
        return self.add_component(menu)

    def add_text_input(
        self,
        style: Union[TextInputStyle, int],
        label: str,
        custom_id: str,
        placeholder: Optional[str] = None,
        value: Optional[str] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        required: Optional[bool] = None
    ) -> "ComponentHelper":
        """
        添加文本输入框

        Args:
            style: 输入框样式 (1 单行, 2 段落)
            label: 输入框标签
            custom_id: 开发者定义的标识，最长 100 字符
            placeholder: 输入为空时的占位文字
            value: 预填内容
            min_length: 最小输入长度
            max_length: 最大输入长度
            required: 是否必填

        Returns:
            构建器自身
        """
        text_input = TextInput(style, label, custom_id).load(
            style, label, custom_id, placeholder, value, min_length, max_length, required
        )
        return self.add_component(text_input)

    def remove_empty_rows(self) -> "ComponentHelper":
        """
        移除所有空行，并将游标移到最后一行

        Returns:
            构建器自身
        """
        before = len(self.rows)
        self.rows = [row for row in self.rows if not row.is_empty()]
        self.current_index = len(self.rows) - 1
        self.logger.log_rows_pruned(before - len(self.rows), len(self.rows))
        return self

    def to_json(self) -> List[Dict[str, Any]]:
        """
        导出为 Discord 线上格式

        Returns:
            行对象列表
        """
        return [row.to_dict() for row in self.remove_empty_rows().rows]

    @staticmethod
    def emoji_to_partial(emoji: str, type: str = "default") -> PartialEmojiDict:
        """
        将表情转换为部分表情

        Example:
            ComponentHelper.emoji_to_partial("🐾", "default")
            ComponentHelper.emoji_to_partial("<:paws8:681748079778463796>", "custom")
        """
        return emoji_to_partial(emoji, type)

    def _log_placement(self, component: Component) -> None:
        self.logger.log_placement(component.type.name, self.current_index, self.rows[self.current_index].size)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ActionRow]:
        return iter(self.rows)

    def __repr__(self) -> str:
        return f"<ComponentHelper rows={len(self.rows)} row_max={self.row_max}>"
