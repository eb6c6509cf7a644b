"""
行组件 - 按顺序容纳一行中的组件

行本身不检查容量，容量与独占规则由 ComponentHelper 决定。
"""

from typing import Any, Dict, List

from componenthelper.structures.component import Component
from componenthelper.utils.constants import ComponentType


class ActionRow:
    """行组件，组件顺序即渲染顺序"""

    def __init__(self):
        self.type = ComponentType.action_row
        self._components: List[Component] = []

    def add_component(self, component: Component) -> "ActionRow":
        """
        在行尾追加组件

        Args:
            component: 要追加的组件

        Returns:
            行自身
        """
        self._components.append(component)
        return self

    def add_components(self, *components: Component) -> "ActionRow":
        """依次追加多个组件"""
        for component in components:
            self.add_component(component)
        return self

    @property
    def size(self) -> int:
        """行内组件数量"""
        return len(self._components)

    def __len__(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self.size == 0

    def has_exclusive_component(self) -> bool:
        """行内是否已有必须独占一行的组件"""
        return any(component.is_exclusive for component in self._components)

    def get_components(self) -> List[Component]:
        """返回组件列表的副本"""
        return list(self._components)

    def to_dict(self) -> Dict[str, Any]:
        """转换为 Discord 线上格式"""
        return {
            'type': self.type.value,
            'components': [component.to_dict() for component in self._components]
        }

    def __repr__(self) -> str:
        return f"<ActionRow size={self.size}>"
