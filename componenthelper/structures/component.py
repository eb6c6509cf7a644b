"""
组件基类 - 所有消息组件共享的类型标识和启用状态
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from componenthelper.utils.constants import ComponentType


class Component(ABC):
    """
    消息组件基类

    type 是组件的类型标识，放置逻辑和序列化都依据它进行判断。
    """

    def __init__(self, type: ComponentType):
        self.type = type
        self.disabled = False

    @property
    def is_exclusive(self) -> bool:
        """该组件是否必须独占一行（仅选择菜单）"""
        return self.type is ComponentType.select

    def disable(self) -> "Component":
        """
        禁用此组件

        Returns:
            组件自身，支持链式调用
        """
        self.disabled = True
        return self

    def enable(self) -> "Component":
        """启用此组件"""
        self.disabled = False
        return self

    def _set_disabled(self, disabled) -> None:
        # None 表示保持原状
        if disabled is None:
            return
        if disabled:
            self.disable()
        else:
            self.enable()

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """转换为 Discord 线上格式"""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} type={self.type.name}>"


def drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    """移除值为 None 的可选字段"""
    return {key: value for key, value in data.items() if value is not None}
