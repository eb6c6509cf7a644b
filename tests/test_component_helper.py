"""
组件构建器测试

测试行分配逻辑：
- 容量规则
- 选择菜单独占规则
- 空行清理与导出
- 便捷添加方法
"""

import logging
import math

import pytest
from unittest.mock import Mock

from componenthelper import (
    Button,
    ButtonStyle,
    ComponentHelper,
    InvalidCapacityError,
    SelectMenu,
    TextInput,
    TextInputStyle
)
from componenthelper.utils.config_manager import ConfigManager


def make_button(index: int) -> Button:
    """创建测试用交互按钮"""
    return Button(ButtonStyle.primary, f"button_{index}")


def make_menu(custom_id: str = "menu") -> SelectMenu:
    """创建测试用选择菜单"""
    return SelectMenu(custom_id).add_option("Option", "option")


def component_types(payload):
    """提取每一行的组件类型列表"""
    return [[component['type'] for component in row['components']] for row in payload]


class TestCapacity:
    """测试行容量规则"""

    @pytest.mark.parametrize("row_max", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("count", [0, 1, 4, 5, 6, 11, 12])
    def test_rows_fill_to_capacity(self, row_max, count):
        """测试 n 个按钮在容量 k 下生成 ceil(n/k) 行"""
        helper = ComponentHelper(row_max)
        helper.add_components(*[make_button(i) for i in range(count)])

        payload = helper.to_json()

        assert len(payload) == math.ceil(count / row_max)
        for row in payload[:-1]:
            assert len(row['components']) == row_max

    def test_six_buttons_default_capacity(self):
        """测试默认容量下 6 个按钮分为 5 + 1"""
        helper = ComponentHelper()
        for i in range(6):
            helper.add_interaction_button(ButtonStyle.primary, f"button_{i}")

        payload = helper.to_json()

        assert len(payload) == 2
        assert len(payload[0]['components']) == 5
        assert len(payload[1]['components']) == 1
        assert payload[1]['components'][0]['custom_id'] == "button_5"

    def test_text_inputs_follow_capacity(self):
        """测试文本输入同样遵守容量规则"""
        helper = ComponentHelper(row_max=1)
        helper.add_text_input(TextInputStyle.short, "Name", "name")
        helper.add_text_input(TextInputStyle.paragraph, "Bio", "bio")

        assert component_types(helper.to_json()) == [[4], [4]]

    def test_set_row_max_does_not_repack(self):
        """测试修改容量不会重新排列已有的行"""
        helper = ComponentHelper()
        helper.add_components(*[make_button(i) for i in range(4)])

        helper.set_row_max(2)
        helper.add_component(make_button(4))

        payload = helper.to_json()
        assert [len(row['components']) for row in payload] == [4, 1]

    @pytest.mark.parametrize("row_max", [0, 6, -1, True, "5", None, 5.0, 2.5])
    def test_invalid_row_max(self, row_max):
        """测试非法容量会被拒绝"""
        helper = ComponentHelper()
        with pytest.raises(InvalidCapacityError) as exc_info:
            helper.set_row_max(row_max)

        assert exc_info.value.row_max == row_max
        assert helper.row_max == 5

    def test_invalid_row_max_in_constructor(self):
        """测试构造时的非法容量"""
        with pytest.raises(InvalidCapacityError):
            ComponentHelper(7)

    def test_set_row_max_is_chainable(self):
        """测试设置容量支持链式调用"""
        helper = ComponentHelper()
        assert helper.set_row_max(3) is helper
        assert helper.row_max == 3


class TestSelectMenuPlacement:
    """测试选择菜单独占规则"""

    def setup_method(self):
        """设置测试环境"""
        self.helper = ComponentHelper()

    def test_menu_into_empty_row(self):
        """测试选择菜单放入空的当前行后游标移到新的空行"""
        menu = make_menu()
        self.helper.add_component(menu)

        assert len(self.helper.rows) == 2
        assert self.helper.rows[0].get_components() == [menu]
        assert self.helper.current_index == 1
        assert self.helper.current_row().is_empty()

        self.helper.add_component(make_button(0))
        assert self.helper.rows[0].size == 1
        assert self.helper.rows[1].size == 1

    def test_menu_into_non_empty_row(self):
        """测试选择菜单遇到非空当前行时单独成行，并在其后留出空行"""
        first = make_button(0)
        self.helper.add_component(first)
        menu = make_menu()
        self.helper.add_component(menu)

        assert len(self.helper.rows) == 3
        assert self.helper.rows[0].get_components() == [first]
        assert self.helper.rows[1].get_components() == [menu]
        assert self.helper.rows[2].is_empty()
        assert self.helper.current_index == 2

    def test_button_menu_button(self):
        """测试 按钮, 选择菜单, 按钮 生成三行"""
        self.helper.add_components(make_button(0), make_menu(), make_button(1))

        assert component_types(self.helper.to_json()) == [[2], [3], [2]]

    def test_consecutive_menus(self):
        """测试连续的选择菜单各占一行"""
        self.helper.add_select_menu("a", [{"label": "A", "value": "a"}])
        self.helper.add_select_menu("b", [{"label": "B", "value": "b"}])

        payload = self.helper.to_json()
        assert component_types(payload) == [[3], [3]]
        assert [row['components'][0]['custom_id'] for row in payload] == ["a", "b"]

    def test_menu_row_stays_closed_after_export(self):
        """测试导出清理空行后，选择菜单所在行仍不接受其他组件"""
        self.helper.add_component(make_menu())
        self.helper.to_json()
        assert self.helper.current_index == 0

        self.helper.add_component(make_button(0))

        assert component_types(self.helper.to_json()) == [[3], [2]]

    def test_full_row_then_menu(self):
        """测试满行之后的选择菜单"""
        self.helper.add_components(*[make_button(i) for i in range(5)])
        self.helper.add_component(make_menu())

        assert component_types(self.helper.to_json()) == [[2] * 5, [3]]


class TestRowsAndExport:
    """测试行管理与导出"""

    def setup_method(self):
        """设置测试环境"""
        self.helper = ComponentHelper()

    def test_initial_state(self):
        """测试初始状态"""
        assert self.helper.rows == []
        assert self.helper.current_index == -1
        assert self.helper.row_max == 5
        assert self.helper.to_json() == []

    def test_current_row_creates_row_when_missing(self):
        """测试当前行不存在时自动创建"""
        row = self.helper.current_row()

        assert self.helper.rows == [row]
        assert self.helper.current_index == 0
        assert self.helper.current_row() is row

    def test_add_row_with_components(self):
        """测试手动新建带初始组件的行"""
        buttons = [make_button(i) for i in range(2)]
        result = self.helper.add_row(buttons)

        assert result is self.helper
        assert self.helper.current_index == 0
        assert self.helper.rows[0].get_components() == buttons

        self.helper.add_component(make_button(2))
        assert self.helper.rows[0].size == 3

    def test_add_row_splits_manually(self):
        """测试手动换行"""
        self.helper.add_component(make_button(0)).add_row().add_component(make_button(1))

        assert [len(row['components']) for row in self.helper.to_json()] == [1, 1]

    def test_remove_empty_rows_keeps_order(self):
        """测试清理空行保持非空行的相对顺序"""
        self.helper.add_row().add_row([make_button(0)]).add_row().add_row()
        self.helper.add_row([make_button(1)]).add_row().add_row([make_button(2)])

        result = self.helper.remove_empty_rows()

        assert result is self.helper
        assert len(self.helper.rows) == 3
        assert self.helper.current_index == 2
        ids = [row.get_components()[0].custom_id for row in self.helper.rows]
        assert ids == ["button_0", "button_1", "button_2"]

    def test_remove_all_empty_rows(self):
        """测试全部为空行时清理为零行"""
        self.helper.add_row().add_row().add_row()
        self.helper.remove_empty_rows()

        assert self.helper.rows == []
        assert self.helper.current_index == -1

        self.helper.add_component(make_button(0))
        assert len(self.helper.to_json()) == 1

    def test_to_json_never_emits_empty_rows(self):
        """测试导出结果中没有空行"""
        self.helper.add_row().add_component(make_menu()).add_row().add_component(make_button(0)).add_row()

        payload = self.helper.to_json()

        assert all(row['components'] for row in payload)

    def test_to_json_is_idempotent(self):
        """测试连续两次导出结果一致"""
        self.helper.add_components(make_button(0), make_menu(), make_button(1))

        first = self.helper.to_json()
        second = self.helper.to_json()

        assert first == second

    def test_editing_export_does_not_change_builder(self):
        """测试修改导出结果不会影响构建器的状态"""
        self.helper.add_interaction_button(ButtonStyle.primary, "a", "A", "🐾")
        self.helper.add_select_menu("menu", [{"label": "A", "value": "a", "emoji": "🎵"}])

        first = self.helper.to_json()
        first[0]['components'][0]['emoji']['name'] = "X"
        first[1]['components'][0]['options'][0]['emoji']['name'] = "Y"

        second = self.helper.to_json()
        assert second[0]['components'][0]['emoji']['name'] == "🐾"
        assert second[1]['components'][0]['options'][0]['emoji']['name'] == "🎵"

    def test_len_and_iter(self):
        """测试行数与遍历"""
        self.helper.add_components(*[make_button(i) for i in range(7)])

        assert len(self.helper) == 2
        assert [row.size for row in self.helper] == [5, 2]


class TestConvenienceMethods:
    """测试便捷添加方法"""

    def setup_method(self):
        """设置测试环境"""
        self.helper = ComponentHelper()

    def test_add_interaction_button(self):
        """测试添加交互按钮"""
        self.helper.add_interaction_button(ButtonStyle.success, "ok", "OK", "👍", True)

        assert self.helper.to_json()[0]['components'][0] == {
            'type': 2,
            'style': 3,
            'label': 'OK',
            'emoji': {'id': None, 'name': '👍', 'animated': False},
            'disabled': True,
            'custom_id': 'ok'
        }

    def test_add_url_button_and_alias(self):
        """测试添加链接按钮及其别名"""
        self.helper.add_url_button("https://example.com", "Site")
        self.helper.add_link_button("https://example.org")

        components = self.helper.to_json()[0]['components']
        assert components[0] == {
            'type': 2, 'style': 5, 'label': 'Site', 'disabled': False, 'url': 'https://example.com'
        }
        assert components[1]['url'] == "https://example.org"

    def test_add_select_menu(self):
        """测试添加选择菜单"""
        self.helper.add_select_menu(
            "songs",
            [{"label": "A", "value": "a", "description": "first"}, {"label": "B", "value": "b", "default": True}],
            placeholder="Pick",
            min_values=1,
            max_values=2
        )

        assert self.helper.to_json() == [{
            'type': 1,
            'components': [{
                'type': 3,
                'custom_id': 'songs',
                'options': [
                    {'label': 'A', 'value': 'a', 'description': 'first'},
                    {'label': 'B', 'value': 'b', 'default': True}
                ],
                'placeholder': 'Pick',
                'min_values': 1,
                'max_values': 2,
                'disabled': False
            }]
        }]

    def test_add_text_input(self):
        """测试添加文本输入框"""
        self.helper.add_text_input(
            TextInputStyle.paragraph, "Feedback", "feedback",
            placeholder="Tell us", min_length=10, max_length=500, required=False
        )

        assert self.helper.to_json()[0]['components'][0] == {
            'type': 4,
            'custom_id': 'feedback',
            'style': 2,
            'label': 'Feedback',
            'min_length': 10,
            'max_length': 500,
            'required': False,
            'placeholder': 'Tell us'
        }

    def test_methods_are_chainable(self):
        """测试添加方法支持链式调用"""
        result = (
            self.helper
            .add_interaction_button(1, "a")
            .add_url_button("https://example.com")
            .add_text_input(1, "Label", "input")
            .add_components(make_button(9))
        )

        assert result is self.helper

    def test_emoji_to_partial_static(self):
        """测试静态表情转换方法"""
        assert ComponentHelper.emoji_to_partial("<:paws8:681748079778463796>", "custom") == {
            'id': '681748079778463796', 'name': 'paws8', 'animated': False
        }


class TestFromConfig:
    """测试从配置创建构建器"""

    def test_from_config(self):
        """测试使用配置中的行容量"""
        config = Mock(spec=ConfigManager)
        config.get_default_row_max.return_value = 3

        helper = ComponentHelper.from_config(config)

        assert helper.row_max == 3
        config.get_default_row_max.assert_called_once()


class TestPlacementLogging:
    """测试行分配的调试日志"""

    def test_row_opened_is_logged(self, caplog):
        """测试新建行时记录日志"""
        caplog.set_level(logging.DEBUG, logger="componenthelper")

        helper = ComponentHelper()
        helper.add_component(make_menu())

        messages = [record.getMessage() for record in caplog.records]
        assert any("新建行" in message for message in messages)
        assert any("类型: select" in message for message in messages)

        contexts = [record.context for record in caplog.records if hasattr(record, 'context')]
        assert {'row_index': 1, 'initial_size': 0} in contexts

    def test_pruning_is_logged(self, caplog):
        """测试清理空行时记录日志"""
        caplog.set_level(logging.DEBUG, logger="componenthelper")

        helper = ComponentHelper()
        helper.add_row().add_row()
        helper.remove_empty_rows()

        assert any("清理空行" in record.getMessage() for record in caplog.records)
