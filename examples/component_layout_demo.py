#!/usr/bin/env python3
"""
组件行分配演示脚本

展示组件构建器如何按容量和独占规则把组件分配到行中。
"""

import json
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from componenthelper import ComponentHelper, ButtonStyle, TextInputStyle


def print_rows(payload):
    """打印每一行的组件类型"""
    for index, row in enumerate(payload):
        types = [component['type'] for component in row['components']]
        print(f"   行 {index}: {types}")


def demo_capacity():
    """演示行容量"""
    print("🧩 行容量演示")
    print("=" * 50)

    helper = ComponentHelper()
    for i in range(6):
        helper.add_interaction_button(ButtonStyle.primary, f"button_{i}", f"按钮 {i}")

    print("1. 默认容量 5，添加 6 个按钮")
    print_rows(helper.to_json())

    helper = ComponentHelper(row_max=2)
    for i in range(5):
        helper.add_interaction_button(ButtonStyle.secondary, f"button_{i}")

    print("2. 容量 2，添加 5 个按钮")
    print_rows(helper.to_json())
    print()


def demo_select_menu():
    """演示选择菜单独占一行"""
    print("📋 选择菜单演示")
    print("=" * 50)

    helper = (
        ComponentHelper()
        .add_interaction_button(ButtonStyle.success, "play", "▶️ 播放")
        .add_select_menu(
            "song_select",
            [
                {"label": "Song A", "value": "a", "emoji": "🎵"},
                {"label": "Song B", "value": "b", "default": True},
            ],
            placeholder="选择一首歌曲"
        )
        .add_url_button("https://discord.com", "打开 Discord", emoji="<:paws8:681748079778463796>")
    )

    payload = helper.to_json()
    print("按钮、选择菜单、链接按钮各占一行")
    print_rows(payload)
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    print()


def demo_modal():
    """演示模态框文本输入"""
    print("📝 模态框演示")
    print("=" * 50)

    helper = ComponentHelper(row_max=1)
    helper.add_text_input(TextInputStyle.short, "歌曲名称", "song_name", placeholder="输入歌曲名称")
    helper.add_text_input(TextInputStyle.paragraph, "备注", "note", required=False, max_length=200)

    print_rows(helper.to_json())


if __name__ == "__main__":
    demo_capacity()
    demo_select_menu()
    demo_modal()
