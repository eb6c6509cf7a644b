"""
表情转换工具

将表情字符串转换为 Discord 组件使用的部分表情 (partial emoji) 结构：
- 内置 Unicode 表情
- 自定义表情（<:name:id> 或 <a:name:id>）
- discord.PartialEmoji 对象
"""

import logging
import re
from typing import Any, Dict, Optional, Union
import discord

from componenthelper.core.errors import EmojiParseError

logger = logging.getLogger("componenthelper.emoji")

# 自定义表情 ID 为 15-21 位 ASCII 数字
CUSTOM_EMOJI_PATTERN = re.compile(r'<?(a)?:(.+):([0-9]{15,21})>?')

EMOJI_TYPES = ("default", "custom")

PartialEmojiDict = Dict[str, Any]


def parse_custom_emoji(text: str) -> PartialEmojiDict:
    """
    严格解析自定义表情字符串

    Args:
        text: 完整的自定义表情字符串，如 "<a:paws8:681748079778463796>"

    Returns:
        部分表情字典

    Raises:
        EmojiParseError: 字符串不是合法的自定义表情
    """
    match = CUSTOM_EMOJI_PATTERN.fullmatch(text)
    if not match:
        raise EmojiParseError(text)

    animated, name, emoji_id = match.groups()
    return {
        'id': emoji_id,
        'name': name,
        'animated': animated == 'a'
    }


def emoji_to_partial(text: str, type: str = "default") -> PartialEmojiDict:
    """
    将表情字符串转换为部分表情

    自定义表情解析失败时回退为内置表情处理。

    Args:
        text: 内置表情的 Unicode 字符，或完整的自定义表情字符串
        type: "default" 表示内置表情，"custom" 表示自定义表情

    Returns:
        部分表情字典 {"id", "name", "animated"}

    Raises:
        ValueError: 未知的表情类型
    """
    if type not in EMOJI_TYPES:
        raise ValueError(f"未知的表情类型: {type!r}，可选值: {EMOJI_TYPES}")

    if type == "custom":
        try:
            return parse_custom_emoji(text)
        except EmojiParseError as e:
            logger.debug(f"{e}，按内置表情处理")
            return emoji_to_partial(text, "default")

    return {
        'id': None,
        'name': text,
        'animated': False
    }


def partial_from_discord(emoji: discord.PartialEmoji) -> PartialEmojiDict:
    """将 discord.PartialEmoji 转换为部分表情字典"""
    return {
        'id': str(emoji.id) if emoji.id is not None else None,
        'name': emoji.name,
        'animated': bool(emoji.animated)
    }


def normalize_emoji(
    emoji: Optional[Union[str, PartialEmojiDict, discord.PartialEmoji]]
) -> Optional[PartialEmojiDict]:
    """
    将各种形式的表情统一为部分表情字典

    Args:
        emoji: 表情字符串、部分表情字典或 discord.PartialEmoji

    Returns:
        部分表情字典，emoji 为空时返回 None
    """
    if emoji is None:
        return None
    if isinstance(emoji, discord.PartialEmoji):
        return partial_from_discord(emoji)
    if isinstance(emoji, str):
        return emoji_to_partial(emoji, "custom")
    return dict(emoji)
