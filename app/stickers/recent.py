from __future__ import annotations

import re
from typing import Iterable

RECENT_EXCLUDE_LIMIT = 10

# 聊天消息中发送表情包时嵌入的标记，例如 "好耶 [sticker:stamp0001]"
_STICKER_MARKER_RE = re.compile(r"\[sticker:([A-Za-z0-9_.\-]+)\]")
# 已提取好的表情包ID（GET 形式的 excludeRecent）
_BARE_ID_RE = re.compile(r"[A-Za-z0-9_.\-]+")


def _references(message: str) -> list[str]:
    markers = _STICKER_MARKER_RE.findall(message)
    if markers:
        return markers
    text = message.strip()
    if _BARE_ID_RE.fullmatch(text):
        return [text]
    return []


def extract_recent_stickers(
    messages: Iterable[str], max_count: int = RECENT_EXCLUDE_LIMIT
) -> list[str]:
    """
    从最近消息中提取用过的表情包ID（用于推荐时排除）

    规则：
    - 按消息顺序扫描，消息内的 [sticker:xxx] 标记按出现顺序提取
    - 没有标记的消息，若整条就是一个ID则视为ID，否则忽略
    - 去重，收集满 max_count 个后立即停止
    """
    if max_count <= 0:
        return []

    collected: list[str] = []
    seen: set[str] = set()
    for message in messages or ():
        if not isinstance(message, str):
            continue
        for sticker_id in _references(message):
            if sticker_id in seen:
                continue
            seen.add(sticker_id)
            collected.append(sticker_id)
            if len(collected) >= max_count:
                return collected
    return collected
