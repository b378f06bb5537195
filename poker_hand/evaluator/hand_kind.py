"""
扑克牌型定义
包含9种牌型、显式的强弱顺序表和名称映射
"""

from enum import Enum
from typing import Dict, Tuple


class Kind(Enum):
    """
    扑克牌型枚举
    成员值只是标识，强弱由 KIND_ORDER 决定
    """
    HIGH_CARD = "high_card"                 # 高牌
    PAIR = "pair"                           # 一对
    TWO_PAIR = "two_pair"                   # 两对
    THREE_OF_A_KIND = "three_of_a_kind"     # 三条
    STRAIGHT = "straight"                   # 顺子
    FLUSH = "flush"                         # 同花
    FULL_HOUSE = "full_house"               # 葫芦（满堂红）
    FOUR_OF_A_KIND = "four_of_a_kind"       # 四条
    STRAIGHT_FLUSH = "straight_flush"       # 同花顺

    def __str__(self) -> str:
        return KIND_NAMES[self]

    @property
    def strength(self) -> int:
        """牌型强度，即在 KIND_ORDER 中的下标"""
        return KIND_ORDER.index(self)


# 牌型强弱顺序，从弱到强
KIND_ORDER: Tuple[Kind, ...] = (
    Kind.HIGH_CARD,
    Kind.PAIR,
    Kind.TWO_PAIR,
    Kind.THREE_OF_A_KIND,
    Kind.STRAIGHT,
    Kind.FLUSH,
    Kind.FULL_HOUSE,
    Kind.FOUR_OF_A_KIND,
    Kind.STRAIGHT_FLUSH,
)

# 牌型名称映射
KIND_NAMES: Dict[Kind, str] = {
    Kind.HIGH_CARD: "高牌",
    Kind.PAIR: "一对",
    Kind.TWO_PAIR: "两对",
    Kind.THREE_OF_A_KIND: "三条",
    Kind.STRAIGHT: "顺子",
    Kind.FLUSH: "同花",
    Kind.FULL_HOUSE: "葫芦",
    Kind.FOUR_OF_A_KIND: "四条",
    Kind.STRAIGHT_FLUSH: "同花顺"
}


def get_kind_name(kind: Kind) -> str:
    """
    获取牌型的中文名称

    Args:
        kind: 牌型

    Returns:
        牌型的中文名称
    """
    return KIND_NAMES.get(kind, "未知牌型")


def compare_kinds(kind1: Kind, kind2: Kind) -> int:
    """
    按 KIND_ORDER 比较两个牌型

    Args:
        kind1: 第一个牌型
        kind2: 第二个牌型

    Returns:
        int: 1表示kind1更强，-1表示kind2更强，0表示相同

    Raises:
        TypeError: 当参数不是Kind类型时
    """
    if not isinstance(kind1, Kind):
        raise TypeError(f"kind1必须是Kind类型，实际: {type(kind1)}")
    if not isinstance(kind2, Kind):
        raise TypeError(f"kind2必须是Kind类型，实际: {type(kind2)}")

    if kind1.strength != kind2.strength:
        return 1 if kind1.strength > kind2.strength else -1
    return 0
