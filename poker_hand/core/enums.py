"""
扑克牌基础枚举定义
包含花色和点数，以及牌面符号的解析
"""

from enum import Enum, IntEnum
from typing import Dict, List

from .exceptions import ParseError


class Suit(Enum):
    """扑克牌花色枚举，花色之间没有大小"""
    CLUBS = "C"       # 梅花
    DIAMONDS = "D"    # 方块
    HEARTS = "H"      # 红桃
    SPADES = "S"      # 黑桃

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        return SUIT_SYMBOLS[self]

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """
        从单个字符创建Suit对象，大小写均可

        Raises:
            ParseError: 花色字符无法识别时
        """
        try:
            return cls(suit_str.upper())
        except ValueError:
            raise ParseError(f"无效的花色: {suit_str!r}") from None


SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    """扑克牌点数枚举，数值用于大小比较"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        """返回点数的简短表示"""
        return RANK_SYMBOLS[self]

    def next(self) -> 'Rank':
        """
        返回下一个点数
        A的下一个点数回绕到2
        """
        ranks = list(Rank)
        return ranks[(ranks.index(self) + 1) % len(ranks)]

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从字符串创建Rank对象
        接受 2-9、T、J、Q、K、A，以及 "10" 作为 T 的别名

        Raises:
            ParseError: 点数符号无法识别时
        """
        rank = _RANK_LOOKUP.get(rank_str.upper())
        if rank is None:
            raise ParseError(f"无效的点数: {rank_str!r}")
        return rank


RANK_SYMBOLS: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "T", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

# 解析用的反向映射，额外支持 "10"
_RANK_LOOKUP: Dict[str, Rank] = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
_RANK_LOOKUP["10"] = Rank.TEN


def get_all_suits() -> List[Suit]:
    """获取所有花色"""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """获取所有点数，按从小到大排列"""
    return list(Rank)
