"""
扑克牌数据结构.

定义不可变的Card类，支持从紧凑字符串（如"TD"）解析.
"""

from dataclasses import dataclass

from .enums import Suit, Rank
from .exceptions import ParseError


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性和哈希基于点数与花色，排序只看点数.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card.from_str("TD")
        >>> card.rank, card.suit
        (<Rank.TEN: 10>, <Suit.DIAMONDS: 'D'>)
        >>> str(card)
        'TD'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def to_str(self) -> str:
        """
        返回卡牌的简短字符串表示
        例如: "AS" (黑桃A), "TD" (方块10)
        """
        return f"{self.rank}{self.suit}"

    def to_display_str(self) -> str:
        """
        返回卡牌的显示字符串表示（使用花色符号）
        例如: "A♠", "T♦"
        """
        return f"{self.rank}{self.suit.symbol}"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        最后一个字符是花色，之前的所有字符是点数.

        Args:
            card_str: 扑克牌字符串，如"TD"、"2C"、"10H"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ParseError: 当字符串格式、点数或花色无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        if len(card_str) < 2:
            raise ParseError(f"卡牌字符串格式错误: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        return cls(Rank.from_str(rank_str), Suit.from_str(suit_str))

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: 'Card') -> bool:
        """按点数比较两张牌"""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank
