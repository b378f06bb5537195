"""
扑克手牌与牌型识别.

Hand由一行卡牌字符串构造，构造后不可变，按点数升序保存.
同点数计数跨点数累积，5张及以下的手牌顺子判定总为真，
牌型比较只看牌型，不比较踢脚牌.
"""

import logging
from typing import Iterator, Optional, Tuple

from ..core.card import Card
from ..core.config import HandConfig
from ..core.enums import Rank
from ..core.exceptions import InvalidHandError
from .hand_kind import Kind, compare_kinds

logger = logging.getLogger(__name__)

# 顺子判定中扫描计数的上限
STRAIGHT_SCAN_LIMIT = 5


class Hand:
    """
    一手扑克牌.

    Examples:
        >>> hand = Hand("2D 3D 5D 4D 6D")
        >>> hand.kind()
        <Kind.STRAIGHT_FLUSH: 'straight_flush'>
        >>> str(hand)
        '2D 3D 4D 5D 6D'
    """

    def __init__(self, hand_str: str, config: Optional[HandConfig] = None):
        """
        从字符串创建手牌，例如 "5C TD AH QS 2D".

        Args:
            hand_str: 以单个空格分隔的卡牌字符串
            config: 解析配置，默认不校验牌数和重复牌

        Raises:
            TypeError: 当输入不是字符串时
            ParseError: 当某张牌无法解析时
            InvalidHandError: 严格模式下牌数不对或有重复牌时
        """
        if not isinstance(hand_str, str):
            raise TypeError(f"手牌必须是字符串，实际: {type(hand_str)}")

        self._config = config or HandConfig.default()
        cards = [Card.from_str(token) for token in hand_str.split(" ")]

        if self._config.strict:
            self._validate(cards)

        # sorted是稳定排序，同点数的牌保持输入顺序
        self._cards: Tuple[Card, ...] = tuple(sorted(cards, key=lambda c: c.rank))
        logger.debug("解析手牌: %r -> %s", hand_str, self)

    def _validate(self, cards) -> None:
        """严格模式下校验牌数和重复牌"""
        if len(cards) != self._config.hand_size:
            logger.warning("手牌牌数错误: 需要%d张，实际%d张", self._config.hand_size, len(cards))
            raise InvalidHandError(f"手牌必须是{self._config.hand_size}张，实际: {len(cards)}")

        if len(set(cards)) != len(cards):
            duplicates = sorted({str(c) for c in cards if cards.count(c) > 1})
            logger.warning("手牌中有重复的牌: %s", duplicates)
            raise InvalidHandError(f"手牌中有重复的牌: {', '.join(duplicates)}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        """按点数升序排列的牌"""
        return self._cards

    def has_n_kind(self, n: int) -> bool:
        """
        判断手牌中是否有n张同点数的牌.

        按点数顺序扫描，点数与当前记录相同时计数加一，
        遇到新点数只更新记录而不清零计数，计数恰好等于n时返回True.
        因此计数会跨点数累积，例如 "2S 2D 2H 4D 4C" 对 n=4 也返回True.

        Args:
            n: 同点数的张数

        Returns:
            bool: 扫描过程中计数是否达到n
        """
        rank = self._cards[0].rank
        count = 0
        for card in self._cards:
            if card.rank == rank:
                count += 1
            else:
                rank = card.rank
            if count == n:
                return True
        return False

    def is_two_pair(self) -> bool:
        """
        判断是否为两对.

        未实现，总是返回False；保留它是为了kind()的判定顺序完整.
        """
        return False

    def next_rank(self, card: Card) -> Rank:
        """返回这张牌的下一个点数，A之后回到2"""
        return card.rank.next()

    def is_straight(self) -> bool:
        """
        判断是否为顺子.

        逐张检查手牌中是否存在下一个点数的牌，但只有在扫描超过
        STRAIGHT_SCAN_LIMIT 张之后缺牌才算失败，所以5张及以下的手牌总是返回True.

        Returns:
            bool: 是否为顺子
        """
        ranks = {card.rank for card in self._cards}
        n = 0
        for card in self._cards:
            n += 1
            if self.next_rank(card) not in ranks and n > STRAIGHT_SCAN_LIMIT:
                return False
        return True

    def is_flush(self) -> bool:
        """判断所有牌是否与最小的那张同花色"""
        suit = self._cards[0].suit
        return all(card.suit == suit for card in self._cards)

    def kind(self) -> Kind:
        """
        识别手牌的牌型.

        按固定优先级依次判定，返回第一个成立的牌型；每次调用都重新计算.

        Returns:
            Kind: 手牌的牌型
        """
        if self.is_straight() and self.is_flush():
            result = Kind.STRAIGHT_FLUSH
        elif self.has_n_kind(4):
            result = Kind.FOUR_OF_A_KIND
        elif self.has_n_kind(3) and self.has_n_kind(2):
            result = Kind.FULL_HOUSE
        elif self.is_flush():
            result = Kind.FLUSH
        elif self.is_straight():
            result = Kind.STRAIGHT
        elif self.has_n_kind(3):
            result = Kind.THREE_OF_A_KIND
        elif self.is_two_pair():
            result = Kind.TWO_PAIR
        elif self.has_n_kind(2):
            result = Kind.PAIR
        else:
            result = Kind.HIGH_CARD

        logger.debug("手牌 %s 的牌型: %s", self, result.name)
        return result

    def compare_to(self, other: 'Hand') -> int:
        """
        按牌型比较两手牌的强弱.

        Args:
            other: 另一手牌

        Returns:
            int: 1表示当前手牌更强，-1表示更弱，0表示牌型相同

        Raises:
            TypeError: 当other不是Hand类型时
        """
        if not isinstance(other, Hand):
            raise TypeError(f"比较对象必须是Hand类型，实际: {type(other)}")
        return compare_kinds(self.kind(), other.kind())

    def __lt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(card.to_str() for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"
