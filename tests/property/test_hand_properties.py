"""
Property-based Tests for Hand - 手牌属性测试

该模块使用hypothesis生成随机手牌，验证牌型识别和比较的不变量。

Tests:
    test_parse_round_trip_property: 字符串往返属性
    test_sorted_property: 排序属性
    test_five_card_straight_property: 5张牌顺子判定属性
    test_two_pair_property: 两对判定属性
    test_compare_property: 比较只看牌型属性
"""

from typing import List

import pytest
from hypothesis import given, strategies as st

from poker_hand.core.card import Card
from poker_hand.core.enums import Rank, Suit
from poker_hand.evaluator.hand import Hand
from poker_hand.evaluator.hand_kind import Kind, compare_kinds


# Hypothesis策略定义
card_strategy = st.builds(Card, st.sampled_from(list(Rank)), st.sampled_from(list(Suit)))
five_cards_strategy = st.lists(card_strategy, min_size=5, max_size=5, unique=True)
short_hand_strategy = st.lists(card_strategy, min_size=1, max_size=5)


def _to_hand(cards: List[Card]) -> Hand:
    """把牌列表拼成字符串再构造手牌"""
    return Hand(" ".join(str(c) for c in cards))


@pytest.mark.property_test
@given(card_strategy)
def test_parse_round_trip_property(card: Card):
    """Property test: 任意牌的字符串都能解析回同一张牌"""
    assert Card.from_str(str(card)) == card


@pytest.mark.property_test
@given(five_cards_strategy)
def test_sorted_property(cards: List[Card]):
    """Property test: 手牌按点数升序，且同点数牌保持输入顺序"""
    hand = _to_hand(cards)
    assert list(hand.cards) == sorted(cards, key=lambda c: c.rank)


@pytest.mark.property_test
@given(short_hand_strategy)
def test_five_card_straight_property(cards: List[Card]):
    """Property test: 5张及以下的手牌顺子判定总为真"""
    assert _to_hand(cards).is_straight() is True


@pytest.mark.property_test
@given(five_cards_strategy)
def test_two_pair_property(cards: List[Card]):
    """Property test: 两对判定总为假"""
    assert _to_hand(cards).is_two_pair() is False


@pytest.mark.property_test
@given(five_cards_strategy)
def test_five_card_kind_property(cards: List[Card]):
    """Property test: 5张牌只会识别为同花顺、四条、葫芦或顺子"""
    assert _to_hand(cards).kind() in {
        Kind.STRAIGHT_FLUSH, Kind.FOUR_OF_A_KIND, Kind.FULL_HOUSE, Kind.STRAIGHT
    }


@pytest.mark.property_test
@given(five_cards_strategy)
def test_n_kind_monotonic_property(cards: List[Card]):
    """Property test: 计数只增不减，n张成立则更小的n也成立"""
    hand = _to_hand(cards)
    results = [hand.has_n_kind(n) for n in range(1, 6)]
    assert results[0] is True
    for smaller, larger in zip(results, results[1:]):
        assert smaller or not larger


@pytest.mark.property_test
@given(five_cards_strategy, five_cards_strategy)
def test_compare_property(cards1: List[Card], cards2: List[Card]):
    """Property test: 比较结果等于牌型比较结果，且反对称"""
    hand1 = _to_hand(cards1)
    hand2 = _to_hand(cards2)
    result = hand1.compare_to(hand2)
    assert result == compare_kinds(hand1.kind(), hand2.kind())
    assert hand2.compare_to(hand1) == -result
