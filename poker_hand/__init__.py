#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
五张牌扑克牌型识别

模块结构：
- core: 核心基础组件（枚举、卡牌、配置、异常）
- evaluator: 牌型识别（手牌、牌型顺序、比较）
- cli: 命令行演示入口
"""

from .core import (
    Suit, Rank, Card, HandConfig,
    PokerHandError, ParseError, InvalidHandError
)

from .evaluator import (
    Hand, Kind, KIND_ORDER, compare_kinds, get_kind_name
)

__version__ = "1.0.0"

__all__ = [
    # 核心基础组件
    'Suit', 'Rank', 'Card', 'HandConfig',
    'PokerHandError', 'ParseError', 'InvalidHandError',

    # 牌型识别
    'Hand', 'Kind', 'KIND_ORDER', 'compare_kinds', 'get_kind_name',
]
