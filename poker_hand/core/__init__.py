#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含枚举、卡牌、配置和异常
"""

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card
from .config import HandConfig
from .exceptions import PokerHandError, ParseError, InvalidHandError

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'get_all_suits', 'get_all_ranks',

    # 卡牌相关
    'Card',

    # 配置相关
    'HandConfig',

    # 异常类型
    'PokerHandError', 'ParseError', 'InvalidHandError',
]
