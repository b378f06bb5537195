# 扑克牌型识别模块
# 提供手牌解析、牌型识别和按牌型比较功能

from .hand_kind import Kind, KIND_ORDER, KIND_NAMES, get_kind_name, compare_kinds
from .hand import Hand

__all__ = [
    'Kind',
    'KIND_ORDER',
    'KIND_NAMES',
    'get_kind_name',
    'compare_kinds',
    'Hand'
]
