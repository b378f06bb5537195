"""
扑克牌型识别异常定义
解析错误和手牌校验错误都同时是ValueError，便于调用方统一捕获
"""


class PokerHandError(Exception):
    """扑克牌型识别基础异常类"""
    pass


class ParseError(PokerHandError, ValueError):
    """卡牌字符串无法解析异常（点数或花色符号无效）"""
    pass


class InvalidHandError(PokerHandError, ValueError):
    """手牌校验失败异常（仅在严格模式下抛出：牌数不对或有重复牌）"""
    pass
