"""
手牌解析配置
默认宽松：不校验牌数和重复牌
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HandConfig:
    """
    手牌解析配置类
    """
    strict: bool = False    # 严格模式：校验牌数和重复牌
    hand_size: int = 5      # 严格模式下要求的牌数

    def __post_init__(self):
        """验证配置的有效性"""
        if not isinstance(self.hand_size, int) or isinstance(self.hand_size, bool):
            raise TypeError(f"牌数必须是整数: {self.hand_size!r}")

        if self.hand_size < 1:
            raise ValueError(f"牌数必须大于0: {self.hand_size}")

    @classmethod
    def default(cls) -> 'HandConfig':
        """创建默认的宽松配置"""
        return cls()

    @classmethod
    def strict_mode(cls, hand_size: int = 5) -> 'HandConfig':
        """创建严格校验的配置"""
        return cls(strict=True, hand_size=hand_size)
