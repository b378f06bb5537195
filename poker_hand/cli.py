"""扑克牌型识别命令行入口.

提供演示、单手牌型识别和两手牌比较三个子命令，使用click处理参数和输出。
"""

import logging

import click

from poker_hand.core import HandConfig, PokerHandError
from poker_hand.evaluator import Hand

logger = logging.getLogger(__name__)

# 演示用的两手牌
DEMO_FULL_HOUSE = "2S 2D 2H 4D 4C"
DEMO_STRAIGHT_FLUSH = "2D 3D 5D 4D 6D"

_COMPARE_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def _build_hand(ctx: click.Context, hand_str: str, param_hint: str) -> Hand:
    """按当前配置解析手牌，解析失败转换为click参数错误."""
    try:
        return Hand(hand_str, ctx.obj["config"])
    except PokerHandError as e:
        logger.debug("手牌解析失败: %r (%s)", hand_str, e)
        raise click.BadParameter(str(e), ctx=ctx, param_hint=param_hint)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="输出调试日志")
@click.option("--strict", is_flag=True, help="校验牌数和重复牌")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, strict: bool) -> None:
    """五张牌扑克牌型识别."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = HandConfig.strict_mode() if strict else HandConfig.default()


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """构造两手示例牌并输出几个判定结果."""
    h1 = _build_hand(ctx, DEMO_FULL_HOUSE, "demo")
    h2 = _build_hand(ctx, DEMO_STRAIGHT_FLUSH, "demo")
    click.echo(h1.has_n_kind(2))
    click.echo(h1.has_n_kind(3))
    click.echo(h2.is_straight())
    click.echo(h2.is_flush())


@cli.command()
@click.argument("hand")
@click.pass_context
def kind(ctx: click.Context, hand: str) -> None:
    """输出HAND的牌型，例如 "5C TD AH QS 2D"."""
    click.echo(_build_hand(ctx, hand, "HAND").kind().name)


@cli.command()
@click.argument("hand1")
@click.argument("hand2")
@click.pass_context
def compare(ctx: click.Context, hand1: str, hand2: str) -> None:
    """按牌型比较HAND1和HAND2."""
    first = _build_hand(ctx, hand1, "HAND1")
    second = _build_hand(ctx, hand2, "HAND2")
    result = first.compare_to(second)
    click.echo(f"{first.kind().name} {_COMPARE_SYMBOLS[result]} {second.kind().name}")


def main() -> None:
    """命令行主入口."""
    cli(obj={})


if __name__ == "__main__":
    main()
