from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from tradereport.reporting.money import format_usd, quantize_money


def test_quantize_money_custom_places():
    value = Decimal("123.4567")
    assert quantize_money(value) == Decimal("123.46")
    assert quantize_money(value, "0.0001") == Decimal("123.4567")


def test_format_usd_pads_to_cents():
    assert format_usd(Decimal("5025")) == "$(5025.00)"
    assert format_usd(Decimal("3311.000")) == "$(3311.00)"
    assert format_usd(Decimal("0.1")) == "$(0.10)"


def test_half_cent_ties_round_up_in_any_context():
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_EVEN
        assert quantize_money(Decimal("0.125")) == Decimal("0.13")
        assert format_usd(Decimal("0.125")) == "$(0.13)"
        # 100.5 x 1 x 0.25
        assert format_usd(Decimal("25.125")) == "$(25.13)"
