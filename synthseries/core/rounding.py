from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_away(value: float, digits: int) -> float:
    """@brief Round to `digits` decimals, ties away from zero.

    @details Rounding works on the shortest decimal representation of the
    float, so `2.675` rounds to `2.68` rather than following its binary
    expansion. Negative zero is returned as `0.0`.

    @param value Finite number to round.
    @param digits Number of decimal digits to keep, non-negative.
    @return Rounded number.
    """
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0
