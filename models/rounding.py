from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext


@dataclass(frozen=True)
class RoundingPolicy:
    """Round-half-up to a fixed number of decimal places, for display only."""
    places: int = 2

    def apply(self, value: float) -> Decimal:
        # repr() keeps the shortest decimal form, so 2.675 rounds to 2.68
        number = Decimal(repr(float(value)))
        if not number.is_finite():
            return number
        quantum = Decimal(1).scaleb(-self.places)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, number.adjusted() + self.places + 2)
            return number.quantize(quantum, rounding=ROUND_HALF_UP)
