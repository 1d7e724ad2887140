"""Receipt builder — display lines for a priced trip.

Turns a ``FareBreakdown`` into the lines shown under the estimated total.
Each optional line appears only when its input was present and positive:

  Estimated Total              10.940 TND
  Base fare:                    0.900 TND
  Distance (7.9 km):            4.600 TND
  Waiting (3 min):              0.460 TND
  Night rate (+50%):            8.940 TND
  Baggage (2 packages):         2.000 TND
"""

from __future__ import annotations

from pydantic import BaseModel

from taxi_fare.config.tariff import CURRENCY, DEFAULT_TARIFF, TOTAL_DECIMALS, TariffConfig
from taxi_fare.engine.fare import is_valid_positive, to_fixed
from taxi_fare.models.results import FareBreakdown
from taxi_fare.models.trip import TripInput

HEADLINE = "Estimated Total"


class ReceiptLine(BaseModel):
    label: str
    amount: float
    display: str
    highlight: bool = False
    """Set on the night-rate line, which shows the surcharged subtotal."""


class Receipt(BaseModel):
    headline: str = HEADLINE
    total: float
    total_display: str
    lines: list[ReceiptLine]


def format_amount(value: float, decimals: int = TOTAL_DECIMALS) -> str:
    """``0.9`` → ``"0.900 TND"``, rounded half-up like the total."""
    return f"{to_fixed(value, decimals)} {CURRENCY}"


def _quantity(value: float) -> str:
    return f"{value:.15g}"


def _night_label(tariff: TariffConfig) -> str:
    surcharge_pct = (tariff.night_multiplier - 1) * 100
    return f"Night rate (+{surcharge_pct:.15g}%)"


def _line(label: str, amount: float, highlight: bool = False) -> ReceiptLine:
    return ReceiptLine(label=label, amount=amount, display=format_amount(amount), highlight=highlight)


def build_receipt(
    trip: TripInput,
    breakdown: FareBreakdown,
    tariff: TariffConfig = DEFAULT_TARIFF,
) -> Receipt:
    """Build the receipt for a trip and its priced breakdown."""
    lines = [_line("Base fare", breakdown.base_fare)]

    if trip.distance_km is not None and trip.distance_km > 0:
        lines.append(_line(f"Distance ({_quantity(trip.distance_km)} km)", breakdown.distance_cost))

    if is_valid_positive(trip.waiting_minutes):
        lines.append(_line(f"Waiting ({_quantity(trip.waiting_minutes)} min)", breakdown.waiting_cost))

    if breakdown.night_rate:
        lines.append(_line(_night_label(tariff), breakdown.subtotal, highlight=True))

    if is_valid_positive(trip.baggage_count):
        unit = "packages" if trip.baggage_count > 1 else "package"
        lines.append(_line(f"Baggage ({_quantity(trip.baggage_count)} {unit})", breakdown.baggage_cost))

    return Receipt(
        total=breakdown.total,
        total_display=format_amount(breakdown.total),
        lines=lines,
    )


def render_receipt(receipt: Receipt) -> str:
    """Plain-text rendering, one entry per line."""
    rows = [(receipt.headline, receipt.total_display)]
    rows.extend((f"{line.label}:", line.display) for line in receipt.lines)
    width = max(len(label) for label, _ in rows) + 2
    return "\n".join(f"{label:<{width}}{display:>14}" for label, display in rows)
