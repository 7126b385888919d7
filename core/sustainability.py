# =============================================================================
# core/sustainability.py  —  Emission Estimator (shipping + packaging CO2e)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Two independent pure functions plus a convenience that combines them.
#
#   Shipping:   tonne_km = (weight_kg / 1000) * distance_km
#               grams    = tonne_km * factor[transport]     (g CO2e / t·km)
#   Packaging:  grams    = packaging_weight_kg * factor[packaging] (g / kg)
#
#   Both results are floored at zero.
#
# CAVEAT:
#   The factors below are rough illustrative defaults, not calibrated per
#   carrier, lane or material.  Every footprint report carries that note.
#
# There is exactly one shipping model: the per-mode tonne-km model.
# =============================================================================

import math

from core.models import FootprintReport, PackagingEstimate, ShippingEstimate

TRANSPORT_FACTORS_G_PER_TKM: dict[str, float] = {
    "air": 500,
    "road": 120,
    "rail": 30,
    "sea": 10,
}

PACKAGING_FACTORS_G_PER_KG: dict[str, float] = {
    "plastic": 3300,
    "paper": 800,
    "cardboard": 700,
    "mixed": 1500,
}

DEFAULT_WEIGHT_KG = 0.5
DEFAULT_DISTANCE_KM = 800
DEFAULT_TRANSPORT = "road"
DEFAULT_PACKAGING = "cardboard"
DEFAULT_PACKAGING_WEIGHT_KG = 0.2

FOOTPRINT_NOTES = (
    "Approximate footprint only. Use calibrated factors per carrier/lane/materials "
    "for production accuracy."
)


def _factor(table: dict[str, float], key: str, kind: str) -> float:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Unknown {kind} {key!r}; expected one of {sorted(table)}") from None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def to_kg_co2e(grams: float) -> float:
    """Grams → kilograms, three decimal places."""
    return round(grams / 1000, 3)


def estimate_shipping_co2e(weight_kg: float, distance_km: float, transport: str) -> ShippingEstimate:
    factor = _factor(TRANSPORT_FACTORS_G_PER_TKM, transport, "transport mode")
    tonne_km = (weight_kg / 1000) * distance_km
    return ShippingEstimate(
        grams_co2e=max(0.0, tonne_km * factor),
        tonne_km=tonne_km,
        factor_g_per_tkm=factor,
    )


def estimate_packaging_co2e(
    packaging: str,
    packaging_weight_kg: float = DEFAULT_PACKAGING_WEIGHT_KG,
) -> PackagingEstimate:
    factor = _factor(PACKAGING_FACTORS_G_PER_KG, packaging, "packaging type")
    return PackagingEstimate(
        grams_co2e=max(0.0, packaging_weight_kg * factor),
        packaging_weight_kg=packaging_weight_kg,
        factor_g_per_kg=factor,
    )


def estimate_footprint(
    weight_kg: float = DEFAULT_WEIGHT_KG,
    distance_km: float = DEFAULT_DISTANCE_KM,
    transport: str = DEFAULT_TRANSPORT,
    packaging: str = DEFAULT_PACKAGING,
    packaging_weight_kg: float = DEFAULT_PACKAGING_WEIGHT_KG,
) -> FootprintReport:
    """Combine the shipping and packaging estimates for one parcel.

    Example:
        0.6 kg over 1200 km by road in 0.25 kg of cardboard
        → 86.4 g + 175 g → 261 g / 0.261 kg
    """
    shipping = estimate_shipping_co2e(weight_kg, distance_km, transport)
    packaging_estimate = estimate_packaging_co2e(packaging, packaging_weight_kg)
    total_g = shipping.grams_co2e + packaging_estimate.grams_co2e

    return FootprintReport(
        weight_kg=weight_kg,
        distance_km=distance_km,
        transport=transport,
        packaging=packaging,
        packaging_weight_kg=packaging_weight_kg,
        shipping=shipping,
        packaging_estimate=packaging_estimate,
        total_g_co2e=round_half_up(total_g),
        total_kg_co2e=to_kg_co2e(total_g),
        notes=FOOTPRINT_NOTES,
    )
