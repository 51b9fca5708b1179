"""Centralized unit conversion utilities."""

from __future__ import annotations

CM3_PER_DM3: float = 1000.0


def ml_to_l(volume_ml: float) -> float:
    """Convert a volume from mL (cm^3) to L (dm^3).

    Args:
        volume_ml (float): Volume in millilitres (numerically equal to cm^3).

    Returns:
        float: Volume in litres (numerically equal to dm^3).

    Note:
        Every diluted concentration in the chemistry layer is computed from
        litre volumes so concentration units stay mol dm^-3 throughout.
    """
    return float(volume_ml) / CM3_PER_DM3
