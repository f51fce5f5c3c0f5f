"""
Dragonboat Unit Converter

Weight is stored in kilograms and displayed in kilograms or pounds.
All conversions are explicit and reversible.
"""

from typing import Optional, Union

from .constants import KG_TO_LB
from .enums import WeightUnit
from ..errors.taxonomy import UnitConversionError


# value_in_to_unit = value_in_from_unit * multiplier
UNIT_CONVERSIONS = {
    ("kg", "lb"): KG_TO_LB,
    ("lb", "kg"): 1.0 / KG_TO_LB,
}

# Accepted spellings for each unit
UNIT_ALIASES = {
    "kg": "kg",
    "kgs": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "metric": "kg",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "imperial": "lb",
}


def normalize_unit(unit: Union[str, WeightUnit]) -> WeightUnit:
    """
    Resolve a unit spelling to a WeightUnit.

    Raises:
        UnitConversionError: If the unit is not a weight unit we know.
    """
    if isinstance(unit, WeightUnit):
        return unit
    key = UNIT_ALIASES.get(str(unit).strip().lower())
    if key is None:
        raise UnitConversionError(f"Unsupported weight unit: {unit!r}")
    return WeightUnit(key)


class UnitConverter:
    """
    Deterministic weight converter.

    All conversions use explicit factors. No implicit conversions.
    """

    @staticmethod
    def normalize(value: float, from_unit: Union[str, WeightUnit], to_unit: Union[str, WeightUnit]) -> float:
        """
        Convert value from one unit to another.

        Args:
            value: The numeric value to convert
            from_unit: Source unit (e.g., "kg")
            to_unit: Target unit (e.g., "lb")

        Returns:
            Converted value

        Raises:
            UnitConversionError: If conversion not supported
        """
        source = normalize_unit(from_unit)
        target = normalize_unit(to_unit)
        if source == target:
            return value
        return value * UNIT_CONVERSIONS[(source.value, target.value)]

    @staticmethod
    def kg_to_display(weight_kg: Optional[float], unit: Union[str, WeightUnit], decimals: Optional[int] = 1) -> Optional[float]:
        """Convert a stored kilogram weight to the display unit."""
        if weight_kg is None:
            return None
        converted = UnitConverter.normalize(float(weight_kg), WeightUnit.KG, unit)
        return round(converted, decimals) if decimals is not None else converted

    @staticmethod
    def display_to_kg(weight: Optional[float], unit: Union[str, WeightUnit]) -> Optional[float]:
        """Convert a weight entered in the display unit back to kilograms."""
        if weight is None:
            return None
        return UnitConverter.normalize(float(weight), unit, WeightUnit.KG)


def format_weight(weight_kg: Optional[float], unit: Union[str, WeightUnit] = WeightUnit.LB, decimals: int = 1) -> str:
    """
    Format a kilogram weight for display, e.g. "154.3 lb" or "70.0 kg".

    Returns an empty string when there is no weight to show.
    """
    converted = UnitConverter.kg_to_display(weight_kg, unit, decimals)
    if converted is None:
        return ""
    return f"{converted:.{decimals}f} {normalize_unit(unit).value}"
