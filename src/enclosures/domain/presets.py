"""Catalog of accessory presets (common graphics cards).

Dimensions are in inches, tdp in watts.
"""

from __future__ import annotations

from .value_objects import AccessorySlot

ACCESSORY_PRESETS: dict[str, AccessorySlot] = {
    "RTX 3060": AccessorySlot("RTX 3060", length=9.5, height=4.4, width=2.0, tdp=170),
    "RTX 3070": AccessorySlot("RTX 3070", length=10.5, height=4.4, width=2.0, tdp=220),
    "RTX 3080": AccessorySlot("RTX 3080", length=11.2, height=4.4, width=2.0, tdp=320),
    "RTX 3090": AccessorySlot("RTX 3090", length=12.3, height=5.4, width=2.5, tdp=350),
    "RTX 4070": AccessorySlot("RTX 4070", length=10.8, height=4.4, width=2.0, tdp=200),
    "RTX 4080": AccessorySlot("RTX 4080", length=11.9, height=5.0, width=2.3, tdp=320),
    "RTX 4090": AccessorySlot("RTX 4090", length=13.5, height=5.9, width=2.7, tdp=450),
    "Custom": AccessorySlot("Custom", length=10.5, height=4.4, width=2.0, tdp=250),
}


def get_preset(name: str) -> AccessorySlot:
    """Look up a preset by name, ignoring case.

    Raises:
        KeyError: If no preset matches.
    """
    for key, slot in ACCESSORY_PRESETS.items():
        if key.lower() == name.strip().lower():
            return slot
    available = ", ".join(ACCESSORY_PRESETS)
    raise KeyError(f"Unknown accessory preset '{name}'. Available: {available}")


__all__ = ["ACCESSORY_PRESETS", "get_preset"]
