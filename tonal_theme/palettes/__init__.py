from .core_palette import CorePalette
from .tonal_palette import TonalPalette

__all__ = ["CorePalette", "TonalPalette"]
