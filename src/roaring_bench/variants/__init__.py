from .base import BitmapVariant
from .buffer import BufferVariant
from .roaring import RoaringVariant

# Registry of compared implementations, in report order
VARIANTS: dict[str, BitmapVariant] = {
    RoaringVariant.LABEL: RoaringVariant(),
    BufferVariant.LABEL: BufferVariant(),
}


def get_variant(label: str) -> BitmapVariant:
    try:
        return VARIANTS[label]
    except KeyError:
        raise ValueError(f"Unknown variant: {label!r} (known: {', '.join(VARIANTS)})") from None


__all__ = [
    "BitmapVariant",
    "BufferVariant",
    "RoaringVariant",
    "VARIANTS",
    "get_variant",
]
