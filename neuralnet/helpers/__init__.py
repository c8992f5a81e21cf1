from .kahan import KahanSummer, kahan_sum
from .logger import configure_logging

__all__ = [
    "KahanSummer",
    "kahan_sum",
    "configure_logging",
]
