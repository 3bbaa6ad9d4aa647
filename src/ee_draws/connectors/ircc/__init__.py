"""IRCC Express Entry rounds feed connector."""

from .connector import IrccConnector
from .constants import CATEGORY_RULES, IRCC_ROUNDS_URL
from .normalizer import normalize_entry, normalize_rounds

__all__ = [
    "CATEGORY_RULES",
    "IRCC_ROUNDS_URL",
    "IrccConnector",
    "normalize_entry",
    "normalize_rounds",
]
