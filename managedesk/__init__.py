"""Interactive record-keeping desks for a bank, a car showroom, a library and a university."""

__version__ = "0.1.0"

__all__ = [
    "bank",
    "bank_models",
    "formatting",
    "library",
    "library_models",
    "showroom",
    "showroom_models",
    "university",
]