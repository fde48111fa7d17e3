"""Currency arithmetic."""


def convert(amount: float, rate: float) -> float:
    """Return the amount expressed in the target currency."""
    return amount * rate