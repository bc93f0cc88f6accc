"""Display formatting for money and counts, with privacy masking."""

MASK = "***"


def format_currency(value: float, privacy: bool = False, symbol: str = "R$") -> str:
    """Render ``value`` as e.g. ``R$ 25.00``, or the mask in privacy mode."""
    if privacy:
        return MASK
    return f"{symbol} {value:.2f}"


def format_count(value: int, privacy: bool = False) -> str:
    return MASK if privacy else str(value)
