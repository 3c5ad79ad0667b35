"""Currency formatting shared by the explainer and the display tables."""

import math


def format_brl(value) -> str:
    """Format as Brazilian currency, e.g. R$ 1.234,56."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "—"
    text = f"{value:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {text}"
