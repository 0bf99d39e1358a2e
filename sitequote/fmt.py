"""Display strings for measurements and money."""
from .config import M_PER_KM, FT_PER_MILE, CURRENCY_SYMBOL


def _grouped(value: float, max_decimals: int = 3) -> str:
    # "1,234.5" style: thousands separators, trailing zeros dropped
    s = f"{round(value, max_decimals):,.{max_decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s

def format_area(value: float, is_metric: bool = True) -> str:
    unit = "m²" if is_metric else "ft²"
    return f"{_grouped(value)} {unit}"

def format_distance(value: float, is_metric: bool = True) -> str:
    if is_metric:
        if value >= M_PER_KM:
            return f"{value / M_PER_KM:.2f} km"
        return f"{value:.2f} m"
    if value >= FT_PER_MILE:
        return f"{value / FT_PER_MILE:.2f} mi"
    return f"{value:.2f} ft"

def format_currency(amount: float) -> str:
    sign = "-" if round(amount, 2) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"
