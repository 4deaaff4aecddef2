import re
from decimal import Decimal
from math import isfinite, isnan, nan

# Longest leading decimal literal, the same prefix a browser's parseFloat accepts.
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def parse_amount(text: str) -> float:
    if (match := _FLOAT_PREFIX_RE.match(text)) is None:
        return nan

    return float(match.group(1).replace("Infinity", "inf"))


def amount_to_json(amount: float) -> float | None:
    return amount if isfinite(amount) else None


def format_amount(amount: float | None) -> str:
    if amount is None:
        return ""
    if isnan(amount):
        return "NaN"
    if not isfinite(amount):
        return "Infinity" if amount > 0 else "-Infinity"
    if amount.is_integer() and abs(amount) < 1e21:
        return str(int(amount))

    text = repr(amount)
    if "e" not in text:
        return text

    # Browsers switch to exponent notation below 1e-6 and write the exponent without zero padding.
    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if exponent >= -6:
        return format(Decimal(text), "f")

    return f"{mantissa}e{exponent:+d}"
