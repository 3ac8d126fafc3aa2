import re
from decimal import Decimal, InvalidOperation

_BINARY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024) ** 2,
    "Gi": Decimal(1024) ** 3,
    "Ti": Decimal(1024) ** 4,
    "Pi": Decimal(1024) ** 5,
    "Ei": Decimal(1024) ** 6,
}

_DECIMAL_SUFFIXES = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}

_QUANTITY_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(Ki|Mi|Gi|Ti|Pi|Ei|[numkMGTPE])?$")


def parse_quantity(quantity) -> Decimal:
    """
    Parse a Kubernetes resource quantity (e.g. '250m', '1Gi', '123456n', '1e3')
    into a Decimal.

    Raises:
        ValueError: If the value is not a valid quantity.
    """
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)
    if quantity is None:
        raise ValueError("Quantity must not be None")

    match = _QUANTITY_RE.match(str(quantity).strip())
    if not match:
        raise ValueError(f"Invalid quantity: '{quantity}'")

    number, suffix = match.group(1), match.group(2) or ""
    try:
        value = Decimal(number)
    except InvalidOperation as e:
        raise ValueError(f"Invalid quantity: '{quantity}'") from e

    if suffix in _BINARY_SUFFIXES:
        return value * _BINARY_SUFFIXES[suffix]
    return value * _DECIMAL_SUFFIXES[suffix]


def quantity_to_float(quantity) -> float:
    """Approximate a Kubernetes quantity as a float. Precision loss is accepted."""
    return float(parse_quantity(quantity))
