"""Number formatting shared by the templates."""


def format_amount(value) -> str:
    """Render a money amount with thousands separators, dropping a ``.0`` tail."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value:,}"


def format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
