def format_currency(amount: float) -> str:
    """
    Formats `amount` as dollars with thousands separators: 95000 -> "$95,000.00".
    """
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
