def mask_card(card_number) -> str:
    """
    Return masked PAN, keeping last 4 digits visible (e.g., **** **** **** 1234).
    """
    if not isinstance(card_number, str):
        return "****"
    last4 = card_number[-4:] if len(card_number) >= 4 else card_number
    return f"**** **** **** {last4}"
