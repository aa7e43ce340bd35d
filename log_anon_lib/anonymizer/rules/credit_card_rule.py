"""
Rule that anonymizes payment card numbers.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class CreditCardRule(CatalogRule):
    """
    Detects card numbers by issuer prefix and length (Visa, Mastercard,
    Discover, American Express, Diners Club, JCB, UnionPay) and replaces them
    with ``CreditCard:<token>``.  The Luhn checksum is not verified.
    """

    TAG = "CreditCard"

    REGEX = (
        r"(?:4[0-9]{12}(?:[0-9]{3})?"  # Visa
        r"|5[1-5][0-9]{14}"  # Mastercard
        r"|(222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"  # Mastercard 2-series
        r"|6(?:011|5[0-9][0-9])[0-9]{12}"  # Discover
        r"|3[47][0-9]{13}"  # American Express
        r"|3(?:0[0-5]|[68][0-9])[0-9]{11}"  # Diners Club
        r"|(?:2131|1800|35\d{3})\d{11}"  # JCB
        r"|6[27][0-9]{14})"  # UnionPay
    )
