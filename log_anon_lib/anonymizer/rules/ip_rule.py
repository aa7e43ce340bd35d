"""
Rules that anonymize IPv4 and IPv6 addresses.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class IpRule(CatalogRule):
    """
    Detects dotted‑quad IPv4 addresses and replaces them with ``IP:<token>``.

    The first octet rejects ``0`` and the ``224‑239`` multicast range; the
    remaining octets accept ``0‑255``.
    """

    TAG = "IP"

    REGEX = (
        r"([1-9]\d?|1\d\d|2[01]\d|22[0-3]|24\d|25[0-5])"
        r"(\.(\d{1,2}|1\d\d|2[0-4]\d|25[0-5])){2}"
        r"(?:\.([0-9]\d?|1\d\d|2[0-4]\d|25[0-5]))"
    )


class Ip6Rule(CatalogRule):
    """
    Detects IPv6 addresses in every textual form (full, compressed, link‑local
    with zone index, IPv4‑mapped and IPv4‑embedded) and replaces them with
    ``IP6:<token>``.
    """

    TAG = "IP6"

    _IPv4_TAIL = (
        r"((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
        r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
    )

    BLOCKS = [
        r"([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}",  # 1:2:3:4:5:6:7:8
        r"([0-9a-fA-F]{1,4}:){1,7}:",  # 1::  1:2:3:4:5:6:7::
        r"([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}",  # 1::8  1:2:3:4:5:6::8
        r"([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}",  # 1::7:8  1:2:3:4:5::8
        r"([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}",  # 1::6:7:8  1:2:3:4::8
        r"([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}",  # 1::5:6:7:8  1:2:3::8
        r"([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}",  # 1::4:5:6:7:8  1:2::8
        r"[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})",  # 1::3:4:5:6:7:8  1::8
        r":((:[0-9a-fA-F]{1,4}){1,7}|:)",  # ::2:3:4:5:6:7:8  ::8  ::
        r"fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}",  # fe80::7:8%eth0
        r"::(ffff(:0{1,4}){0,1}:){0,1}" + _IPv4_TAIL,  # ::ffff:255.255.255.255
        r"([0-9a-fA-F]{1,4}:){1,4}:" + _IPv4_TAIL,  # 64:ff9b::192.0.2.33
    ]

    REGEX = "|".join(BLOCKS)
