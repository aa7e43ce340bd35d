"""
Rule that anonymizes URLs.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule
from log_anon_lib.anonymizer.rules.ip_rule import IpRule, Ip6Rule


class UrlRule(CatalogRule):
    """
    Detects URLs with an explicit scheme (``ftp``, ``tcp``, ``udp``, ``ws``,
    ``wss``, ``http``, ``https``) and replaces them with ``URL:<token>``.

    The host may be an IPv4 address, a bracketed IPv6 address or a
    (possibly internationalised) host name; user info, port, path, query and
    fragment are optional.  Plain host names without a scheme are left to
    :class:`~log_anon_lib.anonymizer.rules.dns_rule.DnsNameRule`.
    """

    TAG = "URL"

    _SCHEMA = r"((ftp|tcp|udp|wss?|https?):\/\/)"
    _USERNAME = r"(\S+(:\S*)?@)"
    _PATH = r"((\/|\?|#)[^\s]*)"
    _PORT = r"(:(\d{1,5}))"
    _SUBDOMAIN = r"((www\.)|([a-zA-Z0-9]+([-_\.]?[a-zA-Z0-9])*[a-zA-Z0-9]\.[a-zA-Z0-9]+))"
    _HOST_NAME = (
        r"(([a-zA-Z0-9]([a-zA-Z0-9_-]+)?[a-zA-Z0-9]([-\.][a-zA-Z0-9]+)*)|("
        + _SUBDOMAIN
        + r"?))?"
        r"(([a-zA-Z\x{00a1}-\x{ffff}0-9]+-?-?)*[a-zA-Z\x{00a1}-\x{ffff}0-9]+)"
        r"(?:\.([a-zA-Z\x{00a1}-\x{ffff}]{1,}))?"
    )

    REGEX = (
        _SCHEMA
        + _USERNAME
        + "?"
        + "(("
        + IpRule.REGEX
        + r"|(\[("
        + Ip6Rule.REGEX
        + r")\])|"
        + _HOST_NAME
        + r"))\.?"
        + _PORT
        + "?"
        + _PATH
        + "?"
    )
