from concurrent.futures import ThreadPoolExecutor

import pytest

from log_anon_lib import (
    Anonymizer,
    DataType,
    InvalidPatternError,
    UnknownDataTypeError,
    new_anonymizer,
)
from log_anon_lib.anonymizer.rules import DomainRule, IpRule

from vectors import (
    TOKEN_10_10_1_1,
    TOKEN_192_168_10_25,
    TOKEN_HIDE_FOLLOWING,
    TOKEN_MY_SECRET,
    TOKEN_TIGER_LOCAL,
)


def test_anonymize_ip_and_domain():
    anonymizer = Anonymizer.from_data_types("IP4", salt=b"").add_domains("local")
    out = anonymizer.anonymize("My address is 192.168.10.25 or tiger.local")
    assert out == f"My address is IP:{TOKEN_192_168_10_25} or DNS:{TOKEN_TIGER_LOCAL}"


def test_whole_text_substitution_against_reference(ip_anonymizer):
    out = ip_anonymizer.anonymize("My address is 192.168.10.25")
    assert out == "My address is IP:" + TOKEN_192_168_10_25


def test_hide_tags_matching_value(ip_anonymizer):
    assert ip_anonymizer.hide("10.10.1.1") == "IP:" + TOKEN_10_10_1_1


def test_hide_without_match_returns_bare_token(ip_anonymizer):
    assert ip_anonymizer.hide("My secret") == TOKEN_MY_SECRET


def test_hide_formats_non_string_values(ip_anonymizer):
    assert ip_anonymizer.hide(12345) == ip_anonymizer.tokenize("12345")
    assert ip_anonymizer.hide(None) == ip_anonymizer.tokenize("None")


def test_hide_treats_value_as_one_unit(ip_anonymizer):
    value = "from 10.0.0.1 to 10.0.0.2"
    assert ip_anonymizer.hide(value) == "IP:" + ip_anonymizer.tokenize(value)


def test_custom_rule():
    anonymizer = Anonymizer(salt=b"").add_custom_rule("hidden", r"hide\(.+\)")
    out = anonymizer.anonymize("Please hide(the following)!")
    assert out == "Please hidden:" + TOKEN_HIDE_FOLLOWING + "!"


@pytest.mark.parametrize(
    "order, expected_tag",
    [
        (["DNSName", "Email"], "DNS"),
        (["Email", "DNSName"], "Email"),
    ],
)
def test_hide_first_registered_rule_wins(order, expected_tag):
    anonymizer = Anonymizer.from_data_types(*order, salt=b"")
    hidden = anonymizer.hide("michael@yahoo.com")
    assert hidden == expected_tag + ":" + anonymizer.tokenize("michael@yahoo.com")


def test_hide_falls_through_to_later_rule():
    anonymizer = Anonymizer.from_data_types("IP4", "IP6", "DNSName", salt=b"")
    assert anonymizer.hide("1.2.3.4").startswith("IP:")
    assert anonymizer.hide("1:2:3:4:5:6:7:8").startswith("IP6:")
    assert anonymizer.hide("www.com").startswith("DNS:")


def test_anonymize_order_dns_first():
    anonymizer = Anonymizer.from_data_types("DNSName", "Email", salt=b"")
    text = "My email is michael@yahoo.com - please write me a letter"
    token = anonymizer.tokenize("yahoo.com")
    expected = f"My email is michael@DNS:{token} - please write me a letter"
    assert anonymizer.anonymize(text) == expected


def test_anonymize_order_email_first():
    anonymizer = Anonymizer.from_data_types("Email", "DNSName", salt=b"")
    text = "My email is michael@yahoo.com - please write me a letter"
    token = anonymizer.tokenize("michael@yahoo.com")
    expected = f"My email is Email:{token} - please write me a letter"
    assert anonymizer.anonymize(text) == expected


def test_later_rule_sees_tokens_of_earlier_rule():
    anonymizer = (
        Anonymizer(salt=b"")
        .add_custom_rule("A", "secret")
        .add_custom_rule("B", "A:")
    )
    out = anonymizer.anonymize("secret")
    assert out == "B:" + anonymizer.tokenize("A:") + anonymizer.tokenize("secret")


def test_same_value_same_token():
    anonymizer = Anonymizer.from_data_types("IP4")
    out = anonymizer.anonymize("10.0.0.1 10.0.0.2 10.0.0.1")
    first, second, third = out.split()
    assert first == third
    assert first != second


def test_determinism():
    anonymizer = Anonymizer.from_data_types("Email", "IP4", "URL")
    text = "GET http://10.0.0.1/x by bob@example.org"
    assert anonymizer.anonymize(text) == anonymizer.anonymize(text)
    assert anonymizer.hide("bob@example.org") == anonymizer.hide("bob@example.org")


def test_salt_changes_token_but_not_tag():
    first = Anonymizer.from_data_types("IP4", salt=b"one")
    second = Anonymizer.from_data_types("IP4", salt=b"two")
    a, b = first.hide("10.10.1.1"), second.hide("10.10.1.1")
    assert a.startswith("IP:") and b.startswith("IP:")
    assert a != b


def test_random_salt_by_default():
    assert len(Anonymizer().salt) == 20
    assert Anonymizer().salt != Anonymizer().salt


def test_set_salt_is_chainable_and_accepts_text():
    anonymizer = Anonymizer.from_data_types("IP4")
    assert anonymizer.set_salt("") is anonymizer
    assert anonymizer.salt == b""
    assert anonymizer.hide("10.10.1.1") == "IP:" + TOKEN_10_10_1_1


def test_caller_order_is_kept():
    anonymizer = Anonymizer.from_data_types("IP6", DataType.EMAIL, "IP4")
    assert [r.tag for r in anonymizer.rules] == ["IP6", "Email", "IP"]


def test_unknown_data_type_builds_nothing():
    with pytest.raises(UnknownDataTypeError) as exc_info:
        new_anonymizer("IP4", "NotARealType")
    assert exc_info.value.name == "NotARealType"


def test_invalid_custom_pattern_is_rejected_at_registration():
    anonymizer = Anonymizer.from_data_types("IP4")
    with pytest.raises(InvalidPatternError):
        anonymizer.add_custom_rule("bad", "(unclosed")
    assert len(anonymizer.rules) == 1


def test_add_rule_and_domains():
    anonymizer = Anonymizer(rules=[IpRule()]).add_domains("local", "corp")
    tags = [(type(r), r.tag) for r in anonymizer.rules]
    assert tags == [(IpRule, "IP"), (DomainRule, "DNS"), (DomainRule, "DNS")]
    assert [r.tld for r in anonymizer.rules[1:]] == ["local", "corp"]


def test_rules_snapshot_is_not_affected_by_appends():
    anonymizer = Anonymizer.from_data_types("IP4")
    snapshot = anonymizer.rules
    anonymizer.add_domains("local")
    assert len(snapshot) == 1
    assert len(anonymizer.rules) == 2


def test_no_rules():
    anonymizer = Anonymizer(salt=b"")
    assert anonymizer.anonymize("10.10.1.1") == "10.10.1.1"
    assert anonymizer.hide("10.10.1.1") == TOKEN_10_10_1_1


def test_empty_text(ip_anonymizer):
    assert ip_anonymizer.anonymize("") == ""


def test_anonymize_payload(ip_anonymizer):
    payload = {
        "client": "10.10.1.1",
        "10.10.1.1": ["10.10.1.1", 7, None],
        "count": 3,
    }
    token = "IP:" + TOKEN_10_10_1_1
    assert ip_anonymizer.anonymize_payload(payload) == {
        "client": token,
        token: [token, 7, None],
        "count": 3,
    }
    assert payload["client"] == "10.10.1.1"


def test_anonymize_payload_leaves_other_containers(ip_anonymizer):
    assert ip_anonymizer.anonymize_payload(("10.10.1.1",)) == ("10.10.1.1",)
    assert ip_anonymizer.anonymize_payload(b"10.10.1.1") == b"10.10.1.1"


def test_concurrent_use_is_consistent():
    anonymizer = Anonymizer.from_data_types("Email", "IP4", "IP6", "URL")
    lines = [
        f"host 10.0.{i % 7}.{i % 13} user u{i % 5}@example.com" for i in range(200)
    ]
    expected = [anonymizer.anonymize(line) for line in lines]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(anonymizer.anonymize, lines)) == expected
