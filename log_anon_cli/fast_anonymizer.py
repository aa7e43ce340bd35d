"""
Anonymisation command‑line interface.

This module provides a small command‑line utility that reads text from a
file (or standard input), replaces every detected sensitive value with a
salted, type‑tagged token, and writes the processed text to a file (or
standard output).  The detected data types are chosen with ``--type`` (in
precedence order); without it the default set (Email, CreditCard, IP4, IP6,
URL) is used.

---

# Quick ways to run the script

1. Using a file

>>> log-anon app.log -o app.anon.log

*If you omit `-o …` the result will be printed on the console.*


2. Piping data

>>> cat app.log | log-anon -t IP4 -t Email -d corp

3. Reproducible tokens (e.g. to compare two anonymised files)

>>> log-anon --salt "shared secret" app.log

4. Hide whole values, one per line

>>> printf '10.10.1.1\\nalice@example.com\\n' | log-anon --hide --salt ""
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from log_anon_lib.constants import DEFAULT_DATA_TYPES
from log_anon_lib.utils.logger import prepare_logger
from log_anon_lib.anonymizer.core import Anonymizer
from log_anon_lib.anonymizer.data_type import DataType, data_types_from_strings
from log_anon_lib.data_models.config import AnonymizerConfig
from log_anon_lib.exceptions import LogAnonError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log-anon",
        description="Anonymize IPs, e-mails, card numbers and other data in text.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="data_types",
        action="append",
        metavar="NAME",
        help="Data type to detect, repeatable, highest precedence first. "
        f"One of: {', '.join(t.value for t in DataType)}.",
    )
    parser.add_argument(
        "-d",
        "--domain",
        dest="domains",
        action="append",
        default=[],
        metavar="TLD",
        help="Also anonymize DNS names under this top-level domain (repeatable).",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="JSON or YAML configuration; --type and --domain extend it.",
    )
    parser.add_argument(
        "--salt",
        help="Fixed salt, makes tokens reproducible between runs.",
    )
    parser.add_argument(
        "--hide",
        action="store_true",
        help="Treat every input line as a single value to hide.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics written to STDERR.",
    )
    return parser


def build_anonymizer(args: argparse.Namespace) -> Anonymizer:
    """
    Combine the optional configuration file with the command line options.

    Without ``--config`` and ``--type`` the default data types are used.
    """
    if args.config:
        config = AnonymizerConfig.from_file(args.config)
    else:
        config = AnonymizerConfig(
            data_types=[] if args.data_types else DEFAULT_DATA_TYPES
        )

    config = config.model_copy(
        update={
            "data_types": config.data_types
            + data_types_from_strings(args.data_types or []),
            "domains": config.domains + args.domains,
            "salt": config.salt if args.salt is None else args.salt,
        }
    )
    return config.build_anonymizer()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger("log_anon_cli", args.log_level)

    try:
        anonymizer = build_anonymizer(args)
    except (
        LogAnonError,
        OSError,
        json.JSONDecodeError,
        yaml.YAMLError,
        ValidationError,
    ) as e:
        parser.error(str(e))
    logger.debug(
        "Rules in use: %s", ", ".join(rule.tag for rule in anonymizer.rules)
    )

    try:
        if args.hide:
            for line in args.input:
                value = line.rstrip("\r\n")
                args.output.write(anonymizer.hide(value) + "\n")
        else:
            input_text = args.input.read()
            args.output.write(anonymizer.anonymize(input_text))
    finally:
        args.output.flush()


if __name__ == "__main__":
    main()
