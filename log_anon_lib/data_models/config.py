r"""
Anonymizer configuration model.

Describes an anonymizer in plain data so that it can be kept in a JSON or
YAML file::

    data_types: [Email, IP4, IP6, DNSName]
    domains: [local, corp]
    custom_rules:
      - tag: ticket
        regex: 'TICKET-\d+'
    salt: "fixed-for-tests"

Data type names are matched exactly; an unknown name raises
:class:`~log_anon_lib.exceptions.UnknownDataTypeError` (it is not wrapped in
a pydantic ``ValidationError``).
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, field_validator

from log_anon_lib.anonymizer.core.anonymizer import Anonymizer
from log_anon_lib.anonymizer.data_type import DataType, data_type_from_string


class CustomRuleModel(BaseModel):
    """
    Caller defined rule.

    Attributes
    ----------
    tag : str
        Prefix of the produced tokens.
    regex : str
        Python regular expression; compiled when the anonymizer is built.
    """

    tag: str
    regex: str


class AnonymizerConfig(BaseModel):
    """
    Declarative description of an :class:`Anonymizer`.

    Attributes
    ----------
    data_types : List[DataType]
        Catalog rules, in precedence order.
    domains : List[str]
        Top‑level domains registered after the catalog rules.
    custom_rules : List[CustomRuleModel]
        Caller defined rules registered last.
    salt : str | None
        Fixed salt (UTF‑8 encoded); a random one when omitted.
    """

    data_types: List[DataType] = []
    domains: List[str] = []
    custom_rules: List[CustomRuleModel] = []
    salt: Optional[str] = None

    @field_validator("data_types", mode="before")
    @classmethod
    def _parse_data_types(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [data_type_from_string(v) for v in value]
        return value

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AnonymizerConfig":
        return cls.model_validate(config or {})

    @classmethod
    def from_json(cls, text: str) -> "AnonymizerConfig":
        return cls.from_dict(json.loads(text))

    @classmethod
    def from_yaml(cls, text: str) -> "AnonymizerConfig":
        return cls.from_dict(yaml.safe_load(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AnonymizerConfig":
        """Load a ``.json``, ``.yaml`` or ``.yml`` file."""
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.from_yaml(text)
        return cls.from_json(text)

    def build_anonymizer(self) -> Anonymizer:
        """
        Create the described anonymizer.

        Raises
        ------
        InvalidPatternError
            If a custom rule does not compile.
        """
        anonymizer = Anonymizer.from_data_types(*self.data_types, salt=self.salt)
        anonymizer.add_domains(*self.domains)
        for rule in self.custom_rules:
            anonymizer.add_custom_rule(rule.tag, rule.regex)
        return anonymizer
