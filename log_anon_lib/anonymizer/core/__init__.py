from log_anon_lib.anonymizer.core.rule_interface import DetectorRuleI
from log_anon_lib.anonymizer.core.anonymizer import Anonymizer
from log_anon_lib.anonymizer.core.writer import AnonymizingWriter

__all__ = ["DetectorRuleI", "Anonymizer", "AnonymizingWriter"]
