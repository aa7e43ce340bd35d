"""
Top‑level package for the anonymizer engine.

The public API currently consists of:
- Anonymizer, AnonymizingWriter (core)
- DetectorRuleI (interface)
- DataType (catalog of built-in rules)
- Concrete rule implementations (EmailRule, IpRule, DomainRule, …)
"""
