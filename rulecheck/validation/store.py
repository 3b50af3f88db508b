"""Rule Store: ordered rule lists keyed by (declaring class, attribute name).

Append-only during class definition, read-only during validation. Lookups
walk the ancestor chain so subclasses see the rules of their bases.
"""

from typing import Iterable, Optional

from rulecheck.validation.models import RuleDescriptor


class RuleStore:
    """In-memory registry of validation rules.

    Rules for a class are kept in registration order, and so are its
    attribute names. There is no locking: register everything before
    validating from several threads.
    """

    def __init__(self):
        # cls -> attribute name -> rules; dicts keep insertion order
        self._rules: dict[type, dict[str, list[RuleDescriptor]]] = {}

    def add_rule(self, cls: type, property_name: str, rule: RuleDescriptor) -> None:
        """Append a rule for (cls, property_name), creating the list if absent."""
        self._rules.setdefault(cls, {}).setdefault(property_name, []).append(rule)

    def get_own_rules(self, cls: type, property_name: str) -> list[RuleDescriptor]:
        """Rules registered on ``cls`` itself, ignoring its ancestors."""
        return list(self._rules.get(cls, {}).get(property_name, []))

    def get_rules(
        self,
        cls: type,
        property_name: str,
        ancestors: Optional[Iterable[type]] = None,
    ) -> list[RuleDescriptor]:
        """Union of rules along the ancestor chain, base classes first.

        Args:
            cls: Class to look up
            property_name: Attribute name
            ancestors: Explicit chain to walk (most derived first). Defaults to cls.__mro__

        Returns:
            Ordered rule list, empty when nothing is registered
        """
        rules: list[RuleDescriptor] = []
        for klass in self._chain(cls, ancestors):
            rules.extend(self._rules.get(klass, {}).get(property_name, []))
        return rules

    def property_names(self, cls: type, ancestors: Optional[Iterable[type]] = None) -> list[str]:
        """Attribute names with rules anywhere on the chain, each listed once."""
        names: dict[str, None] = {}
        for klass in self._chain(cls, ancestors):
            for name in self._rules.get(klass, {}):
                names.setdefault(name, None)
        return list(names)

    def has_rules(self, cls: type) -> bool:
        return any(klass in self._rules for klass in cls.__mro__)

    def clear(self, cls: Optional[type] = None) -> None:
        """Forget the rules of one class, or of every class."""
        if cls is None:
            self._rules.clear()
        else:
            self._rules.pop(cls, None)

    @staticmethod
    def _chain(cls: type, ancestors: Optional[Iterable[type]]) -> list[type]:
        chain = list(ancestors) if ancestors is not None else list(cls.__mro__)
        return list(reversed(chain))


# Module-level singleton
rule_store = RuleStore()
