"""Rule registry: finds every CoachingRule under ``coach_engine.rules``."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Iterator

from coach_engine.rules.base import CoachingRule

logger = logging.getLogger(__name__)

RULES_PACKAGE = "coach_engine.rules"


class RuleRegistry:
    """Holds one instance of each coaching rule, keyed by ``rule_id``.

    ``discover_rules()`` walks the rules package (planning/, recovery/,
    progression/) and instantiates each concrete CoachingRule it finds.
    Dropping a module into one of those folders is enough to enable it.
    """

    def __init__(self) -> None:
        self._rules: dict[str, CoachingRule] = {}

    def discover_rules(self, package: str = RULES_PACKAGE) -> None:
        """Import every module below *package* and register its rule classes."""
        root = importlib.import_module(package)
        for module in _walk_modules(root):
            for rule_cls in _rule_classes(module):
                self.register(rule_cls())
        logger.debug("Discovered %d coaching rules", len(self._rules))

    def register(self, rule: CoachingRule) -> None:
        """Add *rule*, replacing any rule already registered under its id."""
        if rule.rule_id in self._rules:
            logger.debug("Replacing registered rule %s", rule.rule_id)
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> CoachingRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[CoachingRule]:
        """Registered rules in evaluation order (ascending ``order``)."""
        return sorted(self._rules.values(), key=lambda r: r.order)

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules)


def _walk_modules(package: ModuleType) -> Iterator[ModuleType]:
    for info in pkgutil.walk_packages(package.__path__, prefix=package.__name__ + "."):
        yield importlib.import_module(info.name)


def _rule_classes(module: ModuleType) -> Iterator[type[CoachingRule]]:
    """Concrete CoachingRule subclasses defined in *module* itself."""
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if (
            issubclass(obj, CoachingRule)
            and obj is not CoachingRule
            and not inspect.isabstract(obj)
            and obj.__module__ == module.__name__
        ):
            yield obj
