from __future__ import annotations

from typing import List, Optional, Sequence, Type

from .pipeline import GrammarPipeline, GrammarRule

RuleClass = Type[GrammarRule]


def _rule_name(rule_cls: RuleClass) -> str:
    if not (isinstance(rule_cls, type) and issubclass(rule_cls, GrammarRule)):
        raise TypeError(f"{rule_cls!r} is not a GrammarRule subclass")
    name = getattr(rule_cls, "name", None)
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{rule_cls.__name__} must define a non-empty 'name'")
    return name


class RuleRegistry:
    """Ordered set of grammar rule classes, keyed by each rule's ``name``.

    ``version`` changes on every mutation so cached pipelines can be rebuilt.
    """

    def __init__(self) -> None:
        self._rules: List[RuleClass] = []
        self._version: int = 0

    def register(
        self,
        rule_cls: RuleClass,
        *,
        before: Optional[str] = None,
        after: Optional[str] = None,
        replace: bool = False,
    ) -> None:
        if before and after:
            raise ValueError("Pass either 'before' or 'after', not both")
        name = _rule_name(rule_cls)
        names = self.list_rule_names()
        if name in names:
            if not replace:
                raise ValueError(f"Rule '{name}' is already registered")
            self._rules = [rule for rule in self._rules if rule.name != name]
            names = self.list_rule_names()

        anchor = before or after
        if anchor is None:
            self._rules.append(rule_cls)
        elif anchor not in names:
            raise ValueError(f"Unknown rule '{anchor}'")
        else:
            index = names.index(anchor) + (1 if after else 0)
            self._rules.insert(index, rule_cls)
        self._version += 1

    def unregister(self, name: str) -> None:
        remaining = [rule for rule in self._rules if rule.name != name]
        if len(remaining) != len(self._rules):
            self._rules = remaining
            self._version += 1

    def create_pipeline(self) -> GrammarPipeline:
        return GrammarPipeline([rule_cls() for rule_cls in self._rules])

    def list_rule_names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    @property
    def rules(self) -> Sequence[RuleClass]:
        return tuple(self._rules)

    @property
    def version(self) -> int:
        return self._version


default_registry = RuleRegistry()
