"""Shared base types for builtin rule definitions."""


from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from enum import StrEnum
from typing import Generic, Mapping, Sequence, TypeVar, cast, get_args, get_origin

from lint_guard.source import SourceDocument, Violation


class RuleType(StrEnum):
    """Documentation category a rule reports under by default."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class RuleDocs:
    """Documentation metadata read by plugin and catalog tooling."""

    description: str
    type: RuleType
    recommended: bool = True


@dataclass(frozen=True)
class RuleMeta:
    """Metadata block exposed as ``rule.meta``."""

    docs: RuleDocs
    fixable: bool = False


@dataclass
class RuleConfig:
    """Base config container inherited by concrete rule configs."""

    def to_dict(self) -> dict[str, object]:
        """Serialize the config dataclass to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(
        cls: type["ConfigFromDictT"], raw: Mapping[str, object]
    ) -> "ConfigFromDictT":
        """Instantiate a config dataclass from a plain dictionary."""
        return cls(**dict(raw))

    @classmethod
    def options_to_dict(cls, options: Sequence[object]) -> dict[str, object]:
        """Map positional rule options onto config field names.

        Options fill dataclass fields in declaration order; a trailing
        mapping is merged in by field name.
        """
        positional = list(options)
        named: dict[str, object] = {}
        if positional and isinstance(positional[-1], Mapping):
            named = dict(cast(Mapping[str, object], positional.pop()))
        field_names = [item.name for item in fields(cls)]
        if len(positional) > len(field_names):
            raise ValueError(
                f"{cls.__name__} accepts at most {len(field_names)} options, "
                f"got {len(positional)}"
            )
        unknown = sorted(set(named) - set(field_names))
        if unknown:
            raise ValueError(f"{cls.__name__} has no option(s): {', '.join(unknown)}")
        raw: dict[str, object] = dict(zip(field_names, positional))
        raw.update(named)
        return raw


ConfigT = TypeVar("ConfigT", bound=RuleConfig)
ConfigFromDictT = TypeVar("ConfigFromDictT", bound=RuleConfig)
RuleFromDictT = TypeVar("RuleFromDictT", bound="Rule[RuleConfig]")


class Rule(ABC, Generic[ConfigT]):
    """Base rule class exposing metadata and a verify pass."""

    name: str = "rule"
    meta: RuleMeta = RuleMeta(
        docs=RuleDocs(description="Base rule.", type=RuleType.WARNING)
    )

    def __init__(self, config: ConfigT) -> None:
        """Initialize a rule with explicit configuration."""
        self.config = config

    def to_dict(self) -> dict[str, object]:
        """Serialize this rule's config as a plain dictionary."""
        return self.config.to_dict()

    @classmethod
    def from_dict(
        cls: type["RuleFromDictT"], raw: Mapping[str, object]
    ) -> "RuleFromDictT":
        """Instantiate a rule from a plain config dictionary."""
        config_type = cls._resolve_config_type()
        config = config_type.from_dict(raw)
        return cls(config)

    def with_options(self, options: Sequence[object]) -> "Rule[ConfigT]":
        """Return a copy configured from the options after a rule's severity."""
        if not options:
            return self
        config_type = self._resolve_config_type()
        raw = {**self.config.to_dict(), **config_type.options_to_dict(options)}
        return type(self)(cast(ConfigT, config_type.from_dict(raw)))

    @classmethod
    def _resolve_config_type(cls) -> type[RuleConfig]:
        """Infer the concrete config type from ``Rule[Config]`` inheritance."""
        for base in getattr(cls, "__orig_bases__", ()):
            if get_origin(base) is Rule:
                args = get_args(base)
                if len(args) != 1:
                    break
                config_type = args[0]
                if isinstance(config_type, type) and issubclass(
                    config_type, RuleConfig
                ):
                    return cast(type[RuleConfig], config_type)
                break
        raise TypeError(
            f"Could not infer config type for rule class {cls.__name__}. "
            "Ensure it subclasses Rule[ConcreteConfig]."
        )

    @abstractmethod
    def verify(self, document: SourceDocument) -> list[Violation]:
        """Apply the rule and return its violations."""

    @abstractmethod
    def example_violations(self) -> list[str]:
        """Return source samples that should trigger this rule."""

    @abstractmethod
    def example_non_violations(self) -> list[str]:
        """Return source samples that should not trigger this rule."""

    def violation(self, line: int, column: int, message: str) -> Violation:
        """Build a violation tagged with this rule's name."""
        return Violation(rule=self.name, line=line, column=column, message=message)
