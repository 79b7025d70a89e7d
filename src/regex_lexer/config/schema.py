"""Pydantic models for rule file schema."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator

from regex_lexer.core.ruleset import RuleSet, RuleSetBuilder


class LexerOptions(BaseModel):
    """Options applied to every pattern of a rule file."""

    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    verbose: bool = False
    allow_empty: bool = Field(
        default=True, description="Accept patterns that can match the empty string"
    )

    @property
    def re_flags(self) -> int:
        """The ``re`` flags these options select."""
        flags = 0
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.multiline:
            flags |= re.MULTILINE
        if self.dotall:
            flags |= re.DOTALL
        if self.verbose:
            flags |= re.VERBOSE
        return flags


class RuleSpec(BaseModel):
    """One rule: a pattern with either a label or ``skip: true``."""

    pattern: str = Field(description="Regular expression, e.g. '[0-9]+'")
    label: str | None = Field(default=None, description="Token label, e.g. 'Num'")
    skip: bool = Field(default=False, description="Consume matches without emitting tokens")

    @model_validator(mode="after")
    def check_action(self) -> RuleSpec:
        """Require exactly one of label and skip."""
        if self.skip and self.label is not None:
            raise ValueError(f"Rule {self.pattern!r} cannot both skip and emit {self.label!r}")
        if not self.skip and self.label is None:
            raise ValueError(f"Rule {self.pattern!r} needs a label or 'skip: true'")
        return self


class Theme(BaseModel):
    """Theme definition with colors for token labels."""

    name: str = Field(description="Theme name, e.g., 'default'")
    default: str = Field(default="", description="Color for skipped text")
    error: str = Field(default="bold red", description="Color for text after a scan error")
    labels: dict[str, str] = Field(default_factory=dict, description="Label to color mapping")


class LexerConfig(BaseModel):
    """Top-level rule file."""

    options: LexerOptions = Field(default_factory=LexerOptions)
    rules: list[RuleSpec] = Field(default_factory=list)
    themes: dict[str, Theme] = Field(default_factory=dict)

    @field_validator("themes", mode="before")
    @classmethod
    def parse_themes(cls, v: dict | None) -> dict[str, Theme]:
        """Parse theme definitions keyed by lowercase name."""
        result = {}
        for name, data in (v or {}).items():
            if isinstance(data, Theme):
                result[name.lower()] = data
            elif isinstance(data, dict):
                result[name.lower()] = Theme(name=name, **data)
        return result

    def builder(self) -> RuleSetBuilder[str]:
        """Create a builder holding every rule of this file."""
        builder: RuleSetBuilder[str] = RuleSetBuilder(
            self.options.re_flags, allow_empty=self.options.allow_empty
        )
        for rule in self.rules:
            if rule.skip:
                builder.ignore(rule.pattern)
            else:
                builder.token(rule.pattern, rule.label)
        return builder

    def build_ruleset(self) -> RuleSet[str]:
        """Compile the rules of this file.

        Raises:
            PatternCompileError: If a pattern is invalid
        """
        return self.builder().build()

    def get_theme(self, name: str | None = None) -> Theme:
        """Get theme by name, or default theme."""
        if name and name.lower() in self.themes:
            return self.themes[name.lower()]
        if "default" in self.themes:
            return self.themes["default"]
        return Theme(name="default")
