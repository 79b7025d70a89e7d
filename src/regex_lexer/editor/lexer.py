"""prompt_toolkit lexer that highlights text with a rule set."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText, StyleAndTextTuples
from prompt_toolkit.formatted_text.utils import split_lines
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.styles import Style

from regex_lexer.core.color import ColorParser
from regex_lexer.core.errors import NoMatchError

if TYPE_CHECKING:
    from regex_lexer.config.schema import Theme
    from regex_lexer.core.ruleset import RuleSet

logger = logging.getLogger(__name__)

_INVALID_CLASS_CHARS = re.compile(r"[^a-z0-9_-]+")

ERROR_CLASS = "lexer-error"
SKIPPED_CLASS = "lexer-skipped"


def label_to_class(label: object) -> str:
    """Convert a token label to a style class name."""
    name = _INVALID_CLASS_CHARS.sub("-", str(label).lower()).strip("-")
    return f"label-{name}" if name else "label"


class RuleSetLexer(Lexer):
    """Lexer for syntax highlighting based on a compiled rule set."""

    def __init__(self, ruleset: RuleSet, theme: Theme | None = None) -> None:
        """Initialize the lexer.

        Args:
            ruleset: Rules used to classify the text
            theme: Theme mapping labels to colors
        """
        self.ruleset = ruleset
        self.theme = theme
        self.color_parser = ColorParser()
        self._styles = self._build_styles()

    def _build_styles(self) -> dict[str, str]:
        """Build prompt_toolkit style dictionary from theme."""
        if self.theme is None:
            return {}

        styles: dict[str, str] = {}
        for label, color_spec in self.theme.labels.items():
            styles[label_to_class(label)] = self.color_parser.parse(color_spec).to_prompt_toolkit_style()
        styles[SKIPPED_CLASS] = self.color_parser.parse(self.theme.default).to_prompt_toolkit_style()
        styles[ERROR_CLASS] = self.color_parser.parse(self.theme.error).to_prompt_toolkit_style()
        return styles

    def get_style_dict(self) -> dict[str, str]:
        """Get the style dictionary for prompt_toolkit."""
        return self._styles

    def get_style(self) -> Style:
        return Style.from_dict(self._styles)

    def fragments(self, text: str) -> StyleAndTextTuples:
        """Classify ``text`` into style/text fragments."""
        return self.scan_fragments(text)[0]

    def scan_fragments(self, text: str) -> tuple[StyleAndTextTuples, NoMatchError | None]:
        """Classify ``text`` and report the scan error, if any.

        Emitted tokens get their label's class, skipped text gets the
        skipped class. Text from the first unmatched character onwards gets
        the error class.
        """
        styled: StyleAndTextTuples = []
        scanner = self.ruleset.scan(text)

        try:
            for step in scanner.steps():
                if step.is_skip:
                    styled.append((f"class:{SKIPPED_CLASS}", step.text))
                else:
                    styled.append((f"class:{label_to_class(step.action.label)}", step.text))
        except NoMatchError as e:
            logger.debug("Highlighting stopped: %s", e)
            styled.append((f"class:{ERROR_CLASS}", text[e.position :]))
            return styled, e

        return styled, None

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        """Lex a document and return a function that returns styled text for each line.

        Args:
            document: The document to lex

        Returns:
            Function that takes a line number and returns styled text tuples
        """
        lines = list(split_lines(self.fragments(document.text)))

        def get_line(line_number: int) -> StyleAndTextTuples:
            """Get styled text for a specific line."""
            if 0 <= line_number < len(lines):
                return lines[line_number]
            return []

        return get_line


def highlight(text: str, ruleset: RuleSet, theme: Theme | None = None) -> FormattedText:
    """Classify ``text`` into printable formatted text."""
    return FormattedText(RuleSetLexer(ruleset, theme).fragments(text))
