"""Highlighting of rule-set scans for prompt_toolkit."""

from regex_lexer.editor.lexer import RuleSetLexer, highlight, label_to_class

__all__ = ["RuleSetLexer", "highlight", "label_to_class"]
