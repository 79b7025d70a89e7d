"""Tests for the scanner module."""

from concurrent.futures import ThreadPoolExecutor
from itertools import permutations

import pytest

from regex_lexer.core.errors import NoMatchError, StallError
from regex_lexer.core.ruleset import Candidate, RuleSet, RuleSetBuilder
from regex_lexer.core.scanner import Scanner
from regex_lexer.core.tokens import Token


def summarize(tokens):
    return [(t.label, t.span, t.text) for t in tokens]


class TestScenarios:
    """End-to-end scans of small rule tables."""

    def test_keyword_after_identifier_rule(self, keyword_rules):
        """Test that an equal-length later rule overrides an earlier one."""
        tokens = keyword_rules.tokenize("let lettuce")

        assert summarize(tokens) == [
            ("Let", (0, 3), "let"),
            ("Ident", (4, 11), "lettuce"),
        ]

    def test_arithmetic(self, calc_rules):
        tokens = calc_rules.tokenize("12 + 3")

        assert summarize(tokens) == [
            ("Num", (0, 2), "12"),
            ("Add", (3, 4), "+"),
            ("Num", (5, 6), "3"),
        ]

    def test_empty_source(self, calc_rules):
        """Test that empty input yields nothing and no error."""
        assert list(calc_rules.scan("")) == []

    def test_skip_only_source(self, calc_rules):
        assert list(calc_rules.scan("   \t\n")) == []

    def test_unrecognized_character(self, calc_rules):
        """Test that scanning stops at the first unmatched character."""
        scanner = calc_rules.scan("12 # 3")

        assert next(scanner) == Token("Num", 0, 2, "12 # 3")
        with pytest.raises(NoMatchError) as exc_info:
            next(scanner)

        assert exc_info.value.position == 3
        assert exc_info.value.char == "#"
        assert list(scanner) == []
        assert scanner.position == 3
        assert scanner.done

    def test_unrecognized_character_at_start(self, calc_rules):
        with pytest.raises(NoMatchError) as exc_info:
            calc_rules.tokenize("x1")

        assert exc_info.value.position == 0


class TestProperties:
    """Invariants that hold for every scan."""

    SOURCES = ["", "1", "12 + 3", " 1+2 ", "1  +\n\t22+333   "]

    @pytest.mark.parametrize("source", SOURCES)
    def test_steps_cover_source(self, calc_rules, source):
        """Test that emitted and skipped spans rebuild the source."""
        steps = list(calc_rules.scan(source).steps())

        assert "".join(step.text for step in steps) == source
        for previous, current in zip(steps, steps[1:]):
            assert previous.end == current.start

    @pytest.mark.parametrize("source", SOURCES)
    def test_skip_transparency(self, calc_rules, source):
        """Test that tokens correspond to emitting steps only."""
        steps = list(calc_rules.scan(source).steps())
        tokens = calc_rules.tokenize(source)

        assert len(tokens) == sum(1 for step in steps if not step.is_skip)
        assert all(token.label != "" for token in tokens)

    def test_deterministic(self, keyword_rules):
        """Test that scanning twice yields identical tokens."""
        source = "let it let lettuce let"

        assert keyword_rules.tokenize(source) == keyword_rules.tokenize(source)

    def test_longest_match_beats_earlier_rule(self):
        """Test that an earlier, longer match wins over a later, shorter one."""
        ruleset = RuleSetBuilder().token("abcde", "Long").token("ab", "Short").build()

        assert summarize(ruleset.tokenize("abcde")) == [("Long", (0, 5), "abcde")]

    def test_tie_break_independent_of_losing_rule_order(self):
        """Test that the last declared rule wins however the others are ordered."""
        losers = [("[a-z]+", "Word"), ("[a-z]{3}", "Three"), ("l..", "LDotDot")]

        for order in permutations(losers):
            builder = RuleSetBuilder()
            for pattern, label in order:
                builder.token(pattern, label)
            ruleset = builder.token("let", "Let").build()

            assert [t.label for t in ruleset.scan("let")] == ["Let"]

    def test_shared_across_threads(self, keyword_rules):
        """Test that one rule set serves concurrent scanners."""
        sources = ["let a", "lettuce let", "a b c", "let"] * 8
        expected = [keyword_rules.tokenize(source) for source in sources]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(keyword_rules.tokenize, sources))

        assert results == expected


class TestScannerState:
    """Tests for the scanner cursor."""

    def test_lazy(self, calc_rules):
        """Test that tokens are produced on demand."""
        scanner = calc_rules.scan("1 + 2 # ")

        assert scanner.position == 0
        next(scanner)
        assert scanner.position == 1
        next(scanner)
        assert scanner.position == 3

    def test_iter_returns_self(self, calc_rules):
        scanner = calc_rules.scan("1")

        assert iter(scanner) is scanner
        assert isinstance(scanner, Scanner)

    def test_single_pass(self, calc_rules):
        """Test that an exhausted scanner stays exhausted."""
        scanner = calc_rules.scan("1 2")

        assert len(list(scanner)) == 2
        assert list(scanner) == []
        assert scanner.done

    def test_position_is_read_only(self, calc_rules):
        scanner = calc_rules.scan("1")

        with pytest.raises(AttributeError):
            scanner.position = 1

    def test_steps_include_skipped_text(self, calc_rules):
        steps = list(calc_rules.scan("1 +").steps())

        assert [(s.start, s.end, s.is_skip) for s in steps] == [
            (0, 1, False),
            (1, 2, True),
            (2, 3, False),
        ]


class TestStallGuard:
    """Tests for zero-length matches."""

    def test_empty_only_match_is_no_match(self):
        """Test that a rule matching nothing cannot stall the scan."""
        ruleset = RuleSetBuilder().token("[0-9]*", "Num").ignore(r"\s+").build()

        with pytest.raises(NoMatchError) as exc_info:
            ruleset.tokenize("12 x")

        assert exc_info.value.position == 3

    def test_empty_match_loses_to_any_progress(self):
        ruleset = RuleSetBuilder().token("[a-z]+", "Word").token("[0-9]*", "Num").ignore(" ").build()

        assert [t.label for t in ruleset.scan("ab 12")] == ["Word", "Num"]

    def test_forced_empty_winner_raises(self, calc_rules, monkeypatch):
        """Test the scanner's own progress check."""
        monkeypatch.setattr(RuleSet, "resolve", lambda self, source, pos: Candidate(0, 0))
        scanner = calc_rules.scan("12")

        with pytest.raises(StallError) as exc_info:
            next(scanner)

        assert exc_info.value.position == 0
        assert scanner.done
