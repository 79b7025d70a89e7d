"""Color specification parsing for token highlighting."""

from __future__ import annotations

from dataclasses import dataclass, field

COLORS = {
    "black": "ansiblack",
    "red": "ansired",
    "green": "ansigreen",
    "yellow": "ansiyellow",
    "blue": "ansiblue",
    "magenta": "ansimagenta",
    "cyan": "ansicyan",
    "white": "ansiwhite",
    # Aliases
    "gray": "ansibrightblack",
    "grey": "ansibrightblack",
}

# Text attributes and their prompt_toolkit names
ATTRIBUTES = {
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "blink": "blink",
    "reverse": "reverse",
    "inverse": "reverse",
    "hidden": "hidden",
    "strikethrough": "strike",
}


@dataclass
class ParsedColor:
    """Parsed color specification.

    Attributes:
        fg: Foreground color in prompt_toolkit notation
        bg: Background color in prompt_toolkit notation
        attributes: prompt_toolkit attribute names, in order of appearance
    """

    fg: str | None = None
    bg: str | None = None
    attributes: list[str] = field(default_factory=list)

    def to_prompt_toolkit_style(self) -> str:
        """Convert to prompt_toolkit style string."""
        parts = list(self.attributes)
        if self.fg is not None:
            parts.append(self.fg)
        if self.bg is not None:
            parts.append(f"bg:{self.bg}")
        return " ".join(parts)


def _color_name(words: list[str]) -> str | None:
    """Map color words like ['bright', 'red'] or ['#ff0000'] to prompt_toolkit names."""
    if not words:
        return None
    if len(words) == 1 and words[0].startswith("#"):
        return words[0]
    if len(words) == 2 and words[0] == "bright" and words[1] in COLORS:
        name = COLORS[words[1]]
        return name if name.startswith("ansibright") else name.replace("ansi", "ansibright", 1)
    if len(words) == 1 and words[0] in COLORS:
        return COLORS[words[0]]
    return None


class ColorParser:
    """Parser for color specification strings."""

    def parse(self, color_spec: str) -> ParsedColor:
        """Parse a color specification string.

        Unknown words are ignored.

        Args:
            color_spec: Color string like "bold red on white"

        Returns:
            ParsedColor object

        Examples:
            >>> color = ColorParser().parse("bold bright red on white")
            >>> color.to_prompt_toolkit_style()
            'bold ansibrightred bg:ansiwhite'
        """
        result = ParsedColor()
        if not color_spec:
            return result

        fg_words: list[str] = []
        bg_words: list[str] = []
        target = fg_words

        for part in color_spec.lower().split():
            if part in ATTRIBUTES:
                result.attributes.append(ATTRIBUTES[part])
            elif part == "on":
                target = bg_words
            else:
                target.append(part)

        result.fg = _color_name(fg_words)
        result.bg = _color_name(bg_words)
        return result


def parse_color(color_spec: str) -> ParsedColor:
    """Parse a color specification string."""
    return ColorParser().parse(color_spec)
