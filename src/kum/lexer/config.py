"""
Kum Lexer - Configuration
=========================

Two dialects of Kum exist and differ only in lexical surface:

| Preset   | Identifier letters        | Case        | Operators |
|----------|---------------------------|-------------|-----------|
| full     | Latin a-z + Cyrillic а-я  | insensitive | yes       |
| reduced  | Cyrillic а-я              | sensitive   | no        |

Rather than hardcoding either dialect, the lexer takes a LexerConfig.
Configuration can come from:
- The presets defined here (FULL is the default)
- Environment variables (LexerConfig.from_env)
- The kum CLI --variant option
"""

from dataclasses import dataclass, replace
import os
import re


LATIN_LOWER = "a-z"
CYRILLIC_LOWER = "а-я"

ENV_VARIANT = "KUM_LEXER_VARIANT"
ENV_ALPHABET = "KUM_LEXER_ALPHABET"
ENV_CASE_INSENSITIVE = "KUM_LEXER_CASE_INSENSITIVE"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class LexerConfig:
    """
    Lexical surface of a Kum dialect.

    Attributes:
        alphabet: Identifier letters as regex character-class content
            (ranges allowed, e.g. "a-zа-я")
        case_insensitive: Match identifier letters regardless of case
        operators: Recognize arithmetic and compound assignment operators
    """

    alphabet: str = LATIN_LOWER + CYRILLIC_LOWER
    case_insensitive: bool = True
    operators: bool = True

    def __post_init__(self):
        if not self.alphabet:
            raise ValueError("identifier alphabet must not be empty")
        if self.alphabet.startswith("^"):
            raise ValueError(f"identifier alphabet must not start with '^': '{self.alphabet}'")
        if "]" in self.alphabet or "\\" in self.alphabet:
            raise ValueError(f"identifier alphabet must not contain ']' or a backslash: '{self.alphabet}'")
        try:
            re.compile(f"[{self.letter_class()}]")
        except re.error as e:
            raise ValueError(f"invalid identifier alphabet '{self.alphabet}': {e}") from None

    def letter_class(self) -> str:
        """
        Character-class content matching one identifier letter.

        Case-insensitive matching adds the upper-cased alphabet instead of
        using re.IGNORECASE, whose Unicode folding would also accept letters
        such as the Kelvin sign or the long s.
        """
        if self.case_insensitive:
            return self.alphabet + self.alphabet.upper()
        return self.alphabet

    # ═══════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════

    @classmethod
    def preset(cls, name: str) -> "LexerConfig":
        """
        Look up a named preset ("full" or "reduced", case-insensitive).

        Raises:
            ValueError: If the name is not a known preset
        """
        try:
            return PRESETS[name.lower()]
        except KeyError:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"unknown lexer variant '{name}' (expected one of: {known})") from None

    @classmethod
    def from_env(cls, environ=None) -> "LexerConfig":
        """
        Create a LexerConfig from environment variables.

        Environment variables (all optional):
            KUM_LEXER_VARIANT: Preset name to start from ("full"/"reduced")
            KUM_LEXER_ALPHABET: Replacement identifier alphabet
            KUM_LEXER_CASE_INSENSITIVE: "1"/"0", "true"/"false", ...

        Raises:
            ValueError: On an unknown variant or an unparseable flag
        """
        environ = os.environ if environ is None else environ
        config = FULL

        if variant := environ.get(ENV_VARIANT):
            config = cls.preset(variant)

        if alphabet := environ.get(ENV_ALPHABET):
            config = replace(config, alphabet=alphabet)

        if flag := environ.get(ENV_CASE_INSENSITIVE):
            flag = flag.strip().lower()
            if flag in _TRUE_VALUES:
                config = replace(config, case_insensitive=True)
            elif flag in _FALSE_VALUES:
                config = replace(config, case_insensitive=False)
            else:
                raise ValueError(f"invalid value for {ENV_CASE_INSENSITIVE}: '{flag}'")

        return config


FULL = LexerConfig()
REDUCED = LexerConfig(
    alphabet=CYRILLIC_LOWER,
    case_insensitive=False,
    operators=False,
)

PRESETS = {
    "full": FULL,
    "reduced": REDUCED,
}
