"""
Beta-code to polytonic Greek conversion.

Beta code writes diacriticals after the lowercase letter they modify
(``a)/`` → ἄ) and a ``*`` marker before capitals (``*)/a`` → Ἄ). A word is
converted in a single left-to-right pass:

- A letter that is a direct table key is held back for one step, since a
  following diacritical regroups it into a composite (``a`` then ``/``).
- Diacriticals accumulate onto the open vowel or capital group.
- The capital marker opens a group that closes on the next letter.
- Anything else (punctuation, digits) is copied through.

Groups with no composite mapping are emitted as their raw characters, so
conversion never fails. After the pass, a trailing medial sigma becomes
final sigma.

Example:
    >>> from greekreader.betacode import convert_betacode
    >>> convert_betacode("lo/gos")
    'λόγος\\n'

    >>> from greekreader.betacode import BetaCodeConverter
    >>> converter = BetaCodeConverter()
    >>> converter.convert_word("*)/andra")
    'Ἄνδρα'
"""

from dataclasses import dataclass, field
from typing import Optional

from greekreader.betacode._table import MappingTable

__all__ = [
    "BetaCodeConverter",
    "Passthrough",
    "TransliterationResult",
    "convert_betacode",
    "normalize_final_sigma",
    "resolve_buffers",
    "is_diacritical",
    "DIACRITICALS",
    "CAPITAL_MARKER",
]

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Passthrough:
    """A group with no composite mapping, emitted as its raw characters."""

    position: int
    token: str


@dataclass
class TransliterationResult:
    """Detailed result from converting a single word."""

    original: str
    converted: str
    passthroughs: list[Passthrough] = field(default_factory=list)

    @property
    def fully_mapped(self) -> bool:
        return not self.passthroughs


# =============================================================================
# Character Classes
# =============================================================================

# Smooth and rough breathing, acute, grave, circumflex, iota subscript, diaeresis
DIACRITICALS = frozenset(")(/\\=|+")

CAPITAL_MARKER = "*"

MEDIAL_SIGMA = "σ"
FINAL_SIGMA = "ς"

# Punctuation that may follow a word-final sigma
_SIGMA_TRAILERS = frozenset(",.:;\n")

# Scanner states
_IDLE = "idle"
_VOWEL = "vowel"
_CAPITAL = "capital"


def is_diacritical(char: str) -> bool:
    """Check if character is one of the seven beta-code diacriticals."""
    return char in DIACRITICALS


# =============================================================================
# Group Resolution
# =============================================================================


def _resolve(table: MappingTable, buffer: str) -> str:
    if not buffer:
        return ""
    unit = table.lookup(buffer)
    return buffer if unit is None else unit


def resolve_buffers(table: MappingTable, pending_vowel: str, pending_capital: str) -> str:
    """
    Resolve pending vowel and capital groups through the table.

    Each non-empty buffer is looked up as a composite key. Unmapped
    buffers pass through unchanged. The vowel group always comes first.

    Example:
        >>> resolve_buffers(MappingTable.default(), "a)/", "")
        'ἄ'
        >>> resolve_buffers(MappingTable.default(), "", "*#a")
        '*#a'
    """
    return _resolve(table, pending_vowel) + _resolve(table, pending_capital)


def normalize_final_sigma(word: str) -> str:
    """
    Replace a word-final medial sigma with final sigma.

    A sigma directly before a trailing comma, period, colon, semicolon
    or newline is also treated as word-final. Quotes and brackets after
    the sigma are not recognized.

    Example:
        >>> normalize_final_sigma("λογοσ")
        'λογος'
        >>> normalize_final_sigma("λογοσ,")
        'λογος,'
    """
    if MEDIAL_SIGMA not in word:
        return word

    trimmed = word.replace(" ", "")
    if trimmed[-1] == MEDIAL_SIGMA:
        return trimmed[:-1] + FINAL_SIGMA
    if len(trimmed) >= 2 and trimmed[-2] == MEDIAL_SIGMA and trimmed[-1] in _SIGMA_TRAILERS:
        return trimmed[:-2] + FINAL_SIGMA + trimmed[-1]
    return word


# =============================================================================
# Word Scanner
# =============================================================================


class _WordScan:
    """
    Single-use scanner for one word.

    The scanner is always in one of three states: idle, an open vowel
    group, or an open capital group. While idle, the most recent letter
    or copied character is held rather than committed, so that a
    following diacritical can regroup it without touching the output.
    """

    def __init__(self, table: MappingTable, word: str) -> None:
        self.table = table
        self.word = word
        self.output: list[str] = []
        self.passthroughs: list[Passthrough] = []
        self.state = _IDLE
        self.buffer = ""
        self.buffer_start = 0
        # (source char, unit, passthrough record) awaiting commit
        self.held: Optional[tuple[str, str, Optional[Passthrough]]] = None

    def run(self) -> str:
        for i, char in enumerate(self.word):
            self._step(i, char)
        self._commit_held()
        self._flush()
        return "".join(self.output)

    def _step(self, i: int, char: str) -> None:
        if char == CAPITAL_MARKER:
            self._commit_held()
            if self.state == _VOWEL:
                self._flush()
            if self.state == _CAPITAL:
                self.buffer += char
            else:
                self._open(_CAPITAL, i, char)

        elif char in self.table:
            if self.state == _CAPITAL:
                self.buffer += char
                unit, passthrough = self._take_buffer()
                self.held = (char, unit, passthrough)
            else:
                self._commit_held()
                self._flush()
                self.held = (char, self.table.lookup(char), None)

        elif char in DIACRITICALS:
            if self.state != _IDLE:
                self.buffer += char
            elif self.held is not None:
                # Regroup the held character with this diacritical
                source = self.held[0]
                self.held = None
                self._open(_VOWEL, i - 1, source + char)
            else:
                # Nothing to attach to at the start of a word
                self.output.append(char)

        else:
            self._commit_held()
            self._flush()
            self.held = (char, char, None)

    def _open(self, state: str, start: int, buffer: str) -> None:
        self.state = state
        self.buffer_start = start
        self.buffer = buffer

    def _take_buffer(self) -> tuple[str, Optional[Passthrough]]:
        buffer = self.buffer
        start = self.buffer_start
        self.state = _IDLE
        self.buffer = ""

        unit = self.table.lookup(buffer)
        if unit is None:
            return buffer, Passthrough(position=start, token=buffer)
        return unit, None

    def _flush(self) -> None:
        if self.state == _IDLE:
            return
        unit, passthrough = self._take_buffer()
        self._commit(unit, passthrough)

    def _commit_held(self) -> None:
        if self.held is None:
            return
        _, unit, passthrough = self.held
        self.held = None
        self._commit(unit, passthrough)

    def _commit(self, unit: str, passthrough: Optional[Passthrough]) -> None:
        self.output.append(unit)
        if passthrough is not None:
            self.passthroughs.append(passthrough)


# =============================================================================
# Converter
# =============================================================================


class BetaCodeConverter:
    """
    Convert beta-code text to polytonic Greek.

    The converter holds an immutable MappingTable and no other state, so
    one instance can be shared freely.

    Example:
        >>> converter = BetaCodeConverter()
        >>> converter.convert("mh=nin a)/eide qea/\\n")
        'μῆνιν ἄειδε θεά\\n'
    """

    def __init__(self, table: Optional[MappingTable] = None) -> None:
        """
        Initialize converter with a mapping table.

        Args:
            table: Beta-code mapping table. Defaults to the bundled table.
        """
        self.table = table if table is not None else MappingTable.default()

    def convert(self, text: str) -> str:
        """
        Convert beta-code text, preserving line and word structure.

        Lines are split on newline and words on single spaces. Empty words
        from repeated spaces are kept. Every line, including the last, is
        terminated with a newline; a trailing newline in the input ends the
        last line rather than starting an empty one. The empty string is a
        single empty line and converts to a lone newline.

        Args:
            text: Beta-code text

        Returns:
            Greek text
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        lines = text.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return "".join(self.convert_line(line) + "\n" for line in lines)

    def convert_line(self, line: str) -> str:
        """Convert one line of space-separated words, without a newline."""
        return " ".join(self.convert_word(word) for word in line.split(" "))

    def convert_word(self, word: str) -> str:
        """Convert a single word. The empty word converts to ''."""
        return self.convert_word_detailed(word).converted

    def convert_word_detailed(self, word: str) -> TransliterationResult:
        """
        Convert a single word and report unmapped groups.

        Args:
            word: A beta-code word (no spaces or newlines)

        Returns:
            TransliterationResult with the converted word and one
            Passthrough per group that had no composite mapping

        Example:
            >>> converter = BetaCodeConverter()
            >>> result = converter.convert_word_detailed("b)")
            >>> result.converted
            'b)'
            >>> result.passthroughs[0].token
            'b)'
        """
        scan = _WordScan(self.table, word)
        converted = normalize_final_sigma(scan.run())
        return TransliterationResult(
            original=word, converted=converted, passthroughs=scan.passthroughs
        )

    def __repr__(self) -> str:
        return f"BetaCodeConverter(table={self.table!r})"


# =============================================================================
# Module-level Convenience Function
# =============================================================================

# Singleton instance for convenience function
_default_converter: Optional[BetaCodeConverter] = None


def convert_betacode(text: str) -> str:
    """
    Convert beta-code text to polytonic Greek.

    Convenience function that uses a shared converter over the bundled
    mapping table.

    Example:
        >>> convert_betacode("lo/gos")
        'λόγος\\n'
    """
    global _default_converter
    if _default_converter is None:
        _default_converter = BetaCodeConverter()
    return _default_converter.convert(text)
