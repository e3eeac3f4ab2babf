"""
spaCy integration for greekreader.

Provides a pipeline component that converts beta-code documents to
polytonic Greek.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("betacode_converter")
    >>> doc = nlp("mh=nin a)/eide")
    >>> doc._.greek
    'μῆνιν ἄειδε\\n'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greekreader.betacode import BetaCodeConverter, MappingTable

__all__ = [
    "BetaCodeConverterComponent",
    "create_betacode_converter",
    "get_converter_pipe",
]


@Language.factory(
    "betacode_converter",
    default_config={"table_path": None},
    assigns=["doc._.greek", "token._.greek"],
)
def create_betacode_converter(
    nlp: Language,
    name: str,
    table_path: Optional[str] = None,
) -> "BetaCodeConverterComponent":
    """Create a beta-code converter pipeline component."""
    return BetaCodeConverterComponent(nlp, name, table_path=table_path)


class BetaCodeConverterComponent:
    """
    spaCy pipeline component for beta-code to Greek conversion.

    Extensions:
        - Doc._.greek: Full converted text.
        - Token._.greek: Converted text of the space-delimited word the
          token belongs to.

    spaCy splits words at infix punctuation such as ``=`` and ``/``, which
    in beta code are diacriticals. Words are therefore converted whole and
    every token inside a word shares its conversion. Whitespace tokens are
    left as None. The token text itself is never modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        table_path: Optional[str] = None,
    ) -> None:
        self.name = name
        self.table_path = table_path

        table = MappingTable.load(table_path) if table_path else MappingTable.default()
        self._converter = BetaCodeConverter(table)

        if not Doc.has_extension("greek"):
            Doc.set_extension("greek", default=None)
        if not Token.has_extension("greek"):
            Token.set_extension("greek", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.greek = self._converter.convert(doc.text)

        offset = 0
        for line in doc.text.split("\n"):
            start = offset
            for word in line.split(" "):
                end = start + len(word)
                if word:
                    self._assign_word(doc, word, start, end)
                start = end + 1
            offset += len(line) + 1

        return doc

    def _assign_word(self, doc: Doc, word: str, start: int, end: int) -> None:
        span = doc.char_span(start, end, alignment_mode="expand")
        if span is None:
            return
        converted = self._converter.convert_word(word)
        for token in span:
            if not token.is_space:
                token._.greek = converted

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetaCodeConverterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetaCodeConverterComponent":
        return self


def get_converter_pipe(nlp: Language) -> Optional[BetaCodeConverterComponent]:
    """Get the beta-code converter component from a pipeline."""
    if "betacode_converter" in nlp.pipe_names:
        return nlp.get_pipe("betacode_converter")
    return None
