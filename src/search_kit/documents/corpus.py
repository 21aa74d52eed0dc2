# src/search_kit/documents/corpus.py

import logging
from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass

from search_kit.errors import CorpusError, SectionLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corpus:
    """Concatenated section text with per-section end offsets.

    ``stops[i]`` is the offset in ``text`` immediately after section ``i``'s
    contribution. Separators sit between contributions and are not counted
    in the preceding stop.
    """

    text: str
    stops: tuple[int, ...]

    def __post_init__(self) -> None:
        previous = 0
        for stop in self.stops:
            if stop < previous:
                raise CorpusError(f"Corpus stops must be non-decreasing: {self.stops}")
            previous = stop
        if previous > len(self.text):
            raise CorpusError(
                f"Corpus stop {previous} exceeds text length {len(self.text)}"
            )

    def __len__(self) -> int:
        return len(self.stops)

    def section_index(self, offset: int) -> int:
        """Return the index of the section owning ``offset``.

        Raises:
            SectionLookupError: If ``offset`` lies outside the corpus text.
        """
        if not 0 <= offset <= len(self.text) or not self.stops:
            logger.error("Offset %d outside corpus of length %d", offset, len(self.text))
            raise SectionLookupError(
                f"Offset {offset} outside corpus of length {len(self.text)}"
            )
        return bisect_left(self.stops, offset)


def build_corpus(
    corpus_parts: Sequence[Sequence[str]],
    join_with: str | None = None,
) -> Corpus:
    """Flatten per-section part arrays into a single Corpus.

    Args:
        corpus_parts: One sequence of text parts per section, in order.
        join_with: Optional separator placed between non-empty section
            contributions. Never emitted before the first or after the last
            contribution.

    Returns:
        Corpus with one stop per input section.
    """
    flat_parts: list[str] = []
    stops: list[int] = []
    length = 0

    for parts in corpus_parts:
        contribution = "".join(parts)
        if contribution:
            if join_with and length:
                flat_parts.append(join_with)
                length += len(join_with)
            flat_parts.append(contribution)
            length += len(contribution)
        stops.append(length)

    return Corpus(text="".join(flat_parts), stops=tuple(stops))
