"""British <-> American spelling dictionary.

This module provides a ``Dictionary`` that translates single words between
British English (en-GB) and American English (en-US).

Translation is word based: splitting text into words and joining the results
back together is left to the caller. Unknown words are returned unchanged.
By default the translated word mirrors the casing of the input word
("Colour" -> "Color", "COLOUR" -> "COLOR").
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict

from spelling_variants.case_mirror import match_case as mirror_case
from spelling_variants.data import SPELLINGS
from spelling_variants.locale_case import CaseFold, Locale, lower_for_locale


class WordPair(BaseModel):
    """A spelling in each variant, e.g. ``WordPair(gb="tyre", us="tire")``."""

    model_config = ConfigDict(frozen=True)

    gb: str
    us: str


class Direction(str, Enum):
    """Translation direction."""

    GB_TO_US = "gb-us"
    US_TO_GB = "us-gb"


class Dictionary:
    """Bilingual dictionary between British and American spellings.

    The dictionary is seeded from a static data set and can be changed at
    runtime with :meth:`add` and :meth:`remove`.

    Two independent indices are kept, one keyed by British spelling and one by
    American spelling. Overriding or removing a pair only touches the keys of
    that pair, so an older reverse entry can outlive its forward entry:

        >>> d = Dictionary([WordPair(gb="colour", us="hue")])
        >>> d.gb_to_us("colour", match_case=False)
        'hue'
        >>> d.us_to_gb("color", match_case=False)
        'colour'

    Keys are stored exactly as added. Lookups try the exact word first and then
    its lowercase form, so a key added as "Gaol" is not found by "gaol".

    Example:
        >>> d = Dictionary()
        >>> d.gb_to_us("Colour")
        'Color'
        >>> d.us_to_gb_many(["color", "center"])
        ['colour', 'centre']
        >>> d.add(WordPair(gb="tyre", us="tire")).gb_to_us("TYRE")
        'TIRE'

    Not safe for concurrent mutation; callers sharing an instance across
    threads must serialise writes themselves.
    """

    def __init__(
        self,
        additions: Iterable[WordPair] | None = None,
        *,
        dataset: Mapping[str, str] = SPELLINGS,
        case_fold: CaseFold = lower_for_locale,
    ):
        """Initialize the dictionary.

        Args:
            additions: Extra pairs applied after the data set, in order. Later
                pairs override earlier ones with the same key.
            dataset: Ordered mapping of British to American spellings
            case_fold: Locale-aware lowercasing used by :meth:`remove`
        """
        self._gb_index: dict[str, str] = {}
        self._us_index: dict[str, str] = {}
        self._case_fold = case_fold

        for gb, us in dataset.items():
            self.add(WordPair(gb=gb, us=us))

        added = 0
        for pair in additions or ():
            self.add(pair)
            added += 1

        logger.debug(
            f"Initialized Dictionary with {len(dataset)} dataset pairs and {added} addition(s)"
        )

    def __len__(self) -> int:
        return len(self._gb_index)

    def add(self, pair: WordPair) -> "Dictionary":
        """Add or replace a translation pair.

        Both spellings are stored exactly as given, overwriting any entry under
        the same key.

        Args:
            pair: The British and American spellings

        Returns:
            The dictionary instance
        """
        self._gb_index[pair.gb] = pair.us
        self._us_index[pair.us] = pair.gb
        return self

    def remove(self, word: str, locale: Locale = None) -> "Dictionary":
        """Remove a translation pair if present.

        ``word`` may be either spelling. It is resolved against the British
        index and then the American index, first exactly and then in its
        lowercase form for ``locale``. The matched entry and its counterpart in
        the other index are removed. Nothing happens if no entry matches.

        Lowercasing follows the locale, so ``remove("FIBRE", "tr")`` looks for
        "fıbre" and leaves "fibre" in place.

        Args:
            word: The British or American word to remove
            locale: Locale tag (or list of tags) used for lowercasing

        Returns:
            The dictionary instance
        """
        folded = self._case_fold(word, locale)
        if not folded:
            return self

        gb_key: str | None = None
        us_key: str | None = None

        if word in self._gb_index:
            gb_key, us_key = word, self._gb_index[word]
        elif word in self._us_index:
            gb_key, us_key = self._us_index[word], word
        elif folded in self._gb_index:
            gb_key, us_key = folded, self._gb_index[folded]
        elif folded in self._us_index:
            gb_key, us_key = self._us_index[folded], folded

        if gb_key is None:
            logger.debug(f"No translation pair found to remove for '{word}'")
            return self

        # An empty counterpart key is removed as well
        self._gb_index.pop(gb_key, None)
        self._us_index.pop(us_key, None)
        logger.debug(f"Removed translation pair '{gb_key}' <-> '{us_key}'")
        return self

    def entries(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(gb, us)`` pairs in insertion order.

        Only pairs reachable from the British index are produced. The pairs are
        read when iteration starts, so the dictionary may be changed while
        looping over them.

        Example:
            >>> for gb, us in Dictionary().entries():
            ...     print(f"{gb} -> {us}")
        """
        yield from list(self._gb_index.items())

    def translate(self, word: str, direction: Direction, match_case: bool = True) -> str:
        """Translate a single word.

        Args:
            word: The word to translate
            direction: Which variant to translate from and to
            match_case: Mirror the casing of ``word`` onto the result

        Returns:
            The translated word, or ``word`` unchanged if it is unknown
        """
        if not word:
            return word

        index = self._gb_index if direction == Direction.GB_TO_US else self._us_index
        target = index.get(word)
        if target is None:
            target = index.get(word.lower())
        if target is None:
            return word

        return mirror_case(target, word) if match_case else target

    def translate_many(
        self, words: Iterable[str], direction: Direction, match_case: bool = True
    ) -> list[str]:
        """Translate each word independently, preserving order."""
        return [self.translate(word, direction, match_case) for word in words]

    def gb_to_us(self, word: str, match_case: bool = True) -> str:
        """Translate a British spelling to American."""
        return self.translate(word, Direction.GB_TO_US, match_case)

    def us_to_gb(self, word: str, match_case: bool = True) -> str:
        """Translate an American spelling to British."""
        return self.translate(word, Direction.US_TO_GB, match_case)

    def gb_to_us_many(self, words: Iterable[str], match_case: bool = True) -> list[str]:
        return self.translate_many(words, Direction.GB_TO_US, match_case)

    def us_to_gb_many(self, words: Iterable[str], match_case: bool = True) -> list[str]:
        return self.translate_many(words, Direction.US_TO_GB, match_case)
