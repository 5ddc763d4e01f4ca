"""Word and pair list loading.

This module loads the words to translate and extra translation pairs from text
files so they can be fed into a ``Dictionary``.
"""

from pathlib import Path

from loguru import logger

from spelling_variants.dictionary import WordPair


class WordListManager:
    """Manages loading of word lists and translation pair lists."""

    PAIR_SEPARATOR = ","
    COMMENT_PREFIX = "#"

    def load_from_file(self, file_path: str) -> list[str]:
        """Load words from a text file.

        Reads a text file containing one word per line. Each line is stripped
        of surrounding whitespace and empty lines are skipped. Case is kept as
        written, since the translation mirrors it.

        Args:
            file_path: Path to the word list file

        Returns:
            List of words in order

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid UTF-8

        Example:
            >>> manager = WordListManager()
            >>> manager.load_from_file("words.txt")
            ['Colour', 'centre', 'AEROPLANE']
        """
        words = [line for _, line in self._read_lines(file_path)]
        logger.info(f"Loaded {len(words)} words from {file_path}")
        return words

    def load_pairs_from_file(self, file_path: str) -> list[WordPair]:
        """Load translation pairs from a text file.

        Each line holds a British and an American spelling separated by a
        comma, e.g. ``tyre,tire``. Empty lines and lines starting with ``#``
        are skipped. Both spellings are stripped but otherwise kept as written.

        Args:
            file_path: Path to the pair list file

        Returns:
            List of pairs in file order

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a line is not a valid pair or the file is not UTF-8
        """
        pairs = []
        for line_num, line in self._read_lines(file_path):
            if line.startswith(self.COMMENT_PREFIX):
                continue

            fields = [field.strip() for field in line.split(self.PAIR_SEPARATOR)]
            if len(fields) != 2 or not all(fields):
                error_msg = (
                    f"Invalid pair format at line {line_num}: '{line}'. "
                    f"Expected 'british{self.PAIR_SEPARATOR}american'."
                )
                logger.error(error_msg)
                raise ValueError(error_msg)

            pairs.append(WordPair(gb=fields[0], us=fields[1]))

        logger.info(f"Loaded {len(pairs)} translation pairs from {file_path}")
        return pairs

    def remove_duplicates(self, pairs: list[WordPair]) -> list[WordPair]:
        """Keep one pair per British spelling, the last one wins.

        Pairs keep the position of the first occurrence of their British
        spelling, mirroring how ``Dictionary.add`` overrides existing keys.

        Args:
            pairs: List of pairs (may repeat British spellings)

        Returns:
            List of pairs with unique British spellings
        """
        by_gb: dict[str, WordPair] = {}
        for pair in pairs:
            by_gb[pair.gb] = pair
        unique_pairs = list(by_gb.values())

        duplicates_removed = len(pairs) - len(unique_pairs)
        if duplicates_removed > 0:
            logger.info(
                f"Removed {duplicates_removed} duplicate pair(s). Unique pairs: {len(unique_pairs)}"
            )
        else:
            logger.debug("No duplicates found in pair list")

        return unique_pairs

    def _read_lines(self, file_path: str) -> list[tuple[int, str]]:
        """Read non-empty stripped lines with their 1-based line numbers."""
        path = Path(file_path)

        if not path.exists():
            error_msg = f"List file not found: {file_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        logger.debug(f"Reading list from: {file_path}")

        lines = []
        try:
            with path.open("r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, start=1):
                    stripped = line.strip()
                    if stripped:
                        lines.append((line_num, stripped))
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode file with UTF-8 encoding: {file_path}")
            encoding_error_msg = f"File encoding error: {e}"
            raise ValueError(encoding_error_msg) from e

        return lines
