"""Case mirroring between differently spelled words.

Reproduces the capitalisation style of one word onto another word, so that a
translated spelling keeps the look of the word it replaced
("Colour" -> "Color", "COLOUR" -> "COLOR").
"""


def match_case(candidate: str, pattern: str) -> str:
    """Re-case ``candidate`` to follow the casing style of ``pattern``.

    Patterns are classified in this order:

    - Titlecase (first character upper, the rest lower): titlecase ``candidate``.
      A single uppercase character counts as titlecase, not all-uppercase.
    - All uppercase: uppercase ``candidate``.
    - All lowercase: lowercase ``candidate``.
    - Mixed: transfer case position by position, but only where both words
      hold the same letter ignoring case. Other positions, and any part of
      ``candidate`` longer than ``pattern``, are left as they are.

    Args:
        candidate: The word to re-case
        pattern: The word whose casing is mirrored

    Returns:
        The re-cased candidate, or ``candidate`` unchanged if either is empty

    Example:
        >>> match_case("color", "Colour")
        'Color'
        >>> match_case("airplane", "AeRopLaNe")
        'AiRplane'
    """
    if not candidate or not pattern:
        return candidate

    head, tail = pattern[0], pattern[1:]
    if head == head.upper() and tail == tail.lower():
        return candidate[0].upper() + candidate[1:].lower()

    if pattern == pattern.upper():
        return candidate.upper()

    if pattern == pattern.lower():
        return candidate.lower()

    shared = min(len(candidate), len(pattern))
    chars = []
    for src, ref in zip(candidate[:shared], pattern[:shared]):
        if src.lower() == ref.lower():
            chars.append(src.upper() if ref.isupper() else src.lower())
        else:
            chars.append(src)

    return "".join(chars) + candidate[shared:]
