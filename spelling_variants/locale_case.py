"""Locale-aware lowercasing used when resolving words for removal.

Python's ``str.lower()`` knows nothing about locales, so the handful of
languages whose lowercasing differs from the default Unicode mapping are
handled here explicitly.
"""

from collections.abc import Callable, Sequence

Locale = str | Sequence[str] | None
CaseFold = Callable[[str, Locale], str]

# Turkic languages distinguish dotted and dotless i
DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})
DOTLESS_I_TABLE = str.maketrans({"I": "ı", "İ": "i"})


def primary_language(locale: Locale) -> str | None:
    """Return the lowercase primary language subtag of a locale, if any.

    Accepts a single tag ("tr", "en-GB", "tr_TR") or a preference list, in
    which case the first tag wins.
    """
    if locale is None:
        return None

    if not isinstance(locale, str):
        if not locale:
            return None
        locale = locale[0]

    language = locale.replace("_", "-").split("-", 1)[0].strip().lower()
    return language or None


def lower_for_locale(text: str, locale: Locale = None) -> str:
    """Lowercase ``text`` following the rules of ``locale``.

    Without a locale, or for a language with no special rules, this is plain
    ``str.lower()``. For Turkish and Azerbaijani, ``I`` lowercases to the
    dotless ``ı`` and ``İ`` to ``i``, so ``"FIBRE"`` becomes ``"fıbre"``.

    Args:
        text: The text to lowercase
        locale: A locale tag, a list of tags, or None

    Returns:
        The lowercased text
    """
    if primary_language(locale) in DOTLESS_I_LANGUAGES:
        text = text.translate(DOTLESS_I_TABLE)
    return text.lower()
