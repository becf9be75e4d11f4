"""Word key normalization."""

from wiktionary_check.errors import InvalidWordError


def normalize_word(raw_word: str) -> str:
    """Turn caller input into the key used by the cache and the queue.

    The input is taken as already URL-decoded by the HTTP layer. Surrounding
    whitespace is dropped and the result is lower-cased.

    Raises:
        InvalidWordError: If nothing is left after normalization
    """
    word = raw_word.strip().lower()
    if not word:
        raise InvalidWordError("Word must not be empty")
    return word
