# Pulse Gibberish Filter
# Heuristic check for low-quality review text before it reaches Claude

import re

VOWELS = set('aeiou')
CONSONANTS = set('bcdfghjklmnpqrstvwxyz')

MIN_LENGTH = 3
MIN_VOWEL_RATIO = 0.10
MAX_VOWEL_RATIO = 0.90
MIN_ALPHA_RATIO = 0.30

# Adjacent-key runs, only checked on short input
KEYBOARD_PATTERNS = ['asdf', 'qwer', 'zxcv', 'hjkl', 'dfgh', 'cvbn', 'tyui', 'fghj']
KEYBOARD_MAX_LENGTH = 20

REPEATED_CHAR = re.compile(r'(.)\1{4,}', re.DOTALL)
KEYBOARD_MASH = re.compile('|'.join(KEYBOARD_PATTERNS), re.IGNORECASE)


def is_gibberish(text):
    """Return True if a review looks like junk input.

    Checks run in order and the first hit wins:
        1. Shorter than 3 characters once stripped
        2. Any character repeated 5+ times in a row
        3. Vowel ratio outside 0.10-0.90 (skipped when there are no letters)
        4. Keyboard mashing (asdf, qwer, ...) in text under 20 characters
        5. Fewer than 30% of characters are letters
    """
    normalized = (text or '').strip().lower()

    if len(normalized) < MIN_LENGTH:
        return True

    if REPEATED_CHAR.search(normalized):
        return True

    vowels = sum(1 for c in normalized if c in VOWELS)
    consonants = sum(1 for c in normalized if c in CONSONANTS)
    if vowels + consonants > 0:
        ratio = vowels / (vowels + consonants)
        if ratio < MIN_VOWEL_RATIO or ratio > MAX_VOWEL_RATIO:
            return True

    if KEYBOARD_MASH.search(text) and len(normalized) < KEYBOARD_MAX_LENGTH:
        return True

    alpha = sum(1 for c in normalized if 'a' <= c <= 'z')
    if alpha / len(normalized) < MIN_ALPHA_RATIO:
        return True

    return False
