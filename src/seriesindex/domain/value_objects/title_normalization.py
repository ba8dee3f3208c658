"""Title normalization for series matching.

Hey future me - clean titles are what ALL the exact title lookups compare against!
The lookup layer itself never normalizes (except lower-casing), so whatever writes a
series must store a clean title built with these helpers, and whatever parses a
release name must build its search key the same way. If the two drift apart, lookups
silently stop matching.

Examples:
    >>> clean_title("The Office (US)")
    'officeus'
    >>> clean_title("Law & Order: SVU")
    'lawandordersvu'
    >>> title_slug("Grey's Anatomy")
    'greys-anatomy'
"""

import re
import unicodedata

# Leading articles are dropped only if something follows them ("The" alone stays "the")
LEADING_ARTICLE_PATTERN = re.compile(r"^(?:the|a|an)\s+(?=\S)", re.IGNORECASE)

NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-z0-9]+")


def _fold(title: str) -> str:
    """Lower-case and strip accents so "Café" and "Cafe" compare equal."""
    decomposed = unicodedata.normalize("NFKD", title)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def clean_title(title: str) -> str:
    """Build the clean title used for exact and containment matching.

    Args:
        title: Display title, e.g. "The Office (US)"

    Returns:
        Lowercase letters and digits only, leading article removed
    """
    folded = _fold(title.strip())
    folded = LEADING_ARTICLE_PATTERN.sub("", folded)
    folded = folded.replace("&", " and ")
    return NON_ALPHANUMERIC_PATTERN.sub("", folded)


def title_slug(title: str) -> str:
    """Build a URL-safe slug, e.g. "Grey's Anatomy" -> "greys-anatomy"."""
    folded = _fold(title.strip()).replace("'", "").replace("’", "")
    return NON_ALPHANUMERIC_PATTERN.sub("-", folded).strip("-")
