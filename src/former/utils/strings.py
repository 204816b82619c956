"""String case helpers used to turn field names into builder class names."""

import re

from slugify import slugify

# Words whose trailing "s" is not a plural marker
SINGULAR_ENDINGS = ("ss", "us", "is")

SIBILANT_PLURAL = re.compile(r"(x|ch|sh|ss|z)es$", re.IGNORECASE)

# Plurals the suffix rules get wrong, matched against the last word
IRREGULAR_PLURALS = {
    "analyses": "analysis",
    "children": "child",
    "crises": "crisis",
    "people": "person",
    "series": "series",
    "species": "species",
    "theses": "thesis",
}

LAST_WORD = re.compile(r"[A-Z]?[^A-Z_\- ]*$")


def title(value: str) -> str:
    """Capitalize every word, keeping separators.

    Examples:
        >>> title("multi_select")
        'Multi_Select'
        >>> title("checkboxes")
        'Checkboxes'
    """
    return value.title()


def studly(value: str) -> str:
    """Capitalize every word and drop the separators.

    Only the first letter of each word is changed, so existing inner
    capitals survive.

    Examples:
        >>> studly("datetime-local")
        'DatetimeLocal'
        >>> studly("multiSelect")
        'MultiSelect'
    """
    words = slugify(value, separator=" ", lowercase=False).split()
    return "".join(word[:1].upper() + word[1:] for word in words)


def singular(word: str) -> str:
    """Strip English plural endings from the last word.

    Suffix rules cover regular plurals; the few irregular ones field names
    are likely to use come from ``IRREGULAR_PLURALS``. Other irregular
    plurals (``Indices``, ``Criteria``) are not recognized.

    Examples:
        >>> singular("Checkboxes")
        'Checkbox'
        >>> singular("Categories")
        'Category'
        >>> singular("Radios")
        'Radio'
        >>> singular("Address")
        'Address'
        >>> singular("DateSeries")
        'DateSeries'
    """
    if len(word) < 3:
        return word

    last = LAST_WORD.search(word)
    irregular = IRREGULAR_PLURALS.get(last.group().lower())
    if irregular is not None:
        return word[:last.start()] + last.group()[:1] + irregular[1:]

    lowered = word.lower()
    if lowered.endswith(SINGULAR_ENDINGS):
        return word
    if lowered.endswith("ies") and len(word) > 3:
        return word[:-3] + ("Y" if word[-3].isupper() else "y")
    if SIBILANT_PLURAL.search(word):
        return word[:-2]
    if lowered.endswith("s"):
        return word[:-1]
    return word
