"""
Naming utilities for the module generator.

Every generated symbol and file name is derived from a model or field name
through these helpers, so they must stay deterministic and idempotent.
"""

import re

# A lower-case letter directly followed by an upper-case one
_WORD_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def to_pascal_case(text: str) -> str:
    """Upper-case the first character and keep the rest.

    Examples:
        "product" -> "Product"
        "productCategory" -> "ProductCategory"
        "Product" -> "Product"
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def to_camel_case(text: str) -> str:
    """Lower-case the first character and keep the rest.

    Examples:
        "Product" -> "product"
        "DomMetaKeyword" -> "domMetaKeyword"
    """
    if not text:
        return ""
    return text[0].lower() + text[1:]


def to_kebab_case(text: str) -> str:
    """Hyphenate lower-to-upper boundaries, then lower-case the whole string.

    Examples:
        "Product" -> "product"
        "DomMetaKeyword" -> "dom-meta-keyword"
        "dom-meta-keyword" -> "dom-meta-keyword"
    """
    return _WORD_BOUNDARY.sub(r"\1-\2", text).lower()
