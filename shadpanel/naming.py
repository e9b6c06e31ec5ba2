"""Naming transformations for generated resources.

Pure, total string functions (no function here raises) plus the
``ResourceIdentity`` bundle derived from a single resource name.  The
singular/plural rules are naive: a trailing ``s`` is the only
plural marker understood, so irregular plurals ("people", "statuses") are
not handled.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict


_SEPARATOR_RUN = re.compile(r"[-_\s]+(.)?")
_KEBAB_SEPARATORS = re.compile(r"[-_\s]+")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


# ---------------------------------------------------------------------------
# Case conversions
# ---------------------------------------------------------------------------

def pascal_case(value: str) -> str:
    """``blog-post`` / ``blog_post`` / ``blog post`` -> ``BlogPost``.

    Characters that are not right after a separator keep their case, so
    ``blogPost`` becomes ``BlogPost``.
    """
    joined = _SEPARATOR_RUN.sub(lambda m: (m.group(1) or "").upper(), value)
    return joined[:1].upper() + joined[1:]


def camel_case(value: str) -> str:
    """``blog-post`` / ``BlogPost`` -> ``blogPost``."""
    pascal = pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def kebab_case(value: str) -> str:
    """``BlogPost`` / ``blog_post`` -> ``blog-post``."""
    hyphenated = _CASE_BOUNDARY.sub(r"\1-\2", value)
    hyphenated = _KEBAB_SEPARATORS.sub("-", hyphenated)
    return hyphenated.lower()


def humanize(value: str) -> str:
    """``blogPosts`` / ``blog_posts`` -> ``Blog Posts`` / ``Blog posts``.

    Only the very first character is upper-cased.
    """
    spaced = re.sub(r"[-_]", " ", value)
    spaced = _CASE_BOUNDARY.sub(r"\1 \2", spaced)
    return spaced[:1].upper() + spaced[1:]


def lower_first(value: str) -> str:
    """``BlogPost`` -> ``blogPost``; the data-client delegate for a model."""
    return value[:1].lower() + value[1:]


# ---------------------------------------------------------------------------
# Number
# ---------------------------------------------------------------------------

def singularize(value: str) -> str:
    """Drop one trailing ``s``.

    Words ending in ``ss`` ("address", "class") and the bare string ``"s"``
    are returned unchanged, which keeps the function idempotent.
    """
    if len(value) > 1 and value.endswith("s") and not value.endswith("ss"):
        return value[:-1]
    return value


def pluralize(value: str) -> str:
    """Append ``s`` unless the word already ends in one."""
    if value.endswith("s"):
        return value
    return value + "s"


# ---------------------------------------------------------------------------
# Resource identity
# ---------------------------------------------------------------------------

class ResourceIdentity(BaseModel):
    """The family of names used across every generated artifact."""
    model_config = ConfigDict(frozen=True)

    singular: str
    plural: str
    pascal_identifier: str
    kebab_path: str
    human_label: str

    @property
    def pascal_plural(self) -> str:
        """``Invoices``; used in list-level function and component names."""
        return pascal_case(self.plural)


def derive_identity(name: str) -> ResourceIdentity:
    """Derive every resource name from *name*.

    Any form of the result fed back in (singular, plural, Pascal or kebab)
    yields the same identity.

    Example::

        derive_identity("Invoice")
        # singular="invoice", plural="invoices", pascal_identifier="Invoice",
        # kebab_path="invoices", human_label="Invoices"
    """
    singular = camel_case(singularize(name.strip()))
    plural = pluralize(singular)
    return ResourceIdentity(
        singular=singular,
        plural=plural,
        pascal_identifier=pascal_case(singular),
        kebab_path=kebab_case(plural),
        human_label=humanize(plural),
    )
