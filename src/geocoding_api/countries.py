"""
Country-code validation and canonicalization.

Turns a user-supplied ISO 3166-1 alpha-2 code into a `Country` value
object carrying the canonical code, a display name and the ccTLD used as
the API's region bias.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from babel import Locale, UnknownLocaleError

from .base import RegionNameLookup
from .errors import InvalidFormat, UnknownCountry
from .settings import settings

logger = logging.getLogger(__name__)

_ISO_ALPHA_2 = re.compile(r"[A-Za-z]{2}")

# ccTLDs that are not simply the lowercased country code
ISO_ALPHA_2_TO_TLD_EXCEPTIONS: dict[str, str] = {
    "GB": "uk",
}


def top_level_domain(iso_alpha2: str) -> str:
    """Return the ccTLD for a country code, e.g. "FR" -> "fr", "GB" -> "uk"."""
    code = iso_alpha2.upper()
    return ISO_ALPHA_2_TO_TLD_EXCEPTIONS.get(code, code).lower()


class BabelRegionNames(RegionNameLookup):
    """Region names from the CLDR data shipped with Babel."""

    def region_display_name(self, language_tag: str, iso_alpha2: str) -> str:
        try:
            locale = Locale.parse(language_tag.replace("-", "_"))
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Unknown locale '{language_tag}'") from e
        return locale.territories.get(iso_alpha2, iso_alpha2)


class StaticRegionNames(RegionNameLookup):
    """Region names from a fixed mapping; the language tag is ignored."""

    def __init__(self, names: Mapping[str, str]):
        self.names = {code.upper(): name for code, name in names.items()}

    def region_display_name(self, language_tag: str, iso_alpha2: str) -> str:
        return self.names.get(iso_alpha2, iso_alpha2)


@dataclass(frozen=True)
class Country:
    """A validated country. Build one through `CountryRegistry`."""
    iso_alpha2: str
    long_name: str

    @property
    def top_level_domain(self) -> str:
        return top_level_domain(self.iso_alpha2)


class CountryRegistry:
    """
    Validates country codes and describes the countries they name.

    Stateless apart from its configuration, so one instance can be shared
    freely between threads.
    """

    def __init__(
        self,
        lookup: Optional[RegionNameLookup] = None,
        language: Optional[str] = None,
    ):
        """
        Args:
            lookup: Region-name database (defaults to Babel/CLDR)
            language: Locale used for display names (defaults to settings)
        """
        self.lookup = lookup if lookup is not None else BabelRegionNames()
        self.language = language or settings.country_language

    def validate_and_describe(self, code: str) -> Country:
        """
        Validate a country code and resolve its display name.

        Args:
            code: ISO 3166-1 alpha-2 code, any case

        Returns:
            Country with the uppercased code and its long name

        Raises:
            InvalidFormat: `code` is not exactly two ASCII letters
            UnknownCountry: no region is known for `code`
        """
        if not isinstance(code, str) or not _ISO_ALPHA_2.fullmatch(code):
            raise InvalidFormat(str(code))

        normalized = code.upper()
        long_name = self.lookup.region_display_name(self.language, normalized)

        # The lookup echoes the code back when it has no name for it
        if long_name == normalized:
            raise UnknownCountry(code)

        logger.debug(f"Resolved country {normalized} -> {long_name}")
        return Country(iso_alpha2=normalized, long_name=long_name)

    def top_level_domain(self, iso_alpha2: str) -> str:
        return top_level_domain(iso_alpha2)
