"""
Request URL construction.

Merges default, caller-supplied and computed parameters, then serializes
them with RFC 3986 percent-encoding onto the API endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping, Optional
from urllib.parse import quote, urlencode

from .settings import settings

logger = logging.getLogger(__name__)

GeocodeParameters = Mapping[str, Optional[str]]


class RegionBiasMode(StrEnum):
    NOT_PROVIDED = "not_provided"  # leave any caller-supplied `region` alone
    NONE = "none"                  # force no region bias
    VALUE = "value"                # force `region=<value>`


@dataclass(frozen=True)
class RegionBias:
    """
    How the `region` parameter is overridden.

    Use the constructors rather than building instances directly:
    `RegionBias.not_provided()`, `RegionBias.none()`, `RegionBias.of("fr")`.
    """
    mode: RegionBiasMode = RegionBiasMode.NOT_PROVIDED
    value: Optional[str] = None

    def __post_init__(self):
        if self.mode is RegionBiasMode.VALUE:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError("RegionBias.VALUE requires a non-empty region")
        elif self.value is not None:
            raise ValueError(f"RegionBias.{self.mode.name} does not take a value")

    @classmethod
    def not_provided(cls) -> "RegionBias":
        return cls(RegionBiasMode.NOT_PROVIDED)

    @classmethod
    def none(cls) -> "RegionBias":
        return cls(RegionBiasMode.NONE)

    @classmethod
    def of(cls, region: str) -> "RegionBias":
        return cls(RegionBiasMode.VALUE, region)


class RequestBuilder:
    """
    Builds geocoding request URLs.

    Precedence, lowest to highest:
      1. defaults (`key`)
      2. caller-supplied parameters
      3. overrides: `language` (only when the caller gave none) and
         `region` (only when a region bias was provided)

    Parameters whose value is None are dropped. Output order follows the
    order in which keys were first inserted, so it is deterministic.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        default_language: Optional[str] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url or settings.api_base_url
        self.default_language = default_language or settings.default_language

    def merge_parameters(
        self,
        parameters: GeocodeParameters,
        region_bias: RegionBias = RegionBias(),
    ) -> dict[str, str]:
        """
        Merge defaults, parameters and overrides.
        
        Args:
            parameters: Caller-supplied API parameters; None means "absent"
            region_bias: Region override (see `RegionBias`)
            
        Returns:
            Ordered mapping of the parameters to send
        """
        overrides: dict[str, Optional[str]] = {}

        if "language" not in parameters:
            overrides["language"] = self.default_language

        if region_bias.mode is not RegionBiasMode.NOT_PROVIDED:
            overrides["region"] = region_bias.value

        merged: dict[str, Optional[str]] = {"key": self.api_key}
        merged.update(parameters)
        merged.update(overrides)

        return {k: v for k, v in merged.items() if v is not None}

    def build_url(
        self,
        parameters: GeocodeParameters,
        region_bias: RegionBias = RegionBias(),
    ) -> str:
        """
        Build the full request URL.
        
        Every reserved character is percent-encoded and spaces become
        `%20`, never `+`.
        
        Args:
            parameters: Caller-supplied API parameters; None means "absent"
            region_bias: Region override (see `RegionBias`)
            
        Returns:
            "{base_url}?{query}"
        """
        merged = self.merge_parameters(parameters, region_bias)
        query = urlencode(merged, safe="", quote_via=quote)

        masked = {k: ("***" if k == "key" else v) for k, v in merged.items()}
        logger.debug(f"Built request URL with parameters: {masked}")
        return f"{self.base_url}?{query}"
