"""
Response normalization.

Parses the raw JSON envelope returned by the geocoding API and reduces its
first result to a `GeoCoordinates` record.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .errors import ResponseValidationError, format_error_info
from .models import (
    AddressComponent,
    EnvelopeStatus,
    GeoCoordinates,
    GeocodingResponse,
    GeocodingResult,
    PostalAddress,
    STATUS_OK,
)

logger = logging.getLogger(__name__)

# Countries that write the street number after the street name ("Via Roma 25")
STREET_NUMBER_AFTER_ROUTE_COUNTRIES = frozenset({"CH", "ES", "IT"})

RawResponse = Union[GeocodingResponse, Mapping[str, Any], bytes, str]


class ResponseNormalizer:
    """
    Turns raw geocoding responses into normalized records.

    Holds no state; every method is a pure function of its input, which is
    never mutated.
    """

    def parse(self, raw: RawResponse) -> GeocodingResponse:
        """
        Parse a raw response into the typed envelope.
        
        Args:
            raw: Response body (bytes/str), decoded JSON mapping, or an
                already-parsed envelope
            
        Returns:
            GeocodingResponse
            
        Raises:
            ResponseValidationError if the body is not JSON or does not
            match the envelope shape
        """
        if isinstance(raw, GeocodingResponse):
            return raw

        if isinstance(raw, (bytes, str)):
            try:
                raw = json.loads(raw)
            except ValueError as e:
                raise ResponseValidationError(
                    errors=[{"loc": (), "msg": str(e), "type": "json_invalid"}]
                ) from e

        try:
            return GeocodingResponse.model_validate(raw)
        except ValidationError as e:
            raise ResponseValidationError.from_validation_error(e) from e

    def parse_envelope(self, raw: RawResponse) -> EnvelopeStatus:
        """
        Inspect the envelope status.
        
        `error_info` is the status alone, or "{status}: {error_message}"
        when the API sent an error message; None on success.
        """
        response = self.parse(raw)

        if response.status == STATUS_OK:
            return EnvelopeStatus(ok=True, status_code=response.status)

        error_info = format_error_info(response.status, response.error_message)
        logger.warning(f"Geocoding request unsuccessful: {error_info}")
        return EnvelopeStatus(ok=False, status_code=response.status, error_info=error_info)

    @staticmethod
    def first_matching_component(
        result: GeocodingResult,
        tag: str,
    ) -> Optional[AddressComponent]:
        """Return the first address component tagged `tag`, in original order."""
        for component in result.address_components:
            if component.has_type(tag):
                return component
        return None

    def _street_address(self, result: GeocodingResult, address_country: Optional[str]) -> Optional[str]:
        route = self.first_matching_component(result, "route")
        street_address = route.long_name if route is not None else None

        if not street_address:
            return street_address

        street_number = self.first_matching_component(result, "street_number")
        if street_number is None:
            return street_address

        if address_country in STREET_NUMBER_AFTER_ROUTE_COUNTRIES:
            return f"{street_address} {street_number.long_name}"
        return f"{street_number.long_name} {street_address}"

    def extract_first_coordinates(self, raw: RawResponse) -> Optional[GeoCoordinates]:
        """
        Normalize the first result of a response.
        
        Args:
            raw: Raw or parsed response
            
        Returns:
            GeoCoordinates, or None if the response holds no results
        """
        result = self.parse(raw).first_result
        if result is None:
            return None

        def long_name_of(*tags: str) -> Optional[str]:
            for tag in tags:
                component = self.first_matching_component(result, tag)
                if component is not None:
                    return component.long_name
            return None

        country = self.first_matching_component(result, "country")
        address_country = country.short_name if country is not None else None

        address = PostalAddress(
            street_address=self._street_address(result, address_country),
            address_locality=long_name_of("postal_town", "locality"),
            address_region=long_name_of("administrative_area_level_2"),
            postal_code=long_name_of("postal_code"),
            address_country=address_country,
        )

        location = result.geometry.location
        return GeoCoordinates(
            latitude=location.lat,
            longitude=location.lng,
            address=address,
        )
