"""
Geocoding API client.

Composes the request builder, an HTTP transport and the response
normalizer into convenience lookups by address, postcode or coordinates.

Example:
    from geocoding_api import Geocode

    geocode = Geocode(api_key="your_key")
    coords = geocode.by_address("25 Old Gardens Close Tunbridge Wells", "GB")
    print(coords.latitude, coords.longitude)
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .base import Transport
from .countries import Country, CountryRegistry
from .errors import NoResults, RequestUnsuccessful
from .models import GeoCoordinates, GeocodingResponse
from .normalizers import ResponseNormalizer
from .request_builder import GeocodeParameters, RegionBias, RequestBuilder
from .settings import settings
from .transport import RequestsTransport

logger = logging.getLogger(__name__)


class Geocode:
    """
    Client for the geocoding API.

    Each call is an independent pipeline: build URL, fetch, normalize. No
    mutable state is shared between calls.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[Transport] = None,
        countries: Optional[CountryRegistry] = None,
        normalizer: Optional[ResponseNormalizer] = None,
        base_url: Optional[str] = None,
        default_language: Optional[str] = None,
    ):
        """
        Args:
            api_key: API key (defaults to settings, i.e. GEOCODING_API_KEY)
            transport: HTTP transport (defaults to RequestsTransport)
            countries: Country registry (defaults to a Babel-backed one)
            normalizer: Response normalizer
            base_url: Endpoint URL (defaults to settings)
            default_language: `language` sent when the caller gives none
        """
        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("No API key given and GEOCODING_API_KEY is not set")

        self.request_builder = RequestBuilder(
            api_key=api_key,
            base_url=base_url,
            default_language=default_language,
        )
        self.transport = transport if transport is not None else RequestsTransport()
        self.countries = countries if countries is not None else CountryRegistry()
        self.normalizer = normalizer if normalizer is not None else ResponseNormalizer()

        logger.info(f"Initialized Geocode client: {self.request_builder.base_url}")

    def close(self) -> None:
        """Close the transport, releasing its HTTP session."""
        self.transport.close()

    def __enter__(self) -> "Geocode":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def api_key(self) -> str:
        return self.request_builder.api_key

    def create_url(
        self,
        parameters: GeocodeParameters,
        region_bias: RegionBias = RegionBias(),
    ) -> str:
        return self.request_builder.build_url(parameters, region_bias)

    def __call__(
        self,
        parameters: GeocodeParameters,
        region_or_country_bias: Union[Country, str, None] = None,
    ) -> GeocodingResponse:
        """
        Perform one raw request and return the parsed envelope.

        Success is not enforced here; see `by_address` and friends.

        Args:
            parameters: API parameters
            region_or_country_bias: A Country (its ccTLD is used), a region
                string (used verbatim), or None for no region bias at all

        Raises:
            TransportFailure, ResponseValidationError
        """
        if isinstance(region_or_country_bias, Country):
            region_bias = RegionBias.of(region_or_country_bias.top_level_domain)
        elif region_or_country_bias is None:
            region_bias = RegionBias.none()
        else:
            region_bias = RegionBias.of(region_or_country_bias)

        url = self.create_url(parameters, region_bias)
        body = self.transport.fetch(url)
        return self.normalizer.parse(body)

    def _country_or_none(self, country_code: Optional[str]) -> Optional[Country]:
        if country_code is None:
            return None
        return self.countries.validate_and_describe(country_code)

    def _by_parameters(
        self,
        parameters: GeocodeParameters,
        country_code_bias: Optional[str],
    ) -> GeoCoordinates:
        # Validate before touching the network
        country = self._country_or_none(country_code_bias)

        response = self(parameters, country)

        envelope = self.normalizer.parse_envelope(response)
        if not envelope.ok:
            raise RequestUnsuccessful(envelope.status_code, response.error_message)

        coordinates = self.normalizer.extract_first_coordinates(response)
        if coordinates is None:
            raise NoResults(f"No results for {dict(parameters)}")

        return coordinates

    def by_address(
        self,
        address: str,
        country_code_bias: Optional[str] = None,
    ) -> GeoCoordinates:
        """
        Geocode a free-form address.

        Street address elements should be delimited by spaces.

        Args:
            address: Address to look up
            country_code_bias: Optional ISO 3166-1 alpha-2 code to bias results

        Raises:
            InvalidFormat, UnknownCountry: bad `country_code_bias`
            TransportFailure: the HTTP round trip failed
            RequestUnsuccessful: the API returned a non-OK status
            NoResults: the API returned no results
        """
        return self._by_parameters({"address": address}, country_code_bias)

    def by_postcode(self, postcode: str, country_code: str) -> GeoCoordinates:
        """
        Geocode a postcode.

        A postcode needs a country to be unambiguous. The country's full name
        is appended to the query and the same country is used as the bias.
        """
        country = self.countries.validate_and_describe(country_code)

        return self.by_address(
            f"{postcode} {country.long_name}",
            country.iso_alpha2,
        )

    def by_lat_long(
        self,
        lat: Union[float, str],
        long: Union[float, str],
        country_code_bias: Optional[str] = None,
    ) -> GeoCoordinates:
        """
        Geocode a latitude/longitude pair.

        The API rejects whitespace inside `latlng`, so both values are
        trimmed and joined with a bare comma.
        """
        latlng = ",".join(str(value).strip() for value in (lat, long))
        return self._by_parameters({"latlng": latlng}, country_code_bias)
