"""
Client for a geocoding HTTP API.

- Countries: country-code validation, display names and ccTLDs
- Request builder: parameter precedence and RFC 3986 URL encoding
- Transport: HTTP GET through requests
- Normalizers: envelope inspection and address extraction
- Geocoders: the `Geocode` convenience client
"""

from .models import (
    STATUS_OK,
    AddressComponent,
    LatLng,
    Geometry,
    GeocodingResult,
    GeocodingResponse,
    EnvelopeStatus,
    PostalAddress,
    GeoCoordinates,
)

from .errors import (
    GeocodingError,
    InvalidFormat,
    UnknownCountry,
    TransportFailure,
    RequestUnsuccessful,
    NoResults,
    ResponseValidationError,
)

from .base import (
    Transport,
    RegionNameLookup,
)

from .countries import (
    Country,
    CountryRegistry,
    BabelRegionNames,
    StaticRegionNames,
    top_level_domain,
)

from .request_builder import (
    RegionBias,
    RegionBiasMode,
    RequestBuilder,
)

from .normalizers import (
    ResponseNormalizer,
    STREET_NUMBER_AFTER_ROUTE_COUNTRIES,
)

from .transport import (
    RequestsTransport,
)

from .geocoders import (
    Geocode,
)

__all__ = [
    # Models
    "STATUS_OK",
    "AddressComponent",
    "LatLng",
    "Geometry",
    "GeocodingResult",
    "GeocodingResponse",
    "EnvelopeStatus",
    "PostalAddress",
    "GeoCoordinates",
    # Errors
    "GeocodingError",
    "InvalidFormat",
    "UnknownCountry",
    "TransportFailure",
    "RequestUnsuccessful",
    "NoResults",
    "ResponseValidationError",
    # Base classes
    "Transport",
    "RegionNameLookup",
    # Countries
    "Country",
    "CountryRegistry",
    "BabelRegionNames",
    "StaticRegionNames",
    "top_level_domain",
    # Request building
    "RegionBias",
    "RegionBiasMode",
    "RequestBuilder",
    # Normalizers
    "ResponseNormalizer",
    "STREET_NUMBER_AFTER_ROUTE_COUNTRIES",
    # Transport
    "RequestsTransport",
    # Geocoders
    "Geocode",
]
