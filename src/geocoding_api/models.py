"""
Data models for the geocoding client.

Raw API payloads are parsed into pydantic models (semi-structured input,
unknown fields ignored). Normalized output uses immutable, frozen
dataclasses that serve as the contract with callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# Envelope status of a successful request; any other status is a failure
STATUS_OK = "OK"


# --- Raw response shapes -----------------------------------------------------

class AddressComponent(BaseModel):
    """One tagged fragment of a geocoded address."""
    model_config = ConfigDict(frozen=True)

    long_name: str
    short_name: str
    types: frozenset[str] = frozenset()

    def has_type(self, tag: str) -> bool:
        return tag in self.types


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Geometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: LatLng
    location_type: Optional[str] = None


class GeocodingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    address_components: tuple[AddressComponent, ...] = ()
    geometry: Geometry
    formatted_address: Optional[str] = None
    place_id: Optional[str] = None
    types: tuple[str, ...] = ()


class GeocodingResponse(BaseModel):
    """
    The response envelope.

    `status` stays a plain string: undocumented statuses must still parse
    so that they can be reported back to the caller.
    """
    model_config = ConfigDict(frozen=True)

    status: str
    results: tuple[GeocodingResult, ...] = ()
    error_message: Optional[str] = None

    @property
    def first_result(self) -> Optional[GeocodingResult]:
        return self.results[0] if self.results else None


# --- Normalized output -------------------------------------------------------

@dataclass(frozen=True)
class EnvelopeStatus:
    """Outcome of inspecting a response envelope."""
    ok: bool
    status_code: str
    error_info: Optional[str] = None


@dataclass(frozen=True)
class PostalAddress:
    """A postal address; every part is optional."""
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None
    address_country: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "streetAddress": self.street_address,
            "addressLocality": self.address_locality,
            "addressRegion": self.address_region,
            "postalCode": self.postal_code,
            "addressCountry": self.address_country,
        }


@dataclass(frozen=True)
class GeoCoordinates:
    """
    The normalized result of a geocoding call.

    Mirrors the schema.org GeoCoordinates shape: an address plus a
    latitude/longitude pair.
    """
    latitude: float
    longitude: float
    address: PostalAddress = field(default_factory=PostalAddress)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a schema.org-style dictionary for serialization."""
        return {
            "address": self.address.to_dict(),
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
