"""
Abstract base classes for the geocoding client.

These define the seams where collaborators can be swapped: the HTTP
transport and the locale database used to name countries.
"""

from abc import ABC, abstractmethod


class Transport(ABC):
    """
    Abstract base for HTTP transports.

    A transport performs exactly one GET for a fully-formed URL. Timeouts,
    connection pooling and cancellation are its own concern.
    """

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """
        Fetch the body of a URL.
        
        Args:
            url: Fully-formed request URL, query string included
            
        Returns:
            Raw response body
            
        Raises:
            TransportFailure if the request could not complete or the
            server answered with a non-2xx status
        """
        pass

    def close(self) -> None:
        """Release any resources held by the transport."""
        pass


class RegionNameLookup(ABC):
    """
    Abstract base for region-name databases.

    Implementations follow the ICU convention: when no name is known for a
    code, the code itself is returned.
    """

    @abstractmethod
    def region_display_name(self, language_tag: str, iso_alpha2: str) -> str:
        """
        Resolve the display name of a region.
        
        Args:
            language_tag: Locale to name the region in (e.g. "en", "en-GB")
            iso_alpha2: Uppercase ISO 3166-1 alpha-2 code
            
        Returns:
            Display name, or `iso_alpha2` unchanged if unknown
        """
        pass
