"""NOTAM source client with rate limiting and inheritance support."""
import re
import time
import random
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import requests

from atsmsg.config import Config

logger = logging.getLogger(__name__)

ICAO_PATTERN = re.compile(r'^[A-Z]{4}$')

# Keys that carry the ICAO NOTAM text in a provider's JSON item
RAW_TEXT_KEYS = ('raw', 'text', 'body')


def normalize_icao(airport_code: str) -> str:
    """Upper-case and check an aerodrome location indicator."""
    code = (airport_code or '').strip().upper()
    if not ICAO_PATTERN.match(code):
        raise ValueError(f"Invalid ICAO location indicator: {airport_code!r}")
    return code


class BaseNotamClient(ABC):
    """
    Abstract base class for NOTAM sources.

    Subclasses supply authentication, request building and response parsing;
    the base class runs the request and turns transport failures into an
    empty result.
    """

    def __init__(self):
        self.config = Config()
        self.session = requests.Session()
        self._setup_authentication()

    @abstractmethod
    def _setup_authentication(self):
        """Setup authentication headers. Override in subclasses."""

    @abstractmethod
    def _build_request(self, airport_code: str) -> tuple[str, dict, dict]:
        """
        Build the API request parameters.

        Returns:
            Tuple of (url, headers, params)
        """

    @abstractmethod
    def _parse_response(self, response_data: Any) -> List[str]:
        """Extract raw NOTAM texts from the API response."""

    def fetch_notams_for_airport(self, airport_code: str) -> List[str]:
        """
        Fetch raw NOTAM texts for one aerodrome.

        Args:
            airport_code: ICAO location indicator

        Returns:
            List of raw NOTAM strings, empty when the request fails

        Raises:
            ValueError: If airport_code is not four letters
        """
        code = normalize_icao(airport_code)
        try:
            url, headers, params = self._build_request(code)
            response = self.session.get(url, params=params, headers=headers,
                                        timeout=self.config.REQUEST_TIMEOUT)
            response.raise_for_status()
            return self._parse_response(response.json())

        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 429:
                logger.error(f"Rate limited for {code}. Consider increasing delays.")
            else:
                logger.error(f"HTTP error fetching NOTAMs for {code}: {e}")
            return []
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching NOTAMs for {code}: {e}")
            return []

    def fetch_all_notams(self) -> Dict[str, List[str]]:
        """
        Fetch NOTAMs for all configured aerodromes with a randomised delay
        between requests.

        Returns:
            Mapping of ICAO code to its raw NOTAM strings
        """
        results = {}
        airports = self.config.AIRPORTS
        total_airports = len(airports)

        logger.info(f"Fetching NOTAMs for {total_airports} airport(s)")

        for idx, airport_code in enumerate(airports, 1):
            logger.info(f"[{idx}/{total_airports}] Fetching NOTAMs for {airport_code}")
            notams = self.fetch_notams_for_airport(airport_code)
            results[airport_code] = notams

            if notams:
                logger.info(f"  → Retrieved {len(notams)} NOTAM(s)")
            else:
                logger.warning("  → No NOTAMs retrieved")

            if idx < total_airports:
                delay = random.uniform(self.config.MIN_REQUEST_DELAY, self.config.MAX_REQUEST_DELAY)
                logger.debug(f"  → Waiting {delay:.2f}s before next request")
                time.sleep(delay)

        logger.info(f"Fetched {sum(len(n) for n in results.values())} total NOTAM(s) "
                    f"from {total_airports} airport(s)")
        return results


class AvwxNotamClient(BaseNotamClient):
    """NOTAM client for the AVWX REST API (Bearer token)."""

    def _setup_authentication(self):
        if not self.config.AVWX_API_KEY:
            raise ValueError("AVWX_API_KEY is required to fetch NOTAMs")
        self.session.headers.update({
            'Authorization': f'Bearer {self.config.AVWX_API_KEY}'
        })

    def _build_request(self, airport_code: str) -> tuple[str, dict, dict]:
        url = f"{self.config.AVWX_API_URL.rstrip('/')}/{airport_code}"
        headers = {"Accept": "application/json"}
        params = {"format": "json"}
        return url, headers, params

    def _parse_response(self, response_data: Any) -> List[str]:
        """
        Parse an AVWX response.

        Accepts a bare list or a dict wrapping the list in "data" or "notams";
        each item is either a string or a dict carrying raw/text/body.
        """
        if isinstance(response_data, dict):
            items = response_data.get('data') or response_data.get('notams') or []
        elif isinstance(response_data, list):
            items = response_data
        else:
            logger.warning(f"Unexpected response format: {type(response_data)}")
            return []

        texts = []
        for item in items:
            if isinstance(item, str):
                text = item
            elif isinstance(item, dict):
                text = next((item[key] for key in RAW_TEXT_KEYS if item.get(key)), '')
            else:
                text = ''
            if text:
                texts.append(text)
        return texts


def get_notam_client() -> BaseNotamClient:
    """
    Factory function to instantiate the configured NOTAM client.

    Raises:
        ValueError: If no API key is configured
    """
    logger.info(f"Using AVWX NOTAM client ({Config.AVWX_API_URL})")
    return AvwxNotamClient()
