"""Configuration module for the ATS message validator."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # Logging level
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Software Version
    VERSION = os.getenv('VERSION', 'v0.0.0')

    # Oman CAA CAR-172 pre-filing lead time (minutes before EOBT)
    OMAN_PREFILING_MINUTES = int(os.getenv('OMAN_PREFILING_MINUTES', '60'))

    # Field 15 sanity limits
    MIN_TAS_KNOTS = int(os.getenv('MIN_TAS_KNOTS', '50'))
    MAX_TAS_KNOTS = int(os.getenv('MAX_TAS_KNOTS', '999'))
    MAX_FLIGHT_LEVEL = int(os.getenv('MAX_FLIGHT_LEVEL', '600'))

    # NOTAM source (AVWX)
    AVWX_API_URL = os.getenv('AVWX_API_URL', 'https://avwx.rest/api/notam')
    AVWX_API_KEY = os.getenv('AVWX_API_KEY', '')
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '15'))

    # Aerodromes fetched by `atsmsg fetch --all`
    AIRPORTS = [a.strip().upper() for a in os.getenv('AIRPORTS', 'OOSA,OOMS').split(',') if a.strip()]

    # Request rate limiting between aerodromes
    MIN_REQUEST_DELAY = float(os.getenv('MIN_REQUEST_DELAY', '1'))
    MAX_REQUEST_DELAY = float(os.getenv('MAX_REQUEST_DELAY', '3'))

    @classmethod
    def validate(cls):
        """Validate configuration consistency."""
        if cls.MIN_TAS_KNOTS >= cls.MAX_TAS_KNOTS:
            raise ValueError("MIN_TAS_KNOTS must be lower than MAX_TAS_KNOTS")
        if cls.MAX_FLIGHT_LEVEL <= 0:
            raise ValueError("MAX_FLIGHT_LEVEL must be positive")
        if cls.MIN_REQUEST_DELAY > cls.MAX_REQUEST_DELAY:
            raise ValueError("MIN_REQUEST_DELAY must not exceed MAX_REQUEST_DELAY")
        return True
