"""
IP to location lookup through the ipinfo.io-style JSON API.

GET {EDIT_HISTORY_GEOLOCATION_URL}/{ip}/json?token={api_key}
"""

import logging

import requests
from django.conf import settings

from common.utils import get_api_key
from core.constants import LOCATION_NOT_FOUND

logger = logging.getLogger(__name__)

DEFAULT_GEOLOCATION_URL = 'https://ipinfo.io'


def _lookup_url(ip):
    base_url = getattr(settings, 'EDIT_HISTORY_GEOLOCATION_URL', DEFAULT_GEOLOCATION_URL)
    return f"{base_url.rstrip('/')}/{ip}/json"


def format_location(data):
    """'City, Region, Country' when all three are present, else the sentinel"""
    if not isinstance(data, dict):
        return LOCATION_NOT_FOUND
    city = data.get('city')
    region = data.get('region')
    country = data.get('country')
    if city and region and country:
        return f"{city}, {region}, {country}"
    return LOCATION_NOT_FOUND


def resolve(ip):
    """
    Resolve an IP address to a place string.

    Never raises: transport errors, error payloads and malformed bodies all
    give 'Location not found'. The request is made even without an API key.
    """
    api_key = get_api_key()
    timeout = getattr(settings, 'EDIT_HISTORY_GEOLOCATION_TIMEOUT', None)

    try:
        response = requests.get(_lookup_url(ip), params={'token': api_key}, timeout=timeout)
        data = response.json()
    except requests.RequestException as e:
        logger.warning(f"Geolocation lookup failed for {ip}: {e}")
        return LOCATION_NOT_FOUND
    except ValueError as e:
        logger.warning(f"Geolocation response for {ip} is not JSON: {e}")
        return LOCATION_NOT_FOUND

    location = format_location(data)
    if location == LOCATION_NOT_FOUND:
        logger.info(f"No location for {ip} (HTTP {response.status_code})")
    return location
