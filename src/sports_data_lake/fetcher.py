"""Fetch sports statistics from the external REST API."""

from typing import Any, Optional

import requests

from .exceptions import ApiStatusError, FetchError
from .models import RecordBatch
from .utils.logger import get_logger

logger = get_logger(__name__)

API_KEY_HEADER = "Ocp-Apim-Subscription-Key"


def fetch_records(endpoint: str, api_key: str, session: Optional[Any] = None) -> RecordBatch:
    """
    Fetch one batch of records from the sports data API.

    Args:
        endpoint: Full URL of the API endpoint
        api_key: Subscription key sent in the Ocp-Apim-Subscription-Key header
        session: Object with a requests-style ``get``. If None, uses ``requests``.

    Returns:
        RecordBatch decoded from the response body.

    Raises:
        FetchError: On transport failure or a body that is not JSON.
        ApiStatusError: If the API answers with anything but 200.
        UnexpectedStructureError: If the JSON is not an array or an object.
    """
    http = session if session is not None else requests

    logger.info(f"Fetching data from {endpoint}")
    try:
        response = http.get(endpoint, headers={API_KEY_HEADER: api_key})
    except requests.exceptions.RequestException as e:
        raise FetchError(f"API request failed: {e}") from e

    if response.status_code != requests.codes.ok:
        raise ApiStatusError(response.status_code, response.text)

    try:
        payload = response.json()
    except ValueError as e:
        raise FetchError(f"Failed to decode API response: {e}") from e

    batch = RecordBatch.from_json(payload)
    logger.info(f"Fetched {len(batch)} records")
    return batch
