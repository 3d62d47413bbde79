"""Client for the favorites REST endpoint (POST/DELETE/GET /cats)."""

import logging
from typing import List, Optional

import requests

# Import configuration settings
import config

from cats.cat import Cat


class FavoritesClient:
    """Persists favorite cats to a remote store over HTTP."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or config.FAVORITES_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    def _cats_url(self, cat_id: Optional[int] = None) -> str:
        if cat_id is None:
            return f"{self.base_url}/cats"
        return f"{self.base_url}/cats/{cat_id}"

    def save_favorite(self, cat: Cat) -> Cat:
        """Saves a cat and returns a copy carrying the id the store assigned.

        Raises:
            requests.HTTPError: If the store rejects the request.
        """
        record = cat.to_record()
        payload = {
            "dna": record["dna"],
            "parent0": record["parent0"],
            "parent1": record["parent1"],
        }
        response = requests.post(self._cats_url(), json=payload, timeout=self.timeout)
        response.raise_for_status()
        cat_id = response.json().get("id")
        logging.info("Saved favorite %s with id %s", cat.dna, cat_id)
        return cat.with_id(cat_id)

    def remove_favorite(self, cat_id: int):
        """Deletes a favorite by id.

        Raises:
            requests.HTTPError: If the store rejects the request.
        """
        response = requests.delete(self._cats_url(cat_id), timeout=self.timeout)
        response.raise_for_status()
        logging.info("Removed favorite with id %s", cat_id)

    def fetch_favorites(self) -> List[Cat]:
        """Fetches all favorites, skipping records that are not valid cats."""
        response = requests.get(self._cats_url(), timeout=self.timeout)
        response.raise_for_status()

        cats = []
        for record in response.json():
            try:
                cats.append(Cat.from_record(record))
            except (ValueError, TypeError) as e:
                logging.warning("Skipping invalid favorite record %s: %s", record, e)
        logging.info("Fetched %d favorites from %s", len(cats), self.base_url)
        return cats
