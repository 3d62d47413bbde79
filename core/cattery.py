"""
This module defines the Cattery class, which holds the state of one page of
the demo: the randomly generated originals, the kittens bred from them, and
the currently selected cat.
"""
import logging
import random
from typing import List, Optional

import requests

import config
from cats.cat import Cat
from utils.favorites_api import FavoritesClient


class Cattery:
    """
    Manages the cats on display and the select-then-mate flow between them.
    """
    def __init__(
        self,
        favorites_client: Optional[FavoritesClient] = None,
        rng: Optional[random.Random] = None,
        original_count: Optional[int] = None,
    ):
        self.favorites_client = favorites_client
        self.rng = rng
        self.original_count = (
            original_count if original_count is not None else config.ORIGINAL_CAT_COUNT
        )
        self.originals: List[Cat] = []
        self.kittens: List[Cat] = []
        self.selected_dna: Optional[str] = None

    def start(self):
        """Generates the original cats and loads saved favorites."""
        self.originals = [
            Cat.generate_random(self.rng) for _ in range(self.original_count)
        ]
        logging.info("Generated %d original cats.", len(self.originals))
        if self.favorites_client is not None:
            self.load_favorites()

    def load_favorites(self):
        """Appends every saved favorite to the kittens on display."""
        try:
            favorites = self.favorites_client.fetch_favorites()
        except requests.RequestException as e:
            logging.error("Could not load favorites: %s", e)
            return
        self.kittens.extend(favorites)

    def get_cat_by_dna(self, dna: str) -> Cat:
        """Finds a displayed cat by DNA. Raises KeyError if none is shown."""
        for cat in self.originals + self.kittens:
            if cat.dna == dna:
                return cat
        raise KeyError(dna)

    def click(self, dna: str) -> Optional[Cat]:
        """
        Handles a click on a cat.

        Clicking the selected cat deselects it. Clicking another cat while
        one is selected mates the clicked cat with the selected one and
        returns the kitten. Otherwise the clicked cat becomes selected.
        """
        clicked = self.get_cat_by_dna(dna)

        if self.selected_dna == dna:
            self.selected_dna = None
            return None

        if self.selected_dna is not None:
            mate = self.get_cat_by_dna(self.selected_dna)
            kitten = clicked.mate(mate)
            self.kittens.append(kitten)
            self.selected_dna = None
            logging.info("Mated %s with %s: %s", clicked.dna, mate.dna, kitten.dna)
            return kitten

        self.selected_dna = dna
        return None

    def toggle_favorite(self, index: int) -> Cat:
        """
        Saves or removes the kitten at the given position as a favorite.

        Returns the kitten as it is displayed afterwards. Failed requests are
        logged and leave the kitten unchanged.
        """
        kitten = self.kittens[index]
        if not kitten.is_bred:
            raise ValueError("Only bred cats can be favorited.")
        if self.favorites_client is None:
            raise RuntimeError("No favorites client configured.")

        try:
            if kitten.id is None:
                updated = self.favorites_client.save_favorite(kitten)
            else:
                self.favorites_client.remove_favorite(kitten.id)
                updated = kitten.with_id(None)
        except requests.RequestException as e:
            logging.error("Could not update favorite %s: %s", kitten.dna, e)
            return kitten

        self.kittens[index] = updated
        return updated

    def set_free(self, index: int) -> Cat:
        """Removes the kitten at the given position, deleting its favorite if saved."""
        kitten = self.kittens.pop(index)
        if kitten.id is not None and self.favorites_client is not None:
            try:
                self.favorites_client.remove_favorite(kitten.id)
            except requests.RequestException as e:
                logging.error("Could not remove favorite %s: %s", kitten.id, e)
        if self.selected_dna == kitten.dna:
            self.selected_dna = None
        return kitten
