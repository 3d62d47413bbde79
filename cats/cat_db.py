"""Defines the abstract interface for the favorites database."""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any

# Import the core Cat structure
from cats.cat import Cat


class CatDatabase(ABC):
    """Abstract base class for storing and retrieving favorite Cats.

    Responsibilities:
    - Loading previously saved favorites.
    - Assigning ids to newly saved cats.
    - Storing, retrieving and removing Cat objects.
    """

    @classmethod
    @abstractmethod
    def from_data(cls, cat_records: List[Dict[str, Any]]) -> "CatDatabase":
        """Creates a database instance from a list of cat records.

        Args:
            cat_records: Dictionaries shaped like {"id", "dna", "parent0", "parent1"}.

        Raises:
            ValueError: If any record is invalid or reuses an id.
        """
        pass

    @classmethod
    @abstractmethod
    def from_directories(cls, directory_paths: List[str]) -> "CatDatabase":
        """Creates a database instance by loading from JSON files in specified directories."""
        pass

    @abstractmethod
    def get_cat_by_id(self, cat_id: int) -> Optional[Cat]:
        """Retrieves a cat by its id, or None if the id is not stored."""
        pass

    @abstractmethod
    def get_all_cats(self) -> List[Cat]:
        """Returns a list of all stored cats."""
        pass

    @abstractmethod
    def get_cats_by_parent(self, dna: str) -> List[Cat]:
        """Returns all stored cats that have the given DNA as a parent."""
        pass

    @abstractmethod
    def add_cat(self, cat: Cat) -> Cat:
        """Stores a cat and returns the stored copy, which carries its id."""
        pass

    @abstractmethod
    def remove_cat(self, cat_id: int) -> bool:
        """Removes a cat by id. Returns False if the id was not stored."""
        pass
