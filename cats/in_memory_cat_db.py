"""In-memory implementation of the CatDatabase interface."""

import os
import json
import logging
from typing import List, Optional, Dict, Any

# Import the interface and data structures
from cats.cat_db import CatDatabase
from cats.cat import Cat


class InMemoryCatDB(CatDatabase):
    """Stores and retrieves favorite cats entirely in memory."""

    def __init__(self):
        """Initializes an empty favorites database."""
        self._cats: Dict[int, Cat] = {}
        logging.info("Initialized empty InMemoryCatDB.")

    @classmethod
    def from_directories(cls, directory_paths: List[str]) -> "InMemoryCatDB":
        """Creates a database instance by loading from JSON files in specified directories."""
        db_instance = cls()
        logging.info("Initializing InMemoryCatDB from directories: %s", directory_paths)

        loaded_count = 0
        error_files = []

        for directory_path in directory_paths:
            if not os.path.isdir(directory_path):
                logging.warning("Directory not found, skipping: %s", directory_path)
                continue

            logging.info("Processing directory: %s", directory_path)
            for filename in sorted(os.listdir(directory_path)):
                # Expect all .json files to contain a LIST of cat records
                if not filename.endswith(".json"):
                    continue
                filepath = os.path.join(directory_path, filename)
                try:
                    with open(filepath, "r", encoding="utf-8") as f:
                        records = json.load(f)
                    if not isinstance(records, list):
                        raise ValueError(
                            f"File {filepath} must contain a JSON list of cats."
                        )
                except (OSError, json.JSONDecodeError, ValueError) as e:
                    logging.error("Failed to load cats from %s: %s", filepath, e)
                    error_files.append(filepath)
                    continue

                for i, record in enumerate(records):
                    try:
                        cat = Cat.from_record(record)
                        db_instance._store(cat)
                        loaded_count += 1
                    except (ValueError, TypeError) as e:
                        logging.error(
                            "Skipping cat at index %d in %s: %s", i, filepath, e
                        )

        logging.info("Finished initialization. Loaded %d cats.", loaded_count)
        if error_files:
            logging.error("Errors encountered loading files: %s", error_files)

        return db_instance

    @classmethod
    def from_data(cls, cat_records: List[Dict[str, Any]]) -> "InMemoryCatDB":
        """Creates a database instance from a list of cat records."""
        db_instance = cls()
        logging.info(
            "Initializing InMemoryCatDB from data list (%d items)", len(cat_records)
        )

        for i, record in enumerate(cat_records):
            try:
                db_instance._store(Cat.from_record(record))
            except (ValueError, TypeError) as e:
                raise ValueError(f"Failed to process cat record at index {i}: {e}") from e

        logging.info("Finished initialization from data. Loaded %d cats.", len(db_instance._cats))
        return db_instance

    # --- Helper Methods ---

    def _next_id(self) -> int:
        # Ids loaded from elsewhere may be opaque strings; only integers are allocated
        return max((k for k in self._cats if isinstance(k, int)), default=0) + 1

    def _store(self, cat: Cat) -> Cat:
        """Internal helper that assigns an id if needed and keeps the cat."""
        if cat.id is None:
            cat = cat.with_id(self._next_id())
        elif cat.id in self._cats:
            raise ValueError(f"Duplicate cat id: {cat.id}")
        self._cats[cat.id] = cat
        return cat

    def save_to_file(self, filepath: str):
        """Writes all cats as a JSON list of records, in insertion order."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        records = [cat.to_record() for cat in self._cats.values()]
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        logging.info("Saved %d cats to %s", len(records), filepath)

    # --- Database Query Methods ---

    def get_cat_by_id(self, cat_id: int) -> Optional[Cat]:
        """Retrieves a cat by its id."""
        return self._cats.get(cat_id)

    def get_all_cats(self) -> List[Cat]:
        """Returns a list of all cats in the database, in insertion order."""
        return list(self._cats.values())

    def get_cats_by_parent(self, dna: str) -> List[Cat]:
        """Returns a list of all cats bred from the given DNA."""
        return [c for c in self._cats.values() if dna in c.parents]

    # --- Mutation Methods ---

    def add_cat(self, cat: Cat) -> Cat:
        """Stores a cat, assigning the next free id when it has none."""
        stored = self._store(cat)
        logging.info("Added cat %s with id %s", stored.dna, stored.id)
        return stored

    def remove_cat(self, cat_id: int) -> bool:
        """Removes a cat by id."""
        if self._cats.pop(cat_id, None) is None:
            logging.warning("Attempted to remove unknown cat id: %s", cat_id)
            return False
        logging.info("Removed cat with id %s", cat_id)
        return True
