"""
This module defines the Cat class, the value type at the heart of the
cattery. A cat exists only as a sequence of DNA; new cats are made by
interlacing the DNA of two existing cats.
"""

import random
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

import config

DNA_PATTERN = re.compile(
    "[{}]{{{}}}".format(re.escape(config.DNA_ALPHABET), config.DNA_LENGTH)
)
DNA_FORMAT_MESSAGE = "DNA must match [A-Z]{%d}" % config.DNA_LENGTH


class ValidationError(ValueError):
    """Raised when a cat is built from DNA that is not 32 uppercase letters."""


@dataclass(frozen=True)
class CatOptions:
    """
    Optional settings for building a cat.

    Attributes:
        parents: The full DNA of both parents, or empty for a cat that was
            not bred.
        id: Identifier assigned by the favorites store, None until saved.
    """
    parents: Tuple[str, ...] = ()
    id: Optional[int] = None


@dataclass(frozen=True)
class Cat:
    """
    Represents a single cat.

    Every Cat passes through the DNA check in __post_init__, whether it was
    generated, bred, or rehydrated from the favorites store.

    Attributes:
        dna: 32 characters, each an uppercase Latin letter.
        parents: DNA of both parents for a bred cat, otherwise empty.
        id: Identifier of a persisted cat, None otherwise.
    """
    dna: str
    parents: Tuple[str, ...] = field(default=())
    id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.dna, str) or not DNA_PATTERN.fullmatch(self.dna):
            raise ValidationError(DNA_FORMAT_MESSAGE)
        parents = tuple(self.parents or ())
        if parents and len(parents) != 2:
            raise ValidationError(
                f"Cat parents must hold exactly 2 DNA sequences, got {len(parents)}."
            )
        object.__setattr__(self, "parents", parents)

    @classmethod
    def construct(cls, dna: str, options: Optional[CatOptions] = None) -> "Cat":
        """Creates a cat from the given DNA, raising ValidationError on bad format."""
        options = options or CatOptions()
        return cls(dna=dna, parents=options.parents, id=options.id)

    @classmethod
    def generate_random(cls, rng: Optional[random.Random] = None) -> "Cat":
        """
        Generates a cat with uniformly random DNA and no parents.

        Args:
            rng: Anything with a random.Random style choices() method. Falls
                back to the module-level random generator.
        """
        source = rng if rng is not None else random
        dna = "".join(source.choices(config.DNA_ALPHABET, k=config.DNA_LENGTH))
        return cls.construct(dna)

    @property
    def is_bred(self) -> bool:
        """True if the cat was produced by mating two other cats."""
        return len(self.parents) != 0

    def mate(self, other: "Cat") -> "Cat":
        """
        Produces a kitten by interlacing the DNA of this cat and another.

        Only the first 16 characters of each parent are used: the kitten
        takes this cat's character at every even position and the other
        cat's at every odd position. The trailing halves are dropped.
        """
        a = self.dna[: config.MATE_PREFIX_LENGTH]
        b = other.dna[: config.MATE_PREFIX_LENGTH]
        kitten_dna = "".join(x + y for x, y in zip(a, b))
        return Cat.construct(kitten_dna, CatOptions(parents=(self.dna, other.dna)))

    def with_id(self, cat_id: Optional[int]) -> "Cat":
        """Returns a copy of this cat carrying the given persisted id."""
        return replace(self, id=cat_id)

    # --- Record Conversion ---

    def to_record(self) -> Dict[str, Any]:
        """Returns the favorites store representation of this cat."""
        parent0, parent1 = self.parents if self.is_bred else (None, None)
        return {"id": self.id, "dna": self.dna, "parent0": parent0, "parent1": parent1}

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Cat":
        """Rehydrates a cat from a favorites store record."""
        if not isinstance(record, dict):
            raise TypeError(f"Cat record must be a dictionary, got {type(record).__name__}.")
        parent0 = record.get("parent0")
        parent1 = record.get("parent1")
        if parent0 is None and parent1 is None:
            parents: Tuple[str, ...] = ()
        elif parent0 is None or parent1 is None:
            raise ValidationError("Cat record must have both 'parent0' and 'parent1' or neither.")
        else:
            parents = (parent0, parent1)
        return cls.construct(record.get("dna"), CatOptions(parents=parents, id=record.get("id")))
