"""
Shelter module data models.

Species is the partition key for every per-shelter store: adoptions,
pets and reports each live in a DOG and a CAT partition.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Species(str, Enum):
    """Shelters, one per animal species."""

    DOG = "dog"
    CAT = "cat"


class User(BaseModel):
    """
    An adopter or a volunteer.

    `shelter` is the shelter the user picked in the bot; it decides which
    species partition their adoptions and reports are looked up in.
    """

    id: int = Field(..., description="User ID")
    name: str = Field(default="", description="Display name")
    chat_id: Optional[int] = Field(
        None,
        description="Messenger chat ID (defaults to the user ID)",
    )
    shelter: Optional[Species] = Field(None, description="Shelter affiliation")

    @property
    def messenger_chat_id(self) -> int:
        return self.chat_id if self.chat_id is not None else self.id


class Pet(BaseModel):
    """An animal kept by one of the shelters."""

    id: int = Field(..., description="Pet ID, unique within its species")
    species: Species = Field(..., description="Which shelter the pet belongs to")
    name: str = Field(default="", description="Pet name")
