"""
Report module data models.

Reports are submitted through the bot; this backend only reads them.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from modules.shelters.models import Species


class Report(BaseModel):
    """
    A daily care report for one adoption.

    A report is complete when it has both a photo and a text.
    """

    id: int = Field(..., description="Report ID")
    species: Species = Field(..., description="Shelter partition")
    adoption_id: int = Field(..., description="Adoption the report belongs to")
    report_date: date = Field(..., description="Day the report covers")
    photo: Optional[str] = Field(None, description="Stored photo reference")
    text: Optional[str] = Field(None, description="Diet, well-being and behaviour notes")

    @property
    def is_complete(self) -> bool:
        return bool(self.photo) and bool(self.text and self.text.strip())
