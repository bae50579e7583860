"""
CSV import and data management schemas.
"""

from pydantic import BaseModel, Field
from typing import List


class CsvImportRequest(BaseModel):
    csv_content: str = Field(..., min_length=1)


class CsvImportResponse(BaseModel):
    imported: int
    errors: List[str]
    message: str


class ResetResponse(BaseModel):
    expenses_deleted: int
    categories_deleted: int
    recurring_deleted: int
