from pydantic import BaseModel


class ReportEntry(BaseModel):
    character: str
    occurrences: int
    percentage: float
