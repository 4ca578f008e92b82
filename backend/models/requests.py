from pydantic import BaseModel, Field


class TextAnalyzeRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=50000, description="Resume content as plain text")
