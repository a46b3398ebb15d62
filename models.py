# models.py
from typing import List, Optional, Dict, Any, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator


# -----------------------------
# Wire Models
# -----------------------------
class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(..., alias="resumeText", description="Plain text content of the resume")


class AnalysisResult(BaseModel):
    score: Union[int, float] = Field(..., description="ATS score, 0-100 when produced by the scoring service")
    suggestions: List[str] = Field(default_factory=list, description="Ordered improvement suggestions")

    @field_validator("suggestions", mode="before")
    @classmethod
    def _suggestions_as_text(cls, value):
        # null means no suggestions; non-string entries are shown as text
        if value is None:
            return []
        if isinstance(value, list):
            return [item if isinstance(item, str) else str(item) for item in value]
        return value


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
