from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional, Union

Industry = Literal["tech", "marketing", "finance", "healthcare", "sales"]
Level = Literal["entry", "mid", "senior", "executive"]
Language = Literal["en", "es", "fr", "de"]


class AnalysisContext(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    industry: Optional[Industry] = None
    level: Optional[Level] = None
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    language: Language = "en"


class CVAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    strengths: List[str] = []
    weaknesses: List[str] = []
    suggestions: List[str] = []
    improved_content: Optional[Union[str, List[Any]]] = Field(
        default=None, alias="improvedContent"
    )


class FullCVAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall_score: int = Field(alias="overallScore")
    section_analyses: Dict[str, CVAnalysis] = Field(alias="sectionAnalyses")
    recommendations: List[str] = []


class ImproveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # checked by the handler; a malformed cvData reads as an empty CV
    cv_data: Any = Field(default_factory=dict, alias="cvData")
    section: Optional[Any] = None
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    # explicit overrides; detected from the CV when absent
    industry: Optional[Industry] = None
    level: Optional[Level] = None
    language: Optional[Language] = None
