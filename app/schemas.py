"""Pydantic request/response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnalyzeRequest(BaseModel):
    """Unified request: either code (+ optional language) or file_path."""

    code: Optional[str] = None
    language: Optional[str] = Field(default=None, description="c or cpp")
    file_path: Optional[str] = Field(default=None, alias="file_path")

    model_config = {"populate_by_name": True}


class DocumentUpdate(BaseModel):
    """New full text of a tracked document."""

    text: str = Field(..., description="Complete current document content")
    language: Optional[str] = Field(default="cpp", description="c or cpp")


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single energy issue. line and column are zero-based."""

    line: int
    column: int
    length: int
    severity: str = Field(..., description="low, medium, or high")
    message: str
    category: str
    suggestion: str
    score: int = Field(..., ge=1, le=10)


class Position(BaseModel):
    line: int
    character: int


class Range(BaseModel):
    start: Position
    end: Position


class DiagnosticOut(BaseModel):
    """Issue rendered as an editor diagnostic."""

    range: Range
    severity: str = Field(..., description="Error, Warning, or Information")
    message: str
    source: str


class Decoration(BaseModel):
    """Highlight ranges sharing one severity colour."""

    color: str
    ranges: List[Range] = Field(default_factory=list)


# --- Responses ---


class CheckResponse(BaseModel):
    """Response for POST /check (rules-only)."""

    issues: List[IssueOut] = Field(default_factory=list)
    diagnostics: List[DiagnosticOut] = Field(default_factory=list)
    summary: Dict[str, int] = Field(default_factory=dict, description="Issue count per category")


class AnalyzeResponse(CheckResponse):
    """Response for POST /analyze (rules + AI)."""

    ai_fix_suggestions: Optional[str] = Field(default=None, description="AI-generated fix suggestions")


class DocumentResponse(BaseModel):
    """Latest authoritative analysis of a tracked document."""

    doc_id: str
    version: int
    analyzed_version: Optional[int] = Field(
        default=None, description="Version the issues belong to; None until the first scan"
    )
    pending: bool = Field(default=False, description="A debounced rescan is scheduled")
    issues: List[IssueOut] = Field(default_factory=list)
    diagnostics: List[DiagnosticOut] = Field(default_factory=list)
    decorations: Dict[str, Decoration] = Field(default_factory=dict)


class ToggleResponse(BaseModel):
    enabled: bool
