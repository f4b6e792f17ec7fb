"""Analyze route (rules plus AI fix suggestions)."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..schemas import AnalyzeRequest, AnalyzeResponse
from ..services import AIService
from ..services.checker import CheckerService, issue_to_out
from ..services.presentation import to_diagnostics
from ..templates import render_analyze_usage
from ..utils import run_check

router = APIRouter()
ai_svc = AIService()


@router.get("/analyze", response_class=HTMLResponse)
def analyze_get() -> str:
    """GET /analyze: usage page with links. Use POST with JSON body for analysis."""
    return render_analyze_usage()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    """Full analysis: rules + AI fix suggestions."""
    issues, code, lang = run_check(req)
    issues_out = [issue_to_out(i) for i in issues]
    ai_suggestions = ai_svc.suggest_fixes(issues_out, code=code, language=lang)
    return AnalyzeResponse(
        issues=issues_out,
        diagnostics=to_diagnostics(issues),
        summary=CheckerService.summarize(issues),
        ai_fix_suggestions=ai_suggestions,
    )
