"""Check route (rules-only analysis)."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..schemas import AnalyzeRequest, CheckResponse
from ..services.checker import CheckerService, issue_to_out
from ..services.presentation import to_diagnostics
from ..templates import render_check_usage
from ..utils import run_check

router = APIRouter()


@router.get("/check", response_class=HTMLResponse)
def check_get() -> str:
    """GET /check: usage page with links. Use POST with JSON body for rules-only analysis."""
    return render_check_usage()


@router.post("/check", response_model=CheckResponse)
def check(req: AnalyzeRequest) -> CheckResponse:
    """Rules-only analysis. No AI."""
    issues, _, _ = run_check(req)
    return CheckResponse(
        issues=[issue_to_out(i) for i in issues],
        diagnostics=to_diagnostics(issues),
        summary=CheckerService.summarize(issues),
    )
