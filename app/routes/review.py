"""Review route (form-based code analysis)."""

from deps import APIRouter, Form, HTMLResponse

from ..services import CheckerService
from ..templates import render_review_form, render_review_results

router = APIRouter()
checker_svc = CheckerService()


@router.get("/review", response_class=HTMLResponse)
def review_get() -> str:
    """Form: paste code for analysis."""
    return render_review_form()


@router.post("/review", response_class=HTMLResponse)
def review_post(code: str = Form(default="")) -> str:
    """Run analysis on pasted code and render highlighted results."""
    if not code.strip():
        return render_review_form(error="Code is required.", value=code)
    # Browsers submit textarea content with CRLF line endings
    code = code.replace("\r\n", "\n")
    return render_review_results(code, checker_svc.analyze_code(code))
