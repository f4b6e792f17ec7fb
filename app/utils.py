"""Utility functions for the API."""

from deps import HTTPException, List, Optional, Path, Tuple, logging

from energy_checker.issue import Issue
from energy_checker.utils import detect_language, is_supported_language

from .schemas import AnalyzeRequest
from .services import CheckerService

logger = logging.getLogger(__name__)

checker_svc = CheckerService()


def run_check(req: AnalyzeRequest) -> Tuple[List[Issue], Optional[str], Optional[str]]:
    """Run checker. Returns (issues, code, language) for AI. code/lang are set when available."""
    if req.file_path:
        p = Path(req.file_path)
        if not p.is_absolute():
            raise HTTPException(400, "file_path must be absolute")
        if not p.exists():
            raise HTTPException(404, f"File not found: {req.file_path}")
        lang = detect_language(p)
        if not is_supported_language(lang):
            raise HTTPException(400, f"Not a C/C++ source file: {req.file_path}")
        try:
            code = p.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            raise HTTPException(400, f"Could not read file: {e}")
        logger.info("Analyzing %s", p)
        return checker_svc.analyze_code(code), code, lang
    if req.code is not None:
        lang = req.language or "cpp"
        if not is_supported_language(lang):
            raise HTTPException(400, f"Unsupported language: {lang}. Use c or cpp.")
        return checker_svc.analyze_code(req.code), req.code, lang.strip().lower()
    raise HTTPException(
        400,
        "Provide either code (+ optional language) or file_path.",
    )
