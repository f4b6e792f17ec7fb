"""AI service: Together.ai for energy fix suggestions."""

from ..config import get_together_api_key, get_together_model
from deps import Any, List, OpenAI, Optional, logging
from ..schemas import IssueOut

logger = logging.getLogger(__name__)


def _client() -> Optional[Any]:
    """Return OpenAI-compatible client for Together.ai, or None if no key is configured."""
    key = get_together_api_key()
    if not key:
        return None
    return OpenAI(api_key=key, base_url="https://api.together.xyz/v1")


def _issues_summary(issues: List[IssueOut]) -> str:
    if not issues:
        return "No rule-based issues found."
    parts = []
    for i in issues:
        parts.append(
            f"- Line {i.line + 1}, col {i.column + 1} [{i.severity}] {i.category} "
            f"(score {i.score}/10): {i.message}\n  Suggestion: {i.suggestion}"
        )
    return "\n".join(parts)


class AIService:
    """Together.ai-backed fix suggestions."""

    def suggest_fixes(
        self,
        issues: List[IssueOut],
        code: Optional[str] = None,
        language: Optional[str] = None,
    ) -> Optional[str]:
        """Return AI-generated fix suggestions for the given issues. None if AI unavailable."""
        client = _client()
        if not client:
            return None
        model = get_together_model()
        summary = _issues_summary(issues)
        prompt = (
            "You are a C/C++ performance and energy-efficiency expert. Below are issues "
            "reported by a line-based static scanner. The scanner is pattern-based and "
            "may report false positives.\n\n"
            "Issues:\n"
            f"{summary}\n\n"
        )
        if code:
            prompt += f"Source code ({language or 'cpp'}):\n```\n{code[:8000]}\n```\n\n"
        prompt += (
            "For each real issue, suggest a concrete fix that lowers CPU and memory work "
            "(smart pointers and RAII, std::vector with reserve(), std::unordered_map, "
            "std::string_view, flattening nested loops). Say when an issue looks like a "
            "false positive. Be concise and use bullet points."
        )
        try:
            r = client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=2048,
            )
            if r.choices and r.choices[0].message.content:
                return r.choices[0].message.content.strip()
        except Exception as e:
            logger.error("AI fix suggestion request failed: %s", e)
        return None
