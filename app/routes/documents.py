"""Document routes: real-time analysis of editor buffers."""

from deps import APIRouter, HTTPException

from energy_checker.utils import is_supported_language

from ..schemas import DocumentResponse, DocumentUpdate, ToggleResponse
from ..services.checker import issue_to_out
from ..services.documents import DocumentSession, DocumentStore
from ..services.presentation import to_decorations, to_diagnostics

router = APIRouter()
store = DocumentStore()


def _to_response(session: DocumentSession) -> DocumentResponse:
    return DocumentResponse(
        doc_id=session.doc_id,
        version=session.version,
        analyzed_version=session.analyzed_version,
        pending=session.pending,
        issues=[issue_to_out(i) for i in session.issues],
        diagnostics=to_diagnostics(session.issues),
        decorations=to_decorations(session.issues),
    )


def _get_or_404(doc_id: str) -> DocumentSession:
    session = store.get(doc_id)
    if session is None:
        raise HTTPException(404, f"Unknown document: {doc_id}")
    return session


@router.put("/documents/{doc_id}", response_model=DocumentResponse)
def update_document(doc_id: str, body: DocumentUpdate) -> DocumentResponse:
    """Store the full current text; a rescan runs once edits settle."""
    if not is_supported_language(body.language or "cpp"):
        raise HTTPException(400, f"Unsupported language: {body.language}. Use c or cpp.")
    return _to_response(store.update(doc_id, body.text))


@router.get("/documents/{doc_id}", response_model=DocumentResponse)
def get_document(doc_id: str) -> DocumentResponse:
    """Latest authoritative issues for the document."""
    return _to_response(_get_or_404(doc_id))


@router.post("/documents/{doc_id}/analyze", response_model=DocumentResponse)
def analyze_document(doc_id: str) -> DocumentResponse:
    """Rescan the document now, without waiting for the debounce."""
    session = store.analyze_now(doc_id)
    if session is None:
        raise HTTPException(404, f"Unknown document: {doc_id}")
    return _to_response(session)


@router.delete("/documents/{doc_id}")
def delete_document(doc_id: str) -> dict:
    if not store.remove(doc_id):
        raise HTTPException(404, f"Unknown document: {doc_id}")
    return {"status": "deleted"}


@router.post("/realtime/toggle", response_model=ToggleResponse)
def toggle_realtime() -> ToggleResponse:
    """Turn real-time analysis of document updates on or off."""
    return ToggleResponse(enabled=store.toggle_realtime())
