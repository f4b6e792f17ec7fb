"""Tracked documents with debounced re-analysis.

Every update bumps the document version. A rescan only publishes its issues
if the version it scanned is still current; results for older text are
dropped.
"""

from deps import (
    Callable,
    Dict,
    List,
    Optional,
    dataclass,
    field,
    logging,
    replace,
    threading,
)

from energy_checker.issue import Issue
from energy_checker.main_checker import scan

from ..config import get_debounce_seconds, get_realtime_default

logger = logging.getLogger(__name__)


@dataclass
class DocumentSession:
    doc_id: str
    text: str = ""
    version: int = 0
    issues: List[Issue] = field(default_factory=list)
    analyzed_version: Optional[int] = None
    timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        return self.timer is not None


class DocumentStore:
    """In-memory documents keyed by id, rescanned after edits settle."""

    def __init__(
        self,
        debounce_seconds: Optional[float] = None,
        realtime_enabled: Optional[bool] = None,
        scanner: Callable[[str], List[Issue]] = scan,
    ):
        self.debounce_seconds = (
            get_debounce_seconds() if debounce_seconds is None else debounce_seconds
        )
        self.realtime_enabled = (
            get_realtime_default() if realtime_enabled is None else realtime_enabled
        )
        self._scan = scanner
        self._sessions: Dict[str, DocumentSession] = {}
        self._lock = threading.Lock()

    def update(self, doc_id: str, text: str) -> DocumentSession:
        """Store new text for doc_id and schedule a rescan if real-time analysis is on."""
        run_now = False
        with self._lock:
            session = self._sessions.get(doc_id)
            if session is None:
                session = DocumentSession(doc_id=doc_id)
                self._sessions[doc_id] = session
            session.text = text
            session.version += 1
            self._cancel_timer(session)
            version = session.version
            if self.realtime_enabled:
                if self.debounce_seconds > 0:
                    timer = threading.Timer(
                        self.debounce_seconds, self._rescan, args=(doc_id, version)
                    )
                    timer.daemon = True
                    session.timer = timer
                    timer.start()
                else:
                    run_now = True
        if run_now:
            self._rescan(doc_id, version)
        return self.get(doc_id)

    def analyze_now(self, doc_id: str) -> Optional[DocumentSession]:
        """Rescan the current text immediately, cancelling any pending rescan."""
        with self._lock:
            session = self._sessions.get(doc_id)
            if session is None:
                return None
            self._cancel_timer(session)
            version = session.version
        self._rescan(doc_id, version)
        return self.get(doc_id)

    def get(self, doc_id: str) -> Optional[DocumentSession]:
        """Snapshot of the session, or None if the document is unknown."""
        with self._lock:
            session = self._sessions.get(doc_id)
            if session is None:
                return None
            return replace(session, issues=list(session.issues))

    def remove(self, doc_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(doc_id, None)
            if session is None:
                return False
            self._cancel_timer(session)
            return True

    def toggle_realtime(self) -> bool:
        """Flip real-time analysis. Turning it off cancels pending rescans."""
        with self._lock:
            self.realtime_enabled = not self.realtime_enabled
            if not self.realtime_enabled:
                for session in self._sessions.values():
                    self._cancel_timer(session)
            enabled = self.realtime_enabled
        logger.info("Real-time analysis %s", "enabled" if enabled else "disabled")
        return enabled

    def close(self) -> None:
        with self._lock:
            for session in self._sessions.values():
                self._cancel_timer(session)

    def _rescan(self, doc_id: str, version: int) -> None:
        with self._lock:
            session = self._sessions.get(doc_id)
            if session is None or session.version != version:
                return
            text = session.text

        issues = self._scan(text)

        with self._lock:
            session = self._sessions.get(doc_id)
            if session is None or session.version != version:
                logger.debug("Discarding stale scan of %s (version %d)", doc_id, version)
                return
            session.issues = issues
            session.analyzed_version = version
            session.timer = None
        logger.debug("Rescanned %s (version %d): %d issue(s)", doc_id, version, len(issues))

    @staticmethod
    def _cancel_timer(session: DocumentSession) -> None:
        if session.timer is not None:
            session.timer.cancel()
            session.timer = None
