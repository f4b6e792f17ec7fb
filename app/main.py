"""FastAPI app: /health, /check, /analyze, /review, /documents."""

from deps import CORSMiddleware, FastAPI, logging

from .config import get_log_level
from .routes import (
    analyze_router,
    check_router,
    documents_router,
    health_router,
    review_router,
    root_router,
)
from .routes.documents import store
from .startup import validate_config

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="C/C++ Energy Checker API",
    description="Line-based scan of C/C++ code for energy-inefficient patterns, with optional Together.ai fix suggestions.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(check_router)
app.include_router(analyze_router)
app.include_router(review_router)
app.include_router(documents_router)


@app.on_event("startup")
def _validate_config() -> None:
    validate_config()


@app.on_event("shutdown")
def _cancel_pending_scans() -> None:
    store.close()
