import traceback

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from common.constants import PATHS, SERVER
from common.utils import setup_logging
from debuggers import (
    AlreadyCompleteError,
    InvalidInputError,
    NotActiveError,
    UnknownProductError,
)
from server.schemas import (
    LexiconResponse,
    ProductRow,
    RecommendationInitRequest,
    RecommendationSnapshot,
    ReviewInitRequest,
    ReviewSnapshot,
    SessionRequest,
)
from server.session_state import DebuggerSessionState, SessionNotFoundError

app = FastAPI(title="Algorithm Step Debugger API", version="0.1.0")

# Add CORS for local dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=SERVER["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

sessions = DebuggerSessionState()
logger = setup_logging(__name__, PATHS["app_log_file"])


def _http_error(route: str, e: Exception) -> HTTPException:
    """Map engine failures to status codes; anything else is a server error."""
    if isinstance(e, (UnknownProductError, SessionNotFoundError)):
        status_code = 404
    elif isinstance(e, InvalidInputError):
        status_code = 400
    elif isinstance(e, (NotActiveError, AlreadyCompleteError)):
        status_code = 409
    else:
        status_code = 500

    if status_code == 500:
        error_msg = f"{str(e)}\n{traceback.format_exc()}"
        logger.error(f"ERROR in {route}: {error_msg}")
    else:
        logger.warning(f"Rejected {route}: {type(e).__name__}: {e}")
    return HTTPException(status_code=status_code, detail=str(e))


@app.get("/health")
def health():
    return {"status": "ok", "sessions": sessions.count()}


# ===================================================================
# DATASET ENDPOINTS
# ===================================================================


@app.get("/datasets/products", response_model=list[ProductRow])
def list_products():
    """Co-purchase rows and purchase totals for every selectable product."""
    context = sessions.recommendation_context
    return [
        ProductRow(
            product=product,
            total_purchases=context["total_purchases"][product],
            co_purchases=dict(row),
        )
        for product, row in context["co_purchases"].items()
    ]


@app.get("/datasets/lexicon", response_model=LexiconResponse)
def get_lexicon():
    """Stopwords, sentiment words and aspect keywords used by the review debugger."""
    context = sessions.review_context
    return LexiconResponse(
        stopwords=sorted(context["stopwords"]),
        positive=sorted(context["lexicon"]["positive"]),
        negative=sorted(context["lexicon"]["negative"]),
        aspect_keywords={aspect: list(keywords) for aspect, keywords in context["aspect_keywords"].items()},
    )


# ===================================================================
# RECOMMENDATION DEBUGGER ENDPOINTS
# ===================================================================


@app.post("/recommendation/initialize", response_model=RecommendationSnapshot, response_model_exclude_unset=True)
def initialize_recommendation(payload: RecommendationInitRequest):
    try:
        with sessions.engine(payload.session_id, "recommendation") as engine:
            logger.info(f"Recommendation initialize: session={payload.session_id}, product={payload.product}")
            return RecommendationSnapshot(**engine.initialize(payload.product))
    except Exception as e:
        raise _http_error("/recommendation/initialize", e)


@app.post("/recommendation/advance", response_model=RecommendationSnapshot, response_model_exclude_unset=True)
def advance_recommendation(payload: SessionRequest):
    try:
        with sessions.engine(payload.session_id, "recommendation") as engine:
            return RecommendationSnapshot(**engine.advance())
    except Exception as e:
        raise _http_error("/recommendation/advance", e)


@app.post("/recommendation/reset", response_model=RecommendationSnapshot, response_model_exclude_unset=True)
def reset_recommendation(payload: SessionRequest):
    with sessions.engine(payload.session_id, "recommendation") as engine:
        engine.reset()
        return RecommendationSnapshot(**engine.snapshot())


@app.get("/recommendation/snapshot", response_model=RecommendationSnapshot, response_model_exclude_unset=True)
def recommendation_snapshot(session_id: str = SERVER["default_session"]):
    try:
        with sessions.engine(session_id, "recommendation", create=False) as engine:
            return RecommendationSnapshot(**engine.snapshot())
    except Exception as e:
        raise _http_error("/recommendation/snapshot", e)


# ===================================================================
# REVIEW DEBUGGER ENDPOINTS
# ===================================================================


@app.post("/review/initialize", response_model=ReviewSnapshot, response_model_exclude_unset=True)
def initialize_review(payload: ReviewInitRequest):
    try:
        with sessions.engine(payload.session_id, "review") as engine:
            logger.info(f"Review initialize: session={payload.session_id}, length={len(payload.text or '')}")
            return ReviewSnapshot(**engine.initialize(payload.text))
    except Exception as e:
        raise _http_error("/review/initialize", e)


@app.post("/review/advance", response_model=ReviewSnapshot, response_model_exclude_unset=True)
def advance_review(payload: SessionRequest):
    try:
        with sessions.engine(payload.session_id, "review") as engine:
            return ReviewSnapshot(**engine.advance())
    except Exception as e:
        raise _http_error("/review/advance", e)


@app.post("/review/reset", response_model=ReviewSnapshot, response_model_exclude_unset=True)
def reset_review(payload: SessionRequest):
    with sessions.engine(payload.session_id, "review") as engine:
        engine.reset()
        return ReviewSnapshot(**engine.snapshot())


@app.get("/review/snapshot", response_model=ReviewSnapshot, response_model_exclude_unset=True)
def review_snapshot(session_id: str = SERVER["default_session"]):
    try:
        with sessions.engine(session_id, "review", create=False) as engine:
            return ReviewSnapshot(**engine.snapshot())
    except Exception as e:
        raise _http_error("/review/snapshot", e)


# ===================================================================
# SESSION ENDPOINTS
# ===================================================================


@app.delete("/session/{session_id}")
def drop_session(session_id: str):
    if not sessions.drop(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return {"status": "ok", "session_id": session_id}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.main:app", host=SERVER["host"], port=SERVER["port"])
