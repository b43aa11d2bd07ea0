"""
News Finder web app: search form, results list and modal, rendered server-side.
"""

import logging
from functools import lru_cache

from fastapi import BackgroundTasks, Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from newsfinder.config import get_settings
from newsfinder.news import NewsClient, SearchOutcome, SearchParameters, search_news
from newsfinder.view import SessionStore, ViewController, render_page

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="News Finder", version="0.1.0")

if not settings.news_api_key:
    logger.warning("NEWS_API_KEY is not set; searches will be rejected by the news endpoint")


def get_news_client() -> NewsClient:
    return NewsClient(get_settings())


@lru_cache
def get_session_store() -> SessionStore:
    s = get_settings()
    client = NewsClient(s)
    return SessionStore(lambda: ViewController(client), max_sessions=s.max_sessions)


def _session(request: Request, store: SessionStore) -> tuple[str, ViewController]:
    return store.get_or_create(request.cookies.get(get_settings().session_cookie))


def _with_cookie(response, session_id: str):
    response.set_cookie(get_settings().session_cookie, session_id, httponly=True, samesite="lax")
    return response


def _redirect_home(session_id: str) -> RedirectResponse:
    return _with_cookie(RedirectResponse("/", status_code=303), session_id)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request, store: SessionStore = Depends(get_session_store)):
    session_id, controller = _session(request, store)
    return _with_cookie(HTMLResponse(render_page(controller.state)), session_id)


@app.post("/search")
def search(
    request: Request,
    background_tasks: BackgroundTasks,
    keywords: str = Form(""),
    search_scope: str = Form(""),
    from_date: str = Form(""),
    to_date: str = Form(""),
    language: str = Form(""),
    sort_order: str = Form(""),
    store: SessionStore = Depends(get_session_store),
):
    """Start a search for this session; the page shows LOADING until the fetch lands."""
    try:
        params = SearchParameters(
            keywords=keywords,
            search_scope=search_scope,
            from_date=from_date,
            to_date=to_date,
            language=language,
            sort_order=sort_order,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    session_id, controller = _session(request, store)
    if controller.start_search(params):
        background_tasks.add_task(controller.finish_search, params)
    return _redirect_home(session_id)


@app.post("/clear")
def clear(request: Request, store: SessionStore = Depends(get_session_store)):
    session_id, controller = _session(request, store)
    controller.clear_parameters()
    return _redirect_home(session_id)


@app.post("/modal/close")
def modal_close(request: Request, store: SessionStore = Depends(get_session_store)):
    session_id, controller = _session(request, store)
    controller.close_modal()
    return _redirect_home(session_id)


@app.post("/back")
def back(request: Request, store: SessionStore = Depends(get_session_store)):
    session_id, controller = _session(request, store)
    controller.back_to_search()
    return _redirect_home(session_id)


@app.post("/api/v1/news/search", response_model=SearchOutcome)
def news_search(body: SearchParameters, client: NewsClient = Depends(get_news_client)):
    """
    Stateless search: classify the endpoint's answer as empty, success or error.
    Fetch failures come back as an error outcome, not an HTTP error.
    """
    return search_news(body, client)
