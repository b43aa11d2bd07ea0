"""
Presentation: render a ViewState as a full HTML page.

Rendering is a pure function of state. Every user-visible string goes through html.escape.
"""

import html
from datetime import datetime
from typing import Optional

from newsfinder.news.schemas import Article, Language, SearchParameters, SearchScope, SortOrder
from newsfinder.view.state import Modal, Screen, ViewState

SCOPE_LABELS = {
    SearchScope.TITLE: "Title",
    SearchScope.DESCRIPTION: "Description",
    SearchScope.CONTENT: "Content",
}

LANGUAGE_LABELS = {
    Language.ARABIC: "Arabic",
    Language.GERMAN: "German",
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
    Language.FRENCH: "French",
    Language.HEBREW: "Hebrew",
    Language.ITALIAN: "Italian",
    Language.DUTCH: "Dutch",
    Language.NORWEGIAN: "Norwegian",
    Language.PORTUGUESE: "Portuguese",
    Language.RUSSIAN: "Russian",
    Language.SWEDISH: "Swedish",
    Language.URDU: "Urdu",
    Language.CHINESE: "Chinese",
}

SORT_LABELS = {
    SortOrder.PUBLISHED_AT: "Published date",
    SortOrder.RELEVANCY: "Relevancy",
    SortOrder.POPULARITY: "Popularity",
}

INTRO = (
    "This is an app you can use to quickly collect news articles in multiple languages about a "
    "certain topic. For example, if you want to know what Russian news is broadcasting about "
    "Donald Trump, you can search for Donald Trump news articles in Russian."
    "<br><br>It can be difficult to search for news in other languages without knowing the popular "
    "news sites in those regions. This app solves that problem."
)

PAGE_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>News Finder</title>
{refresh}
    <style>
        body {{ font-family: sans-serif; background: #f3f4f6; margin: 0; padding: 1rem; }}
        h1 {{ text-align: center; margin-bottom: 0.5rem; }}
        .intro {{ text-align: center; color: #374151; max-width: 32rem; margin: 0 auto 1.5rem; }}
        .panel {{ background: #fff; max-width: 28rem; margin: 0 auto; padding: 1.5rem; border-radius: 6px; box-shadow: 0 1px 3px rgba(0,0,0,0.15); }}
        .panel label {{ display: block; font-weight: 600; margin-top: 1rem; }}
        .panel input, .panel select {{ width: 100%; padding: 0.5rem; border: 1px solid #d1d5db; border-radius: 4px; box-sizing: border-box; }}
        .actions {{ display: flex; gap: 1rem; margin-top: 1.5rem; }}
        .actions form, .actions button {{ flex: 1; }}
        button {{ width: 100%; padding: 0.5rem; border: 0; border-radius: 4px; color: #fff; background: #3b82f6; cursor: pointer; }}
        button.secondary {{ background: #6b7280; }}
        button:disabled {{ background: #9ca3af; cursor: not-allowed; }}
        .notice {{ text-align: center; color: #1d4ed8; margin-bottom: 1rem; }}
        .results {{ max-width: 48rem; margin: 0 auto; }}
        .results > form button {{ width: auto; margin-bottom: 1rem; }}
        .card {{ background: #fff; padding: 1rem; margin-bottom: 1rem; border-radius: 6px; box-shadow: 0 1px 3px rgba(0,0,0,0.15); }}
        .card h2 {{ font-size: 1.1rem; margin: 0 0 0.5rem; }}
        .card p {{ font-size: 0.9rem; color: #4b5563; margin: 0 0 0.4rem; }}
        .card a {{ color: #3b82f6; }}
        .overlay {{ position: fixed; inset: 0; display: flex; align-items: center; justify-content: center; background: rgba(31,41,55,0.5); }}
        .modal {{ background: #fff; border-radius: 8px; padding: 1.5rem; width: 100%; max-width: 24rem; }}
        .modal p {{ text-align: center; font-size: 1.1rem; margin: 0 0 1rem; }}
    </style>
</head>
<body>
    <h1>News Finder</h1>
    <p class="intro">{intro}</p>
{body}
{modal}
</body>
</html>
'''


def format_published_date(value: Optional[datetime]) -> str:
    """Calendar date as M/D/YYYY, taken from the timestamp as published."""
    if value is None:
        return "Unknown"
    return f"{value.month}/{value.day}/{value.year}"


def _esc(value: Optional[str]) -> str:
    return html.escape(value or "", quote=True)


def _options(labels: dict, selected, blank_label: Optional[str] = None, blank_value: str = "") -> str:
    out = []
    if blank_label is not None:
        mark = " selected" if selected is None or getattr(selected, "value", None) == blank_value else ""
        out.append(f'<option value="{blank_value}"{mark}>{_esc(blank_label)}</option>')
    for member, label in labels.items():
        mark = " selected" if member == selected else ""
        out.append(f'<option value="{member.value}"{mark}>{_esc(label)}</option>')
    return "".join(out)


def render_modal(modal: Optional[Modal]) -> str:
    if modal is None:
        return ""
    return (
        '<div class="overlay"><div class="modal">'
        f"<p>{_esc(modal.message)}</p>"
        '<form method="post" action="/modal/close"><button type="submit">Close</button></form>'
        "</div></div>"
    )


def render_search_form(params: SearchParameters, loading: bool = False) -> str:
    disabled = " disabled" if loading else ""
    notice = '<p class="notice">Searching...</p>' if loading else ""
    return f'''<div class="panel">
    {notice}
    <form method="post" action="/search" id="search-form">
        <label for="keywords">Keywords or Phrases</label>
        <input type="text" id="keywords" name="keywords" placeholder="Keywords or phrases to search for" value="{_esc(params.keywords)}">
        <label for="search_scope">Search In</label>
        <select id="search_scope" name="search_scope">{_options(SCOPE_LABELS, params.search_scope, "All Fields", blank_value=SearchScope.ALL.value)}</select>
        <label for="language">Language</label>
        <select id="language" name="language">{_options(LANGUAGE_LABELS, params.language, "All Languages")}</select>
        <label for="sort_order">Sort By</label>
        <select id="sort_order" name="sort_order">{_options(SORT_LABELS, params.sort_order)}</select>
        <label for="from_date">From Date</label>
        <input type="date" id="from_date" name="from_date" value="{_esc(params.from_date)}">
        <label for="to_date">To Date</label>
        <input type="date" id="to_date" name="to_date" value="{_esc(params.to_date)}">
    </form>
    <div class="actions">
        <button type="submit" form="search-form"{disabled}>Search News</button>
        <form method="post" action="/clear"><button type="submit" class="secondary">Clear Parameters</button></form>
    </div>
</div>'''


def render_article(article: Article) -> str:
    return (
        '<div class="card">'
        f"<h2>{_esc(article.title)}</h2>"
        f"<p>{_esc(article.description)}</p>"
        f"<p>Published on: {format_published_date(article.published_at)}</p>"
        f"<p>Source: {_esc(article.source_name)} | Author: {_esc(article.display_author)}</p>"
        f'<a href="{_esc(article.url)}" target="_blank" rel="noopener noreferrer">Read more</a>'
        "</div>"
    )


def render_results(articles: tuple[Article, ...]) -> str:
    cards = "\n".join(render_article(a) for a in articles)
    return (
        '<div class="results">'
        '<form method="post" action="/back"><button type="submit">Back to Search</button></form>'
        f"\n{cards}\n"
        "</div>"
    )


def render_page(state: ViewState) -> str:
    if state.screen is Screen.RESULTS:
        body = render_results(state.articles)
    else:
        body = render_search_form(state.parameters, loading=state.screen is Screen.LOADING)
    # Poll until the outstanding search lands on another screen
    refresh = '    <meta http-equiv="refresh" content="1">' if state.screen is Screen.LOADING else ""
    return PAGE_TEMPLATE.format(refresh=refresh, intro=INTRO, body=body, modal=render_modal(state.modal))
