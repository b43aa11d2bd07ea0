"""
Query builder: map SearchParameters to a request URL against the news endpoint.
"""

from urllib.parse import quote

from newsfinder.news.schemas import SearchParameters, SearchScope

# Characters encodeURIComponent leaves alone (besides alphanumerics)
_KEYWORD_SAFE = "-_.!~*'()"


def build_search_url(params: SearchParameters, api_key: str, base_url: str) -> str:
    """
    Build the GET URL for a search.

    The API key always comes first. Every other parameter is appended only when set;
    the endpoint treats an absent parameter differently from an empty one. Keywords are
    percent-encoded, everything else is passed through as-is (dates are not validated here).
    """
    url = f"{base_url}?apiKey={api_key}"
    if params.keywords:
        url += f"&q={quote(params.keywords, safe=_KEYWORD_SAFE)}"
    if params.search_scope and params.search_scope is not SearchScope.ALL:
        url += f"&searchIn={params.search_scope.value}"
    if params.from_date:
        url += f"&from={params.from_date}"
    if params.to_date:
        url += f"&to={params.to_date}"
    if params.language:
        url += f"&language={params.language.value}"
    if params.sort_order:
        url += f"&sortBy={params.sort_order.value}"
    return url
