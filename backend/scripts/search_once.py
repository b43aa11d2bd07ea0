"""
Run one search against the live news endpoint and print the outcome.

Run from the repo root with:
  python backend/scripts/search_once.py "climate policy"
  python backend/scripts/search_once.py "Donald Trump" --language ru --sort relevancy

Requires: NEWS_API_KEY in env (or .env).
"""

import argparse
from textwrap import shorten

from newsfinder.news import NewsClient, OutcomeKind, SearchParameters, search_news
from newsfinder.view.render import format_published_date


def _trunc(s: str, max_len: int = 72) -> str:
    return shorten(s, width=max_len, placeholder="…") if s else ""


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a single news search.")
    parser.add_argument("keywords", nargs="?", default="")
    parser.add_argument("--search-in", dest="search_scope", default="")
    parser.add_argument("--from", dest="from_date", default="")
    parser.add_argument("--to", dest="to_date", default="")
    parser.add_argument("--language", default="")
    parser.add_argument("--sort", dest="sort_order", default="")
    ns = parser.parse_args()

    params = SearchParameters(
        keywords=ns.keywords,
        search_scope=ns.search_scope,
        from_date=ns.from_date,
        to_date=ns.to_date,
        language=ns.language,
        sort_order=ns.sort_order,
    )
    client = NewsClient()
    # Mask the key before printing
    print("URL:", client.search_url(params).replace(f"apiKey={client.api_key}", "apiKey=***", 1))

    outcome = search_news(params, client)
    if outcome.kind is not OutcomeKind.SUCCESS:
        print(f"[{outcome.kind.value}] {outcome.message}")
        return

    print(f"{len(outcome.articles)} articles\n")
    for idx, article in enumerate(outcome.articles, start=1):
        print(f"{idx:>3}. {_trunc(article.title)}")
        print(f"     {article.source_name} | {article.display_author} | {format_published_date(article.published_at)}")
        print(f"     {article.url}")


if __name__ == "__main__":
    main()
