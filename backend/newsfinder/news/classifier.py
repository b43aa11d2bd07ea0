"""
Result classifier: turn a parsed endpoint response into Empty, Success or Error.
"""

import logging
from typing import Any

from pydantic import ValidationError

from newsfinder.news.schemas import Article, SearchOutcome

logger = logging.getLogger(__name__)


def classify_response(body: Any) -> SearchOutcome:
    """
    Classify a parsed JSON body. Never raises.

    - totalResults == 0 -> Empty, whether or not `articles` is present.
    - a non-empty `articles` list of objects -> Success, order preserved. Missing or odd
      display fields (null title, bad date) do not fail the response.
    - a positive count with an empty list -> Empty (there is nothing to show).
    - anything else, including `status: "error"` bodies -> Error.
    """
    if not isinstance(body, dict):
        logger.warning("Unexpected response body type: %s", type(body).__name__)
        return SearchOutcome.error()

    if body.get("status") == "error":
        logger.warning("News endpoint returned error %s: %s", body.get("code"), body.get("message"))
        return SearchOutcome.error()

    total = body.get("totalResults")
    if total == 0 and not isinstance(total, bool):
        return SearchOutcome.empty()

    items = body.get("articles")
    if not isinstance(items, list):
        logger.warning("Response has no articles list (totalResults=%r)", total)
        return SearchOutcome.error()
    if not items:
        return SearchOutcome.empty()

    try:
        articles = [Article.from_api(item) for item in items]
    except (ValidationError, AttributeError) as e:
        logger.warning("Could not parse articles in response: %s", e)
        return SearchOutcome.error()

    return SearchOutcome.success(articles)
