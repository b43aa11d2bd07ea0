"""Failures raised while talking to the news endpoint."""


class NewsFetchError(Exception):
    """Base class: the request produced no classifiable body."""


class NetworkFailure(NewsFetchError):
    """Connection error, timeout or other transport failure."""


class ParseFailure(NewsFetchError):
    """The endpoint answered, but the body was not JSON."""
