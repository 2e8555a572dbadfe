"""Exceptions for puzzle acquisition."""


class SourceUnavailable(Exception):
    """Puzzle data could not be obtained.

    Raised by grid sources when loading fails, including:
    - Missing or unreadable files (OSError)
    - Connection failures (aiohttp.ClientError)
    - Timeouts (asyncio.TimeoutError)
    - Non-200 HTTP responses
    """
