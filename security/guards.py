from typing import Iterable

from flask import request

from common.errors import CorsRejection
from common.utils.logging_service import logger


def origin_guard(allowed_origins: Iterable[str]):
    """
    Builds a before_request hook that rejects cross-origin requests whose
    Origin header is not in the allow-list. Requests without an Origin header
    (curl, server-to-server) are let through.
    """
    allowed = set(allowed_origins)

    def guard():
        origin = request.headers.get("Origin", None)
        logger.debug(f"Current origin: {origin}")

        if not origin or origin in allowed:
            return None

        logger.warning(f"Origin {origin} not allowed")
        raise CorsRejection(f"Origin {origin} not allowed!")

    return guard
