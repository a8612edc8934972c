import psutil, os
import datetime
import time
import uuid
from typing import Iterable
from functools import wraps
from common.utils.logging_service import logger


def utc_now() -> str:
    return datetime.datetime.now(tz=datetime.timezone.utc).isoformat()


def new_id(taken: Iterable[str] = ()) -> str:
    taken = set(taken)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate


def time_it(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        elapsed_time = time.time() - start_time
        logger.debug(
            f"{func.__name__} completed in {elapsed_time:.3f}s, memory usage: "
            f"{psutil.Process(os.getpid()).memory_info().rss / 1024**2:.2f} MB"
        )

        return result

    return wrapper
