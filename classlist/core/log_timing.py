import functools
import inspect
import logging
import time

logger = logging.getLogger(__name__)


def _summary(value) -> str:
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(map(str, value))}]"
    return str(value)


def timed(func):
    """Log "<operation> <args> -> <result> (<secs>s)" for a roster operation.

    Works for plain functions and coroutine functions; the first positional
    argument (self) is left out of the summary.
    """
    name = func.__name__

    def _log(args, result, start):
        duration = time.monotonic() - start
        logger.info(
            "%s %s -> %s (%.2fs)",
            name,
            " ".join(_summary(a) for a in args[1:]),
            _summary(result),
            duration,
        )

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.monotonic()
            result = await func(*args, **kwargs)
            _log(args, result, start)
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.monotonic()
        result = func(*args, **kwargs)
        _log(args, result, start)
        return result

    return wrapper
