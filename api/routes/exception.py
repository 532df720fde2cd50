"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and turns any
uncaught exception into a ``500`` JSON response of the form
``{"error": <label>, "detail": <message>}``. :class:`fastapi.HTTPException`
raised by the handler is propagated untouched so locally chosen status codes
survive.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException
from fastapi.responses import JSONResponse

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)


def _error_response(label: str, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": label, "detail": str(exc) or type(exc).__name__})


def handle_exceptions(label: str = "Internal error") -> Callable[[F], F]:
    """Decorator factory that converts uncaught exceptions to a 500 response.

    Works with both regular and async handlers.
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except HTTPException:
                    raise
                except Exception as exc:
                    log.exception("%s", label)
                    return _error_response(label, exc)

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                log.exception("%s", label)
                return _error_response(label, exc)

        return cast(F, sync_wrapper)

    return decorator
