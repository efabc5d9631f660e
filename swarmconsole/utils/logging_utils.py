import logging
import time

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from asgi_correlation_id.context import correlation_id
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from structlog.typing import Processor

from swarmconsole.settings import LogFormat, settings

# Loggers of the HTTP and AWS clients used by the registry probes
QUIET_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "urllib3")

# Polled by the Swarm healthcheck every few seconds
UNLOGGED_PATHS = frozenset({"/health"})


def shared_processors(log_format: LogFormat) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(log_format: LogFormat, log_level: str) -> None:
    """Route structlog and stdlib loggers through one renderer on stderr."""
    processors = shared_processors(log_format)
    renderer: Processor = (
        structlog.dev.ConsoleRenderer()
        if log_format == LogFormat.CONSOLE
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level.upper())

    for name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True
    # replaced by the access log below
    logging.getLogger("uvicorn.access").handlers.clear()
    logging.getLogger("uvicorn.access").propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logger_fastapi(app: FastAPI):
    configure_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(CorrelationIdMiddleware)


access_logger = structlog.stdlib.get_logger("swarmconsole.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds the correlation id for the request and writes one access line."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=correlation_id.get())

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            access_logger.exception("Uncaught exception", path=request.url.path)
            raise
        finally:
            duration = time.perf_counter() - start_time
            if request.url.path not in UNLOGGED_PATHS:
                access_logger.info(
                    f"{request.method} {request.url.path} {status_code}",
                    method=request.method,
                    path=request.url.path,
                    query=request.url.query or None,
                    status_code=status_code,
                    duration=round(duration, 4),
                )

        response.headers["X-Process-Time"] = f"{duration:.4f}"
        return response
