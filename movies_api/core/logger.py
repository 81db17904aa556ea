import logging
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from pythonjsonlogger.json import JsonFormatter
from movies_api.core.trace import get_trace_id
from movies_api.core.config import settings


class TraceContextFilter(logging.Filter):
    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        # поля должны появиться до того, как запись уйдёт в очередь
        record.trace_id = (getattr(record, "trace_id", None)
                           or get_trace_id() or "-")
        record.service = (getattr(record, "service", None)
                          or self.service or settings.app_name)
        record.env = getattr(record, "env", None) or settings.env
        return True


_listener: QueueListener | None = None


def setup_json_logging(service: str = "movies_service") -> None:
    global _listener
    if _listener is not None:
        # один процесс может поднимать lifespan повторно (тесты)
        shutdown_logging()

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    fmt = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s"
        " %(message)s %(pathname)s %(lineno)d "
        "%(trace_id)s %(service)s %(env)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(fmt)
    stream_handler.addFilter(TraceContextFilter(service))

    q: Queue = Queue(-1)
    queue_handler = QueueHandler(q)
    queue_handler.addFilter(TraceContextFilter(service))

    _listener = QueueListener(q, stream_handler, respect_handler_level=True)
    _listener.start()

    root.handlers = [queue_handler]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    logging.getLogger(__name__).info(
        "logger_initialized",
        extra={"service": service})


def shutdown_logging() -> None:
    """Аккуратно остановить listener при выключении приложения."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
