import uuid
from contextvars import ContextVar

REQUEST_ID_HEADER = "X-Request-Id"

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def new_trace_id() -> str:
    return str(uuid.uuid4())


def get_trace_id() -> str:
    return _trace_id.get()


def set_trace_id(value: str) -> None:
    _trace_id.set(value)
