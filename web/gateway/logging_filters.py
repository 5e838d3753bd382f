"""Logging filter that stamps the current request id on log records."""

from logging import Filter, LogRecord

from .middleware import REQUEST_ID_CTX


class RequestIdFilter(Filter):
    """Copy ``REQUEST_ID_CTX`` into ``record.request_id``.

    Outside a request the context variable holds ``"-"``, so formatters can
    always reference ``%(request_id)s``.
    """

    def filter(self, record: LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = REQUEST_ID_CTX.get()
        return True
