# io/nav_logging.py
import json
import logging
import sys

from roadnav.app.hooks import NoopHooks
from roadnav.domain.errors import NavigationError


def _default_json_logger(name="roadnav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class NavLogging(NoopHooks):
    """
    Structured logs for map building and queries.
    Routine queries are only logged in debug mode; failures always are.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    # map lifecycle

    def build_start(self, *, source: str):
        self._emit("INFO", "build_start", source=source)

    def build_end(self, *, nodes: int, ways: int, routable: int, names: int, wall_ms: float):
        self._emit(
            "INFO",
            "build_end",
            nodes=nodes,
            ways=ways,
            routable=routable,
            names=names,
            wall_ms=round(wall_ms, 3),
        )

    # queries

    def query(self, op: str, *, ms: float, **kw):
        if self.debug:
            self._emit("DEBUG", op, ms=round(ms, 3), **kw)

    def error(self, op: str, *, exc: BaseException, **kw):
        level = "WARNING" if isinstance(exc, NavigationError) else "ERROR"
        self._emit(level, f"{op}_failed", error=str(exc), error_type=type(exc).__name__, **kw)
