import logging
import sys

TICK_LOGGER = "tickcount.ticks"

log = logging.getLogger("tickcount")
tick_log = logging.getLogger(TICK_LOGGER)


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever `sys.stdout` is when the record is emitted."""

    def __init__(self):
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter("%(message)s"))

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


def setup_tick_logger():
    """Route tick lines, as bare messages, to stdout. Safe to call again."""
    if not any(isinstance(h, _StdoutHandler) for h in tick_log.handlers):
        tick_log.addHandler(_StdoutHandler())
    tick_log.setLevel(logging.INFO)
    tick_log.propagate = False


def init_logging(level=logging.INFO):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.setLevel(level)


def init_debug_logger():
    init_logging(logging.DEBUG)
