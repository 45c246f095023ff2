import logging, sys
from logging import StreamHandler

class ColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': '\033[36m', 'INFO': '\033[32m', 'WARNING': '\033[33m',
        'ERROR': '\033[31m', 'CRITICAL': '\033[35m'
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

def setup_logging(level="INFO"):
    handler = StreamHandler(sys.stdout)
    if sys.stdout.isatty():
        handler.setFormatter(ColoredFormatter(FORMAT))
    else:
        handler.setFormatter(logging.Formatter(FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )
