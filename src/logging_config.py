import logging
import logging.handlers
from pathlib import Path

LOG_FILENAME = "dynasty_values.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler_installed(root_logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in root_logger.handlers
    )


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> Path:
    """Configure logging for the dynasty value tools.

    Calling it again once the rotating log file is attached is a no-op.

    Returns:
        Path to the log file.
    """
    log_dir = Path(log_dir) if log_dir else Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    root_logger = logging.getLogger()
    if _file_handler_installed(root_logger):
        return log_file

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 5MB per file, 3 backups; the file always gets DEBUG detail
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s, file=%s)", log_level, log_file)
    return log_file
