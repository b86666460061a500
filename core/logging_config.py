from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: str | int = logging.INFO,
) -> logging.Logger:
    """Configure root logging to stderr and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    Stdout is left alone because the stdio transport speaks MCP over it.
    Returns a module-level logger for callers to use.
    """
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parent.parent / "logs"
    else:
        logs_dir = Path(logs_dir)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Ensure logs directory exists
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # best-effort: continue if it cannot create logs dir
        pass

    # Each run writes to its own timestamped file
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base = Path(log_file_name).stem
    ext = Path(log_file_name).suffix or ".log"
    log_file = logs_dir / f"{base}_{timestamp}{ext}"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # Any file handler from an earlier call in this process is reused
    file_handler_exists = any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
    if not file_handler_exists:
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # If file handler cannot be created (permissions, etc), fall back to stderr only
            pass

    stream_stderr_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    # httpx logs every request URL at INFO; keep it quiet unless debugging
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(__name__)
