"""
Loguru setup for the viewer.

The console follows GeneralSettings.debug_mode; the log file always
records DEBUG so command recomputations can be traced after the fact.
"""
import sys
from pathlib import Path
from typing import List, Optional
from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = "logs",
                  rotation: str = "10 MB", retention: str = "1 week") -> List[int]:
    """
    Replace loguru's default sink with the viewer's sinks.

    Args:
        debug_mode: DEBUG on the console when True, INFO otherwise
        log_dir: Directory for rotating log files; None or "" disables the file sink
        rotation: Loguru rotation condition for the log file
        retention: How long rotated files are kept

    Returns:
        Ids of the added sinks, for logger.remove()
    """
    logger.remove()

    console_level = "DEBUG" if debug_mode else "INFO"
    sink_ids = [logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)]

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        sink_ids.append(logger.add(
            directory / "viewer_{time}.log",
            level="DEBUG",
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        ))

    logger.info(f"Logging initialized (console {console_level}, log dir {log_dir or 'none'})")
    return sink_ids
