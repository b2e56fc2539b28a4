import sys
from loguru import logger

from viewer.core.logging import setup_logging


def restore_default_sink(sink_ids):
    for sink_id in sink_ids:
        logger.remove(sink_id)
    logger.add(sys.stderr)


def test_setup_logging_creates_log_dir(tmp_path):
    log_dir = tmp_path / "logs" / "nested"

    sink_ids = setup_logging(debug_mode=False, log_dir=str(log_dir))
    logger.info("written to file")
    restore_default_sink(sink_ids)

    assert len(sink_ids) == 2
    assert log_dir.is_dir()
    assert any(log_dir.glob("viewer_*.log"))


def test_setup_logging_without_file_sink(tmp_path):
    sink_ids = setup_logging(debug_mode=True, log_dir=None)
    restore_default_sink(sink_ids)

    assert len(sink_ids) == 1
    assert list(tmp_path.iterdir()) == []
