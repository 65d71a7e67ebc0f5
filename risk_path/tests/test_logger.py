import logging

from risk_path.src.utils.logger import get_logger


def test_get_logger_attaches_single_stream_handler():
    logger = get_logger("risk_path.test_single")
    again = get_logger("risk_path.test_single")
    assert logger is again
    streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1


def test_get_logger_writes_file(tmp_path):
    path = tmp_path / "logs" / "solver.log"
    logger = get_logger("risk_path.test_file", file_path=str(path), level="debug")
    assert logger.level == logging.DEBUG
    logger.debug("frontier drained")
    get_logger("risk_path.test_file", file_path=str(path), level="debug")
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert "DEBUG - frontier drained" in path.read_text(encoding="utf-8")
