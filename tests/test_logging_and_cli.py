import logging

from main import build_parser
from panoview.logging_config import parse_level, setup_logging


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level("chatty") == logging.INFO
    assert parse_level(None) == logging.INFO


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "viewer.log"
    setup_logging("debug", str(log_file))
    setup_logging("debug", str(log_file))
    logger = logging.getLogger("panoview")
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("panoview.test").info("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in log_file.read_text()
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)


def test_cli_arguments():
    args = build_parser().parse_args(["pano.jpg", "--config", "v.yaml", "--log-level", "DEBUG", "--fullscreen", "--no-compass"])
    assert args.image == "pano.jpg"
    assert args.config == "v.yaml"
    assert args.log_level == "DEBUG"
    assert args.fullscreen
    assert args.no_compass


def test_cli_defaults():
    args = build_parser().parse_args([])
    assert args.image is None
    assert args.config is None
    assert not args.fullscreen
