import logging
import os
from collections import namedtuple

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

Config = namedtuple("Config", "log_level bot_token web_host web_port")


def load_config(environ=None):
    env = os.environ if environ is None else environ
    try:
        port = int(env.get("SUDOKU_WEB_PORT", "5000"))
    except ValueError:
        raise ValueError(f"SUDOKU_WEB_PORT must be an integer, got {env['SUDOKU_WEB_PORT']!r}")
    return Config(
        log_level=env.get("SUDOKU_LOG_LEVEL", "INFO").upper(),
        bot_token=env.get("SUDOKU_BOT_TOKEN"),
        web_host=env.get("SUDOKU_WEB_HOST", "127.0.0.1"),
        web_port=port,
    )


def setup_logging(level="INFO"):
    logging.basicConfig(format=LOG_FORMAT, level=level)
