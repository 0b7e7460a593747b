import logging
import os
import re
import secrets
import string
from logging import Logger

import tabulate as tabulate_lib
import uvicorn.logging

MODULE_NAME = "pf2e-lootgen"
MODULE_TITLE = "PF2E Loot Generator"
ITEM_ID_LENGTH = 16

log_level = os.getenv("LOG_LEVEL", "INFO")


class LootgenLogger(Logger):
    def __init__(self, name):
        super().__init__(name, log_level)

    def err_msg(self, msg: str, actor_id: str | None = None):
        self.error(f"{actor_id}: {msg}" if actor_id else msg)
        return {"content": msg[:2000], "type": "error"}


logging.setLoggerClass(LootgenLogger)


def getLogger(name) -> LootgenLogger:
    return logging.getLogger(name)


logger = getLogger(__name__)


def env_flag(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().casefold() in ["1", "true", "yes", "on"]


def env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"{key}={value!r} is not an integer, using {default}")
        return default


def random_id(length: int = ITEM_ID_LENGTH) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def slugify(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", s.casefold()).strip("-")


def get_path(data: dict, selector: str, default=None):
    """
    Walk a period separated key path, e.g. `data.school.value`.
    :return: the value found, or `default` if any key along the way is missing.
    """
    current = data
    for key in selector.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def set_path(data: dict, selector: str, value):
    *parents, last = selector.split(".")
    current = data
    for key in parents:
        current = current.setdefault(key, {})
    current[last] = value


def tabulate(d: dict | list) -> str:
    tabulate_lib.MIN_PADDING = 0
    t = (
        tabulate_lib.tabulate(d, headers="keys", tablefmt="rounded_grid")
        .replace("│ ", "│")
        .replace(" │", "│")
        .replace("╭──", "╭")
        .replace("┬──", "┬")
        .replace("├──", "├")
        .replace("┼──", "┼")
        .replace("╰──", "╰")
        .replace("┴──", "┴")
    )
    return f"```\n{t}\n```"


def init_logger():
    class EndpointFilter(logging.Filter):
        def filter(self, record: logging.LogRecord) -> bool:
            return "/heartbeat" not in record.getMessage() and "HEAD" not in (
                record.args or ()
            )

    logging.getLogger("uvicorn.access").addFilter(EndpointFilter())

    stream_handler = logging.StreamHandler()
    stream_handler.formatter = uvicorn.logging.DefaultFormatter(
        fmt="{levelprefix} {asctime} | {filename}.{funcName}:{lineno} | {message}",
        style="{",
        use_colors=True,
    )
    logging.getLogger().setLevel(log_level)
    logging.getLogger().handlers = [stream_handler]
    logging.getLogger().propagate = True
