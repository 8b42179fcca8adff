import logging, os
from datetime import datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from screen_compare.services.config import AppConfig

logger = logging.getLogger("screen_compare")

def init(config: Optional["AppConfig"] = None) -> None:
    if logger.handlers:
        return
    if config is None:
        from screen_compare.services.config import get_config
        config = get_config()
    level = logging.getLevelName(config.log_level.upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = os.path.expanduser(str(config.log_dir))
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"screen_compare_{datetime.now():%Y%m%d}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

    logger.info("Screen Compare logging initialized")
