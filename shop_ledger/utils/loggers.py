import logging

PACKAGE_LOGGER = "shop_ledger"


def get_logger(name=PACKAGE_LOGGER, level=logging.INFO):
    """
    Return the named logger, giving it a stderr handler the first time.

    With the default name this configures the package logger, so every
    `shop_ledger.*` module logger (repos, controllers) inherits its level
    and handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(ch)
    return logger
