"""Attach log handlers to the `penrose_tools` logger.

The modules of this package only create loggers and emit records
(mostly at DEBUG level). Scripts which want to see them can call
`setup_logging`:

```python
import logging
from penrose_tools.logging_config import setup_logging

setup_logging(logging.DEBUG)
```

"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

def setup_logging(level=logging.INFO, log_file=None):
    """Configure the logger for the `penrose_tools` namespace.

    Any handlers already attached to the logger are removed first, so
    calling this more than once does not duplicate output.

    Parameters
    ----------
    level : int
        logging level, applied to the logger and to every handler.

    log_file : str
        if not `None`, also write log records to this file
        (overwriting it).

    Returns
    -------
    logging.Logger
        the configured `penrose_tools` logger.

    """
    logger = logging.getLogger("penrose_tools")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode='w',
                                            encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging initialized at level %s",
                 logging.getLevelName(level))
    return logger
