import logging
import sys


def setup_logging(level=logging.WARNING, debug=False):
    """
    Configure root logging to stderr.

    Args:
        level: Logging level, as a number or a name like "INFO".
        debug: If True, use DEBUG level with file/line context.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(levelname)s - %(message)s'

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
