import logging

tablerepr_logger = logging.getLogger("tablerepr")
# Don’t pass log messages on to logging.root and its handler
tablerepr_logger.propagate = False
tablerepr_logger.addHandler(logging.StreamHandler())  # Logs go to stderr
tablerepr_logger.handlers[-1].setFormatter(
    logging.Formatter("%(name)s: %(message)s")
)
tablerepr_logger.handlers[-1].setLevel("INFO")


def get_logger(name):
    """\
    Creates a child logger that delegates to tablerepr_logger
    instead to logging.root
    """
    return tablerepr_logger.manager.getLogger(name)
