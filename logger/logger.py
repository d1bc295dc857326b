import logging
import sys

APP_LOGGER_NAME: str = 'APP'


def setup_app_level_logger(logger_name: str = APP_LOGGER_NAME,
                           level: str = 'DEBUG',
                           use_stdout: bool = False,
                           file_name: str = "road_parser.log") -> logging.Logger:
    """create the application logger

    Args:
        logger_name (str, optional): name of the logger. Defaults to APP_LOGGER_NAME.
        level (str, optional): controls the output level. Defaults to 'DEBUG'.
        use_stdout (bool, optional): Whether output log to stdout. Defaults to False.
        file_name (str, optional): path where the log is saved, None disables
            the file output. Defaults to "road_parser.log".

    Returns:
        logging.Logger: the logger object
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    formatter = logging.Formatter(
        "[%(levelname)-s]:%(filename)s %(funcName)s [Line %(lineno)s] - %(message)s")

    # calling setup twice must not duplicate every record
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if file_name is not None:
        file_handler = logging.FileHandler(file_name, mode='w')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if use_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        logger.addHandler(stdout_handler)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """obtain the module's logger, a child of the application logger

    Args:
        module_name (str): name of the module.

    Returns:
        logging.Logger: the logger object
    """
    return logging.getLogger(APP_LOGGER_NAME).getChild(module_name)
