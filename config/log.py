"""
Custom Logging Module
^^^^^^^^^^^^^^^^^^^^^
Provides a setup_logger function to configure the loggers of the project
using logger.cfg.
"""
import configparser
import logging
import logging.config
import os

PROJECT_LOGGERS = ("abi_hex", "abi_numeric", "cli")


def setup_logger(name, level=None):
    """
    Set up a logger with the provided name using the 'logger.cfg' file.

    If `level` is given, it overrides the level of the project loggers.
    """
    config = configparser.ConfigParser()
    config.read(os.path.join(os.path.dirname(os.path.abspath(__file__)), "logger.cfg"))
    logging.config.fileConfig(config, disable_existing_loggers=False)

    if level is not None:
        for project_logger in PROJECT_LOGGERS:
            logging.getLogger(project_logger).setLevel(level)

    logger = logging.getLogger(name)

    return logger
