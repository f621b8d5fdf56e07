import logging

import colorlog

__all__ = ["setup_logging"]


def setup_logging(log_file_path=None, file_level=logging.DEBUG, console_level=logging.INFO):
    """
    配置根日志记录器：彩色的控制台输出，以及可选的日志文件

    参数:
    - log_file_path: 日志文件路径，为None时只输出到控制台
    - file_level: 文件日志的最低级别
    - console_level: 控制台日志的最低级别
    """
    logger = logging.getLogger()
    # Handlers do the filtering
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s %(levelname)s [%(filename)s:%(lineno)d]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "blue",
                "INFO": "bold_blue",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    logger.addHandler(console_handler)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logging.debug("Logging setup complete.")
