"""Logging setup for componenthelper."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: int = 10485760,
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up the componenthelper logger hierarchy.

    Args:
        log_level: Logging level name (DEBUG, INFO, ...)
        log_file: Optional path of a rotating log file
        max_size: Maximum log file size in bytes before rotation
        backup_count: Number of rotated log files to keep

    Returns:
        The root componenthelper logger
    """
    logger = logging.getLogger("componenthelper")
    logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Replace handlers from a previous call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured - level: {log_level}, file: {log_file}")
    return logger


class HelperLogger:
    """
    结构化日志记录器

    在日志记录上附带 context 字典，便于过滤和调试
    """

    def __init__(self, name: str):
        """
        初始化日志记录器

        Args:
            name: 日志记录器名称（位于 componenthelper 之下）
        """
        self.logger = logging.getLogger(f"componenthelper.{name}")

    def log_row_opened(self, row_index: int, initial_size: int) -> None:
        """
        记录新行的创建

        Args:
            row_index: 新行的索引
            initial_size: 新行创建时包含的组件数量
        """
        self.logger.debug(
            f"新建行 - 索引: {row_index} | 初始组件数: {initial_size}",
            extra={'context': {'row_index': row_index, 'initial_size': initial_size}}
        )

    def log_placement(self, component_type: str, row_index: int, row_size: int) -> None:
        """
        记录组件的放置结果

        Args:
            component_type: 组件类型名称
            row_index: 组件所在行的索引
            row_size: 放置后该行的组件数量
        """
        self.logger.debug(
            f"放置组件 - 类型: {component_type} | 行: {row_index} | 行内组件数: {row_size}",
            extra={'context': {
                'component_type': component_type,
                'row_index': row_index,
                'row_size': row_size
            }}
        )

    def log_rows_pruned(self, removed: int, remaining: int) -> None:
        """记录空行清理结果"""
        if removed:
            self.logger.debug(
                f"清理空行 - 移除: {removed} | 剩余: {remaining}",
                extra={'context': {'removed': removed, 'remaining': remaining}}
            )

    def debug(self, message: str, **kwargs) -> None:
        """记录调试信息"""
        self.logger.debug(message, extra={'context': kwargs})

    def info(self, message: str, **kwargs) -> None:
        """记录信息"""
        self.logger.info(message, extra={'context': kwargs})

    def warning(self, message: str, **kwargs) -> None:
        """记录警告"""
        self.logger.warning(message, extra={'context': kwargs})

    def error(self, message: str, error: Exception = None, **kwargs) -> None:
        """记录错误"""
        self.logger.error(message, extra={'context': kwargs}, exc_info=error)
