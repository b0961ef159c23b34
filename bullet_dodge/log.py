"""
日誌設定
"""

import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """配置根日誌（已配置時不重複設定）"""
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger('bullet_dodge')
