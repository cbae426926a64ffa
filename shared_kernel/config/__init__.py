"""
配置包。
从环境变量和.env文件读取共享内核的配置。
"""
from shared_kernel.config.env import (
    get_env,
    load_env_file,
    LOG_ENABLED,
    LOG_LEVEL,
    LOG_FORMAT,
)

__all__ = [
    'get_env',
    'load_env_file',
    'LOG_ENABLED',
    'LOG_LEVEL',
    'LOG_FORMAT',
]
