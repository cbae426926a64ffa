"""
环境变量处理模块。
负责加载和处理环境变量。
"""
import os
import warnings
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import load_dotenv
from loguru import logger

# 环境变量前缀
ENV_PREFIX = 'SHARED_KERNEL_'

# 默认的.env文件位于本模块同级目录，不读取宿主进程工作目录下的.env
DEFAULT_ENV_PATH = Path(__file__).resolve().parent / '.env'


def load_env_file(env_path: Optional[Union[str, Path]] = None) -> bool:
    """
    加载.env文件，已存在的环境变量不会被覆盖。

    Args:
        env_path: .env文件路径，默认为本模块同级目录下的.env

    Returns:
        成功加载返回True，文件不存在返回False
    """
    env_path = Path(env_path) if env_path is not None else DEFAULT_ENV_PATH

    if not env_path.exists():
        logger.debug(f"环境变量文件不存在: {env_path}，将使用默认值")
        return False

    load_dotenv(dotenv_path=env_path, encoding='utf-8')
    logger.debug(f"成功加载环境变量文件: {env_path}")
    return True


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    获取环境变量值，支持类型转换和默认值

    Args:
        name: 环境变量名称
        default: 默认值，如果环境变量不存在则返回此值
        cast_type: 类型转换函数，如int, float, bool等

    Returns:
        环境变量的值，经过类型转换（如果指定了cast_type）
    """
    value = os.environ.get(name, default)

    if value is None:
        return None

    if cast_type is not None:
        if cast_type is bool and isinstance(value, str):
            return value.strip().lower() in ('true', 'yes', '1', 'y')
        if cast_type is list and isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        try:
            return cast_type(value)
        except (ValueError, TypeError):
            warnings.warn(f"无法将环境变量{name}的值'{value}'转换为{cast_type.__name__}类型，使用默认值")
            return default

    return value


# 尝试加载环境变量
load_env_file()

# 日志配置
LOG_ENABLED = get_env(f'{ENV_PREFIX}LOG_ENABLED', default=False, cast_type=bool)
LOG_LEVEL = get_env(f'{ENV_PREFIX}LOG_LEVEL', default='INFO')
LOG_FORMAT = get_env(
    f'{ENV_PREFIX}LOG_FORMAT',
    default='{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}',
)
