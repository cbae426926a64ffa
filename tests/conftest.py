"""
测试公共夹具。
"""
import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """捕获共享内核输出的日志消息，格式为 '级别|消息'。"""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    logger.enable("shared_kernel")
    yield messages
    logger.remove(handler_id)
    logger.disable("shared_kernel")
