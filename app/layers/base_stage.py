"""Base class for pipeline stages.

提取(Layer 1)和方案生成(Layer 2)共用的抽象基类。

主要功能:
- 模板方法模式: 统一的开始/完成/失败日志与耗时统计
- 网关客户端注入 (测试时可替换)

与文档生成不同, 这里的阶段失败不会被吞掉: 任何异常都会原样向上抛出,
由接口层统一转换为失败响应。
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TypeVar, Generic, Optional

from app.services.gateway_client import AIGatewayClient, get_gateway_client

# 泛型类型变量
InputT = TypeVar('InputT')      # 阶段输入 (ContentSource / 提取后的文本)
OutputT = TypeVar('OutputT')    # 阶段输出
ContextT = TypeVar('ContextT')  # 阶段上下文 (生成参数等)

logger = logging.getLogger(__name__)


class BaseStage(ABC, Generic[InputT, OutputT, ContextT]):
    """
    流水线阶段抽象基类。

    处理流程:
    1. 记录开始时间并输出日志
    2. 调用 _do_run() (子类实现)
    3. 输出耗时日志; 失败时记录后重新抛出

    Attributes:
        gateway_client: AI 网关客户端
        _stage_name: 日志中使用的阶段名称
    """

    _stage_name: str = "BaseStage"

    def __init__(self, gateway_client: Optional[AIGatewayClient] = None):
        """
        Args:
            gateway_client: 网关客户端实例。为 None 时使用单例。
        """
        self.gateway_client = gateway_client or get_gateway_client()

    async def run(self, input_doc: InputT, context: ContextT) -> OutputT:
        """
        阶段执行模板方法。

        Args:
            input_doc: 阶段输入
            context: 阶段上下文

        Returns:
            阶段输出

        Raises:
            Exception: _do_run() 中发生的任何异常
        """
        logger.info(f"[{self._stage_name}] 开始")
        start_time = datetime.now()

        try:
            result = await self._do_run(input_doc, context)
        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[{self._stage_name}] 失败 ({elapsed:.1f}s): {type(e).__name__}: {e}")
            raise

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[{self._stage_name}] 完成: {elapsed:.1f}s")
        return result

    @abstractmethod
    async def _do_run(self, input_doc: InputT, context: ContextT) -> OutputT:
        """实际的阶段逻辑 (子类实现)。"""
        pass
