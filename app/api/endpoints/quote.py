"""
报价方案生成 API。

POST /generate-quote         提取 + 生成 (generateCount: 0/1/2)
POST /generate-quote/refine  根据修改意见调整已有方案
OPTIONS 两者                  CORS 预检, 返回允许所有来源的响应头

失败时由 app.main 中注册的异常处理器统一转换为
{"error": ..., "error_code": ..., "success": false}。
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.api.cors import CORS_HEADERS
from app.models import QuoteRequest, RefineRequest, QuoteResponse, ErrorResponse
from app.services.orchestrator import get_quote_pipeline

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "缺少内容来源或价目表"},
    402: {"model": ErrorResponse, "description": "AI 服务额度已用尽"},
    429: {"model": ErrorResponse, "description": "请求过于频繁"},
    500: {"model": ErrorResponse, "description": "AI 服务调用失败"},
}


@router.options("")
@router.options("/refine")
async def preflight() -> Response:
    """CORS 预检请求。"""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("", response_model=QuoteResponse, responses=ERROR_RESPONSES)
async def generate_quote(request: QuoteRequest) -> JSONResponse:
    """
    生成报价方案。

    - transcript / documentBase64 / audioBase64 三选一 (优先级依次降低)
    - generateCount=0 时只返回 transcription
    - generateCount=2 时并行生成两个方案, 返回 quote 与 quote2
    """
    logger.info(
        f"[API] generate-quote: count={request.generate_count}, model={request.model}"
    )

    pipeline = get_quote_pipeline()
    result = await pipeline.process(request)

    return _success(QuoteResponse.from_result(result))


@router.post("/refine", response_model=QuoteResponse, responses=ERROR_RESPONSES)
async def refine_quote(request: RefineRequest) -> JSONResponse:
    """根据用户的修改要求调整当前方案, 返回修改后的完整方案。"""
    logger.info("[API] generate-quote/refine")

    pipeline = get_quote_pipeline()
    result = await pipeline.refine(request)

    return _success(QuoteResponse.from_result(result))


def _success(response: QuoteResponse) -> JSONResponse:
    # quote / quote2 为空时不出现在响应中
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        headers=CORS_HEADERS,
    )
