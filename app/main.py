"""
报价方案生成服务的主入口。
负责创建并配置 Web 应用。
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.api.cors import CORS_HEADERS
from app.api.router import api_router
from app.exceptions import QuoteGeneratorError
from app.models import ErrorResponse

logger = logging.getLogger(__name__)

# HTTPException (404 等) 也使用统一的失败响应格式
HTTP_ERROR_CODES = {
    404: "ERR_NOT_FOUND",
    405: "ERR_METHOD_NOT_ALLOWED",
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _error_response(status_code: int, message: str, error_code: str) -> JSONResponse:
    """统一的失败响应: {"error", "error_code", "success": false}。"""
    body = ErrorResponse(error=message, error_code=error_code)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        headers=CORS_HEADERS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理。

    启动时: 读取配置并输出启动日志 (不输出密钥本身)。
    关闭时: 输出关闭日志。
    """
    settings = get_settings()
    logger.info(f"报价方案生成服务启动: {settings.host}:{settings.port}")
    logger.info(f"AI 网关: {settings.ai_gateway_url} (默认模型 {settings.default_model})")
    if not settings.ai_gateway_api_key:
        logger.warning("AI_GATEWAY_API_KEY 未配置, 需要调用网关的请求将会失败")

    yield

    logger.info("报价方案生成服务关闭")


def create_app() -> FastAPI:
    """
    创建并配置 FastAPI 应用。

    主要内容:
    1. 基本信息 (标题、描述等)
    2. CORS 设置 (允许浏览器直接调用)
    3. 全局异常处理器 (所有错误都转换为统一的失败响应)
    4. API 路由
    """
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title="销售报价方案生成服务",
        description="把销售沟通录音、文档或文字与价目表交给大模型, 生成报价方案",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS 中间件: 允许前端页面跨域访问
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(QuoteGeneratorError)
    async def quote_error_handler(request: Request, exc: QuoteGeneratorError):
        logger.warning(f"请求失败 [{exc.error_code}]: {exc.message}")
        return _error_response(exc.status_code, exc.message, exc.error_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error_code = HTTP_ERROR_CODES.get(exc.status_code, f"ERR_HTTP_{exc.status_code}")
        response = _error_response(exc.status_code, str(exc.detail), error_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        locations = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
        logger.warning(f"请求格式错误: {locations}")
        return _error_response(400, "请求格式无效", "ERR_INPUT_001")

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"未处理的异常: {exc}", exc_info=True)
        return _error_response(500, "服务内部错误，请重试", "ERR_INTERNAL")

    # API 路由: 全部挂在 /api/v1 下
    app.include_router(api_router, prefix="/api/v1")

    return app


# 应用实例
app = create_app()


@app.get("/")
async def root():
    """根路径: 返回服务基本信息。"""
    return {
        "name": "销售报价方案生成服务",
        "version": "1.0.0",
        "description": "录音 / 文档 / 文字 + 价目表 → 报价方案",
        "docs": "/docs",
        "api": "/api/v1",
    }


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
