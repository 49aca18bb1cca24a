"""FastAPI アプリケーション - テンプレート描画 API"""
from pathlib import Path
from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from infrastructure.config.settings import Settings
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.output.in_memory_render_target import InMemoryRenderTarget
from infrastructure.templates.file_template_source import FileTemplateSource
from application.ports.render_target import RenderTargetPort, RenderTargetResolverPort
from application.services.template_mounter import TemplateMounter
from application.services.template_renderer import TemplateRenderer
from domain.exceptions import ExpressionError, TargetNotFoundError, TemplateNotFoundError
from domain.expr import ExpressionEvaluator
from domain.template import VERSION


# リクエストモデル
class RenderRequest(BaseModel):
    """インラインテンプレート描画リクエスト"""
    template: str = Field(description="テンプレート文字列")
    context: Dict[str, Any] = Field(default_factory=dict, description="テンプレート変数")


class RenderTemplateRequest(BaseModel):
    """保存済みテンプレート描画リクエスト"""
    context: Dict[str, Any] = Field(default_factory=dict, description="テンプレート変数")


class EvaluateRequest(BaseModel):
    """式評価リクエスト"""
    expression: str = Field(description="評価する式")
    context: Dict[str, Any] = Field(default_factory=dict, description="式から参照できる変数")


class RenderResponse(BaseModel):
    html: str = Field(description="Rendered HTML")


class EvaluateResponse(BaseModel):
    value: Any = Field(default=None, description="Expression value")


# FastAPIアプリケーション
app = FastAPI(
    title="HTMLx Template Renderer",
    description="サンドボックス式評価つきマイクロテンプレート",
    version=VERSION,
)

# 設定
SETTINGS = Settings.from_env()


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "htmlx", "version": VERSION}


def _expression_error(exc: ExpressionError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": exc.code, "message": str(exc), "expression": exc.expression},
    )


class _NoNamedTargets(RenderTargetResolverPort):
    # API responses are rendered into memory; named (file) targets are CLI-only.
    def resolve(self, name: str) -> RenderTargetPort:
        raise TargetNotFoundError(f"Named targets are not supported: {name}")


def _build_mounter(logger: ConsoleLogger) -> TemplateMounter:
    return TemplateMounter(
        renderer=TemplateRenderer(logger=logger),
        templates=FileTemplateSource(SETTINGS.template_dir),
        targets=_NoNamedTargets(),
        logger=logger,
    )


@app.post("/render", response_model=RenderResponse)
def render_template(request: RenderRequest = Body(...)) -> RenderResponse:
    """インラインのテンプレート文字列を描画する"""
    logger = ConsoleLogger().bind(endpoint="render")
    renderer = TemplateRenderer(logger=logger)
    try:
        html = renderer.render(request.template, request.context)
    except ExpressionError as e:
        raise _expression_error(e)
    return RenderResponse(html=html)


@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate_expression(request: EvaluateRequest = Body(...)) -> EvaluateResponse:
    """式を 1 つ評価する"""
    logger = ConsoleLogger().bind(endpoint="evaluate")
    try:
        value = ExpressionEvaluator().evaluate(request.expression, request.context)
    except ExpressionError as e:
        logger.error("expression.failed", kind=e.code, error=str(e))
        raise _expression_error(e)
    return EvaluateResponse(value=value)


@app.post("/templates/{template_id}/render", response_model=RenderResponse)
def render_stored_template(
    template_id: str,
    request: RenderTemplateRequest = Body(...),
) -> RenderResponse:
    """
    テンプレートディレクトリ内のテンプレートを描画する

    Args:
        template_id: テンプレートID（例: "user-card"）
        request: 描画リクエスト（context）
    """
    logger = ConsoleLogger().bind(template_id=template_id)
    mounter = _build_mounter(logger)
    target = InMemoryRenderTarget()
    try:
        mounter.mount(template_id, target, request.context)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ExpressionError as e:
        raise _expression_error(e)
    return RenderResponse(html=target.html)
