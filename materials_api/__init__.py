"""app 工厂与初始化逻辑。
注册扩展、物料存储、蓝图、错误处理与 CORS。
"""
from __future__ import annotations
import time
from typing import Any, Mapping, Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import MaterialError
from .extensions import swagger
from .services import STORE_EXTENSION, MaterialStore
from .utils.logging_utils import get_logger, performance_logger, setup_logging

logger = get_logger("app")


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    # 基础配置
    app.config.from_object(Config())
    if test_config:
        app.config.update(test_config)
    app.json.sort_keys = False

    setup_logging(app.config["LOG_LEVEL"], app.config.get("LOG_DIR"))

    # 初始化扩展
    swagger.init_app(app)
    CORS(app, origins=_cors_origins(app.config["CORS_ORIGINS"]))

    # 进程内物料存储，随应用创建，随进程结束丢弃
    app.extensions[STORE_EXTENSION] = MaterialStore(
        id_strategy=app.config["ID_STRATEGY"],
        random_id_max=app.config["RANDOM_ID_MAX"],
    )

    _register_error_handlers(app)
    _register_request_hooks(app)

    # 注册蓝图
    from .blueprints import api_docs, health, materials
    app.register_blueprint(materials.bp)
    app.register_blueprint(health.bp)
    app.register_blueprint(api_docs.bp)

    logger.info(f"Materials API ready (id strategy: {app.config['ID_STRATEGY']})")
    return app


def _cors_origins(value: str):
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return "*" if not origins or "*" in origins else origins


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(MaterialError)
    def handle_material_error(e: MaterialError):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"erro": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return jsonify({"erro": "Erro interno do servidor."}), 500


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_timing(response):
        started = g.get("request_started")
        if started is not None:
            duration_ms = (time.perf_counter() - started) * 1000
            performance_logger.log_request_timing(
                request.path, request.method, duration_ms, response.status_code
            )
        return response
