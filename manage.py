"""
manage.py - 应用入口与开发运行脚本。
可通过 `python manage.py` 启动。
"""
from __future__ import annotations
import os
from flask import Flask
from materials_api import create_app
from materials_api.utils.logging_utils import get_logger

app: Flask = create_app()
logger = get_logger("server")

if __name__ == "__main__":
    # 允许从环境覆盖端口
    port = int(app.config["PORT"])
    debug = os.environ.get("FLASK_ENV") == "development"

    logger.info(f"Servidor rodando em http://localhost:{port}")
    logger.info(f"Documentação disponível em http://localhost:{port}/api-docs")
    app.run(host="0.0.0.0", port=port, debug=debug)
