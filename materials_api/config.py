"""应用配置。
可通过环境变量（或项目根目录的 .env 文件）覆盖。
"""
from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR: Path = Path(__file__).resolve().parent.parent  # 项目根目录

load_dotenv(BASE_DIR / ".env")


class Config:
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret")
    PORT: int = int(os.environ.get("PORT", "3000"))

    # 物料 ID 生成策略：sequential（单调递增，已发放的 id 不再复用）或 random（区间内随机，冲突重抽）
    ID_STRATEGY: str = os.environ.get("ID_STRATEGY", "sequential").lower()
    RANDOM_ID_MAX: int = int(os.environ.get("RANDOM_ID_MAX", "1000000"))

    # "*" 或以逗号分隔的来源列表
    CORS_ORIGINS: str = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_DIR: str | None = os.environ.get("LOG_DIR")

    # Swagger
    SWAGGER = {
        "title": "API de Materiais",
        "description": "Documentação da API de Materiais",
        "version": "1.0.0",
        "uiversion": 3,
        "openapi": "3.0.2",
    }
