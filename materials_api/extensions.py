"""Flask 扩展集中初始化。"""

from __future__ import annotations

from flasgger import Swagger

# 全局扩展实例

swagger: Swagger = Swagger()
