from __future__ import annotations
import pytest
from materials_api import create_app
from materials_api.services import STORE_EXTENSION, MaterialStore


@pytest.fixture(scope="session")
def app():
    app = create_app({"TESTING": True, "LOG_LEVEL": "WARNING"})
    yield app


@pytest.fixture()
def store(app):
    # 每个测试使用全新的空存储
    fresh = MaterialStore(
        id_strategy=app.config["ID_STRATEGY"],
        random_id_max=app.config["RANDOM_ID_MAX"],
    )
    app.extensions[STORE_EXTENSION] = fresh
    return fresh


@pytest.fixture()
def client(app, store):
    return app.test_client()


@pytest.fixture()
def make_payload():
    return material_payload


def material_payload(**overrides):
    payload = {
        "nomeProduto": "Widget",
        "quantidadePorCaixa": 10,
        "quantidadeUnitaria": 1,
        "codigoBarras": "123",
        "nomeFornecedor": "A",
        "nomeRecebedor": "B",
        "setorDestino": "C",
        "valorUnitario": 5,
        "valorTotal": 50,
    }
    payload.update(overrides)
    return payload
