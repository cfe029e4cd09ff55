"""物料 API：
- GET/POST /api/materiais（别名 /materials）
- PUT/DELETE /api/materiais/<id>（别名 /materials/<id>）

业务规则与错误均由 MaterialStore 处理，这里只做请求解析与响应封装。
id 以字符串接收，由存储层做宽松匹配（"5" 与 5 等价）。
"""
from __future__ import annotations
from flask import Blueprint, jsonify, request

from ..services import get_store

bp = Blueprint("materials", __name__)

MSG_CREATED = "Material cadastrado com sucesso!"
MSG_UPDATED = "Material atualizado com sucesso!"
MSG_DELETED = "Material excluído com sucesso!"


def _json_body():
    """请求体；缺失或无法解析时按空对象处理，由存储层报告缺失字段"""
    data = request.get_json(silent=True)
    return {} if data is None else data


@bp.route("/api/materiais", methods=["POST"])
@bp.route("/materials", methods=["POST"])
def create_material():
    """Criar um novo material
    Cadastra um novo material no sistema.
    ---
    tags:
      - Materiais
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            required:
              - nomeProduto
              - quantidadePorCaixa
              - quantidadeUnitaria
              - codigoBarras
              - nomeFornecedor
              - nomeRecebedor
              - setorDestino
              - valorUnitario
              - valorTotal
            properties:
              nomeProduto: {type: string}
              quantidadePorCaixa: {type: integer}
              quantidadeUnitaria: {type: integer}
              codigoBarras: {type: string}
              nomeFornecedor: {type: string}
              nomeRecebedor: {type: string}
              setorDestino: {type: string}
              valorUnitario: {type: number}
              valorTotal: {type: number}
    responses:
      201:
        description: Material cadastrado com sucesso
      400:
        description: Campos obrigatórios ausentes ou inválidos
      409:
        description: Código de barras já cadastrado
    """
    material = get_store().create(_json_body())
    return jsonify({"sucesso": MSG_CREATED, "data": material.to_dict()}), 201


@bp.route("/api/materiais", methods=["GET"])
@bp.route("/materials", methods=["GET"])
def list_materials():
    """Listar todos os materiais cadastrados
    ---
    tags:
      - Materiais
    responses:
      200:
        description: Lista de materiais cadastrados, em ordem de cadastro
    """
    materials = [m.to_dict() for m in get_store().list()]
    return jsonify({"materiais": materials}), 200


@bp.route("/api/materiais/<material_id>", methods=["PUT"])
@bp.route("/materials/<material_id>", methods=["PUT"])
def update_material(material_id: str):
    """Atualizar um material pelo ID
    ---
    tags:
      - Materiais
    parameters:
      - in: path
        name: material_id
        required: true
        schema:
          type: integer
        description: ID do material a ser atualizado
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              nomeProduto: {type: string}
              quantidadePorCaixa: {type: integer}
              quantidadeUnitaria: {type: integer}
              codigoBarras: {type: string}
              nomeFornecedor: {type: string}
              nomeRecebedor: {type: string}
              setorDestino: {type: string}
              valorUnitario: {type: number}
              valorTotal: {type: number}
    responses:
      200:
        description: Material atualizado com sucesso
      400:
        description: Campos obrigatórios ausentes ou inválidos
      404:
        description: Material não encontrado
      409:
        description: Código de barras já cadastrado em outro material
    """
    material = get_store().update(material_id, _json_body())
    return jsonify({"sucesso": MSG_UPDATED, "data": material.to_dict()}), 200


@bp.route("/api/materiais/<material_id>", methods=["DELETE"])
@bp.route("/materials/<material_id>", methods=["DELETE"])
def delete_material(material_id: str):
    """Excluir um material pelo ID
    ---
    tags:
      - Materiais
    parameters:
      - in: path
        name: material_id
        required: true
        schema:
          type: integer
        description: ID do material a ser excluído
    responses:
      200:
        description: Material excluído com sucesso
      404:
        description: Material não encontrado
    """
    get_store().delete(material_id)
    return jsonify({"sucesso": MSG_DELETED}), 200
