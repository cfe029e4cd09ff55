"""
Health check endpoint.
"""
from datetime import datetime, timezone
from flask import Blueprint, current_app, jsonify

from ..services import get_store

bp = Blueprint('health', __name__, url_prefix='/api')


@bp.route('/health', methods=['GET'])
def health_check():
    """Simple health check endpoint.
    ---
    tags:
      - Health
    responses:
      200:
        description: Service is up
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': current_app.config['SWAGGER']['version'],
        'materials': get_store().count(),
    })
