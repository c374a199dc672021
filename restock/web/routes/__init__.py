"""라우트 Blueprint 등록"""
from flask import Flask


def register_blueprints(app: Flask):
    from .api_restock import restock_bp
    from .api_history import history_bp

    app.register_blueprint(restock_bp, url_prefix="/api")
    app.register_blueprint(history_bp, url_prefix="/api/history")
