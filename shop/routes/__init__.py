"""Routes package - register all blueprints."""

from flask import Flask


def register_blueprints(app: Flask):
    """Register all blueprints with the application."""
    from .main import main_bp
    from .members import members_bp
    from .items import items_bp
    from .cart import cart_bp
    from .orders import orders_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(members_bp, url_prefix='/members')
    app.register_blueprint(items_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(orders_bp)
