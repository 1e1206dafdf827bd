"""Flask application factory."""

import os
from flask import Flask, render_template
from .config import config
from .extensions import db, migrate, login_manager, bcrypt, csrf


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    # Member loader for Flask-Login
    from .models import Member
    
    @login_manager.user_loader
    def load_user(member_id):
        return db.session.get(Member, int(member_id))
    
    # Anonymous access to a protected page is answered with 401, not a redirect
    @login_manager.unauthorized_handler
    def unauthorized():
        return render_template('errors/401.html'), 401
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template('errors/403.html'), 403
    
    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled error: %s', error)
        return render_template('errors/500.html'), 500
    
    # Context processors
    @app.context_processor
    def inject_globals():
        from .models import Cart, CartItem
        from flask_login import current_user
        cart_count = 0
        if current_user.is_authenticated:
            cart_count = CartItem.query.join(Cart).filter(
                Cart.member_id == current_user.id
            ).count()
        return dict(cart_count=cart_count)
    
    app.logger.info('Shop application created with %s config', config_name)
    return app
