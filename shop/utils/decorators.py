"""Role-based access decorators."""

from functools import wraps
from flask import abort, current_app, request
from flask_login import current_user


def admin_required(f):
    """Decorator to require admin role."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return current_app.login_manager.unauthorized()
        if not current_user.is_admin():
            current_app.logger.warning(
                'Member %s denied access to %s', current_user.email, request.path
            )
            abort(403)
        return f(*args, **kwargs)
    return decorated_function
