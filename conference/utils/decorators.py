from functools import wraps
from flask import abort
from flask_login import current_user

from ..models.user import PRIVILEGED_ROLES

EVALUATOR_ROLES = ("evaluator",) + PRIVILEGED_ROLES


def role_required(*roles):
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            if not current_user.is_authenticated:
                abort(401)
            if getattr(current_user, "role", None) not in roles:
                abort(403)
            return view(*args, **kwargs)
        return wrapped
    return decorator


admin_required = role_required(*PRIVILEGED_ROLES)
evaluator_required = role_required(*EVALUATOR_ROLES)
