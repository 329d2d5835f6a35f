from flask import current_app, jsonify
from flask_login import login_user, logout_user, login_required, current_user
from . import bp
from ...extensions import db
from .forms import LoginForm, SignupForm
from ...models.user import User
from ...utils.decorators import admin_required


@bp.post("/login")
def login():
    form = LoginForm()
    if not form.validate_on_submit():
        return jsonify({"error": "Invalid input", "errors": form.errors}), 400
    user = User.query.filter_by(email=form.email.data.lower()).first()
    if not user or not user.check_password(form.password.data):
        return jsonify({"error": "Invalid credentials"}), 401
    login_user(user)
    return jsonify(user.to_dict())


@bp.post("/logout")
@login_required
def logout():
    logout_user()
    return jsonify({"ok": True})


@bp.post("/signup")
def signup():
    """Public sign-up. The very first account bootstraps the admin."""
    form = SignupForm()
    if not form.validate_on_submit():
        return jsonify({"error": "Invalid input", "errors": form.errors}), 400
    email = form.email.data.lower()
    if User.query.filter_by(email=email).first():
        return jsonify({"error": "A user with this email already exists"}), 409

    first_user = User.query.first() is None
    user = User(email=email, name=form.name.data, role="admin" if first_user else "attendee")
    user.set_password(form.password.data)
    db.session.add(user)
    db.session.commit()
    if first_user:
        current_app.logger.info("Bootstrap admin %s created", user.id)
    return jsonify(user.to_dict()), 201


@bp.get("/me")
@login_required
def me():
    return jsonify(current_user.to_dict())


@bp.get("/users")
@admin_required
def users_index():
    users = User.query.order_by(User.id.asc()).all()
    return jsonify([u.to_dict() for u in users])
