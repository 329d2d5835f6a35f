from flask import Flask, jsonify
from flask_migrate import Migrate
from .extensions import db, login_manager, rq

migrate = Migrate()


def create_app(config_object='config.Config'):
    """App factory.

    Handlers are thin: they authenticate, validate the payload with a form
    and hand the current user to ``services.evaluations``.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    rq.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Unauthorized"}), 401

    # abort() from the role decorators
    @app.errorhandler(401)
    def handle_unauthorized(err):
        return jsonify({"error": "Unauthorized"}), 401

    @app.errorhandler(403)
    def handle_forbidden(err):
        return jsonify({"error": "Forbidden"}), 403

    from .services.evaluations import EvaluationError

    @app.errorhandler(EvaluationError)
    def handle_evaluation_error(err):
        return jsonify(err.to_dict()), err.status_code

    from .blueprints.auth import bp as auth_bp
    from .blueprints.proposals import bp as proposals_bp
    from .blueprints.evaluations import bp as evaluations_bp
    from .blueprints.admin import bp as admin_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(proposals_bp, url_prefix="/proposals")
    app.register_blueprint(evaluations_bp, url_prefix="/evaluations")
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.get('/health')
    def health():
        return jsonify({"status": "ok"})

    return app
