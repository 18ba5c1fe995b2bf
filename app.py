import logging
import os

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from config import Config
from db import db
from mailer import Mailer, send_career_emails, send_contact_emails
from models import CareerApplication, ContactInquiry
from uploads import MissingFile, UploadRejected, save_resume

logger = logging.getLogger(__name__)

site = Blueprint("site", __name__)


def create_app(config=None, mailer=None):
    """Build the app. Reads and validates the environment when no config is given."""
    if config is None:
        config = Config.from_env()
    else:
        config.validate()

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = Flask(__name__)
    app.config.from_object(config)

    CORS(
        app,
        origins=[config.CORS_ORIGIN],
        methods=config.CORS_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    db.init_app(app)
    with app.app_context():
        db.create_all()

    os.makedirs(config.UPLOAD_FOLDER, exist_ok=True)

    app.extensions["mailer"] = mailer if mailer is not None else Mailer.from_config(app.config)

    app.register_blueprint(site)
    register_error_handlers(app)

    logger.info("App ready, CORS origin %s, uploads in %s", config.CORS_ORIGIN, config.UPLOAD_FOLDER)
    return app


# Contact form handler
@site.route("/contact", methods=["POST"])
def contact():
    data = request.get_json(silent=True) or {}

    try:
        inquiry = ContactInquiry.create(
            name=data.get("name"),
            email=data.get("email"),
            mobile=data.get("mobile"),
            service=data.get("service"),
            message=data.get("message"),
        )
        logger.info("Contact inquiry %s stored", inquiry.id)

        send_contact_emails(current_app.extensions["mailer"], inquiry, current_app.config["OWNER_EMAIL"])

        return jsonify({"success": True, "message": "Added to contact list"})
    except Exception:
        logger.exception("Error adding to contact list")
        return jsonify({"success": False, "error": "Failed to add to contact list"}), 500


# Career application handler
@site.route("/career", methods=["POST"])
def career():
    try:
        resume = save_resume(
            request.files.get("resume"),
            current_app.config["UPLOAD_FOLDER"],
            current_app.config["MAX_RESUME_SIZE"],
        )
    except MissingFile as e:
        return jsonify({"success": False, "error": str(e)}), 400
    except UploadRejected as e:
        return jsonify({"success": False, "error": str(e)}), 500

    form = request.form

    try:
        application = CareerApplication.create(
            name=form.get("name"),
            phone=form.get("phone"),
            email=form.get("email"),
            position=form.get("position"),
            message=form.get("message"),
            resume=resume.filename,
        )
        logger.info("Career application %s stored with resume %s", application.id, resume.filename)

        send_career_emails(current_app.extensions["mailer"], application, resume, current_app.config["OWNER_EMAIL"])

        return jsonify({"success": True, "message": "Application submitted successfully"})
    except Exception as e:
        logger.exception("Error submitting application")
        return jsonify({
            "success": False,
            "error": "Failed to submit application",
            "details": str(e),
        }), 500


# Default route
@site.route("/", methods=["GET"])
def index():
    return "Hello World!", 200, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    @app.errorhandler(400)
    @app.errorhandler(404)
    @app.errorhandler(405)
    @app.errorhandler(500)
    def handle_error(e):
        if e.code == 500:
            logger.error("Server error occurred", exc_info=getattr(e, "original_exception", None) or e)
        return jsonify({"success": False, "error": e.description}), e.code


if __name__ == "__main__":
    app = create_app()
    try:
        app.run(port=app.config["PORT"], debug=app.config["DEBUG"])
    finally:
        with app.app_context():
            db.engine.dispose()
