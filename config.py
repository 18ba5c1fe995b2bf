import os

from dotenv import load_dotenv

REQUIRED_VARS = ["DATABASE_URL", "EMAIL_USER", "EMAIL_PASS"]


class Config:
    """Settings for the app, loaded into Flask with ``app.config.from_object``."""

    CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]
    MAX_RESUME_SIZE = 1024 * 1024 * 10  # 10 MiB
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    def __init__(self, database_url=None, email_user=None, email_pass=None,
                 owner_email=None, cors_origin="https://hr-project-front-end.vercel.app",
                 smtp_server="smtp.gmail.com", smtp_port=587, smtp_timeout=None,
                 upload_folder="uploads", port=3037, log_level="INFO", debug=False):
        self.SQLALCHEMY_DATABASE_URI = database_url
        self.EMAIL_USER = email_user
        self.EMAIL_PASS = email_pass
        self.OWNER_EMAIL = owner_email or email_user
        self.CORS_ORIGIN = cors_origin
        self.SMTP_SERVER = smtp_server
        self.SMTP_PORT = smtp_port
        self.SMTP_TIMEOUT = smtp_timeout
        self.UPLOAD_FOLDER = upload_folder
        self.PORT = port
        self.LOG_LEVEL = log_level
        self.DEBUG = debug

    @classmethod
    def from_env(cls):
        load_dotenv()

        timeout = os.getenv("SMTP_TIMEOUT")
        config = cls(
            database_url=os.getenv("DATABASE_URL"),
            email_user=os.getenv("EMAIL_USER"),
            email_pass=os.getenv("EMAIL_PASS"),
            owner_email=os.getenv("OWNER_EMAIL"),
            cors_origin=os.getenv("CORS_ORIGIN", "https://hr-project-front-end.vercel.app"),
            smtp_server=os.getenv("SMTP_SERVER", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_timeout=float(timeout) if timeout else None,
            upload_folder=os.getenv("UPLOAD_FOLDER", "uploads"),
            port=int(os.getenv("PORT", "3037")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            debug=os.getenv("FLASK_DEBUG", "False").lower() == "true",
        )
        config.validate()
        return config

    def validate(self):
        values = {
            "DATABASE_URL": self.SQLALCHEMY_DATABASE_URI,
            "EMAIL_USER": self.EMAIL_USER,
            "EMAIL_PASS": self.EMAIL_PASS,
        }
        missing_vars = [var for var in REQUIRED_VARS if not values[var]]
        if missing_vars:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing_vars)}")
        return self
