"""
Shared pytest fixtures: an app on in-memory SQLite with a recording mailer.
"""
import io

import pytest

from app import create_app
from config import Config


class RecordingMailer:
    """Stands in for the SMTP relay and keeps every message it was asked to send."""

    def __init__(self, fail_on=None):
        self.sent = []
        self.fail_on = fail_on

    def send(self, to, subject, html, attachments=()):
        if self.fail_on is not None and len(self.sent) == self.fail_on:
            raise OSError("Mail relay unavailable")
        self.sent.append({
            "to": to,
            "subject": subject,
            "html": html,
            "attachments": list(attachments),
        })


@pytest.fixture
def config(tmp_path):
    return Config(
        database_url="sqlite://",
        email_user="owner@example.com",
        email_pass="app-token",
        upload_folder=str(tmp_path / "uploads"),
    )


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def app(config, mailer):
    app = create_app(config, mailer=mailer)
    app.config["TESTING"] = True
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def contact_payload():
    return {
        "name": "Ama Mensah",
        "email": "ama@example.com",
        "mobile": "+233241234567",
        "service": "Recruitment",
        "message": "We need help hiring two accountants.",
    }


@pytest.fixture
def career_form():
    def build(content=b"%PDF-1.4 resume", filename="cv.pdf", content_type="application/pdf", **fields):
        data = {
            "name": "Kofi Boateng",
            "phone": "+233201112233",
            "email": "kofi@example.com",
            "position": "Payroll Officer",
            "message": "Available immediately.",
        }
        data.update(fields)
        data = {key: value for key, value in data.items() if value is not None}
        if content is not None:
            data["resume"] = (io.BytesIO(content), filename, content_type)
        return data
    return build
