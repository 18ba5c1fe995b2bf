from datetime import datetime

from sqlalchemy.orm import validates

from db import db


class MissingFieldError(ValueError):
    def __init__(self, field):
        super().__init__(f"{field} is required")
        self.field = field


class SubmissionMixin:
    """Append-only record: one insert per submission, never updated."""

    REQUIRED_FIELDS = ()

    @classmethod
    def create(cls, **fields):
        try:
            record = cls(**fields)
            db.session.add(record)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return record

    def check_required(self, key, value):
        if value is None or value == "":
            raise MissingFieldError(key)
        return value


# Contact form submissions
class ContactInquiry(SubmissionMixin, db.Model):
    __tablename__ = 'hr_contact_data'

    REQUIRED_FIELDS = ("name", "email", "mobile", "service", "message")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), nullable=False)
    mobile = db.Column(db.String(50), nullable=False)
    service = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    @validates(*REQUIRED_FIELDS)
    def _validate_required(self, key, value):
        return self.check_required(key, value)

    def __init__(self, **fields):
        # Unset fields must still go through the validator
        for field in self.REQUIRED_FIELDS:
            fields.setdefault(field, None)
        super().__init__(**fields)


# Career applications; resume holds the generated upload filename
class CareerApplication(SubmissionMixin, db.Model):
    __tablename__ = 'career_applications'

    REQUIRED_FIELDS = ("name", "phone", "email", "position", "resume")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text)
    resume = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    @validates(*REQUIRED_FIELDS)
    def _validate_required(self, key, value):
        return self.check_required(key, value)

    def __init__(self, **fields):
        for field in self.REQUIRED_FIELDS:
            fields.setdefault(field, None)
        super().__init__(**fields)
