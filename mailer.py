import logging
import smtplib
from collections import namedtuple
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from flask import render_template_string

logger = logging.getLogger(__name__)

Attachment = namedtuple("Attachment", ["filename", "path"])

SIGNATURE = "<p>Best regards,<br>Team NAOH</p>"

CONTACT_CLIENT_TEMPLATE = (
    "<p>Hello {{ inquiry.name }}</p>"
    "<p>Thank you for contacting us</p>" + SIGNATURE
)

CONTACT_OWNER_TEMPLATE = (
    "<p>You have a new contact form submission:</p>"
    "<p><strong>Name:</strong> {{ inquiry.name }}</p>"
    "<p><strong>Email:</strong> {{ inquiry.email }}</p>"
    "<p><strong>Mobile:</strong> {{ inquiry.mobile }}</p>"
    "<p><strong>Service:</strong> {{ inquiry.service }}</p>"
    "<p><strong>Message:</strong> {{ inquiry.message }}</p>"
)

CAREER_APPLICANT_TEMPLATE = (
    "<p>Hello {{ application.name }},</p>"
    "<p>Thank you for applying for the {{ application.position }} position. "
    "We have received your application and will get back to you soon.</p>" + SIGNATURE
)

CAREER_OWNER_TEMPLATE = (
    "<p>You have a new career application:</p>"
    "<p><strong>Name:</strong> {{ application.name }}</p>"
    "<p><strong>Email:</strong> {{ application.email }}</p>"
    "<p><strong>Phone:</strong> {{ application.phone }}</p>"
    "<p><strong>Position:</strong> {{ application.position }}</p>"
    "<p><strong>Message:</strong> {{ application.message or '' }}</p>"
)


class Mailer:
    """SMTP relay client. A connection is opened for every message."""

    def __init__(self, host, port, username, password, timeout=None):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            host=config["SMTP_SERVER"],
            port=config["SMTP_PORT"],
            username=config["EMAIL_USER"],
            password=config["EMAIL_PASS"],
            timeout=config.get("SMTP_TIMEOUT"),
        )

    @property
    def sender(self):
        return self.username

    def build_message(self, to, subject, html, attachments=()):
        msg = MIMEMultipart()
        msg['From'] = self.sender
        msg['To'] = to
        msg['Subject'] = subject
        msg.attach(MIMEText(html, 'html'))

        for attachment in attachments:
            with open(attachment.path, 'rb') as f:
                part = MIMEApplication(f.read(), Name=attachment.filename)
            part.add_header("Content-Disposition", "attachment", filename=attachment.filename)
            msg.attach(part)
        return msg

    def send(self, to, subject, html, attachments=()):
        msg = self.build_message(to, subject, html, attachments)

        kwargs = {"timeout": self.timeout} if self.timeout else {}
        with smtplib.SMTP(self.host, self.port, **kwargs) as server:
            server.starttls()
            server.login(self.username, self.password)
            server.sendmail(self.sender, [to], msg.as_string())

        logger.info("Email sent to %s: %s", to, subject)


def send_contact_emails(mailer, inquiry, owner):
    mailer.send(
        to=inquiry.email,
        subject="Welcome to HR web",
        html=render_template_string(CONTACT_CLIENT_TEMPLATE, inquiry=inquiry),
    )
    mailer.send(
        to=owner,
        subject="New Contact Form Submission",
        html=render_template_string(CONTACT_OWNER_TEMPLATE, inquiry=inquiry),
    )


def send_career_emails(mailer, application, resume, owner):
    mailer.send(
        to=application.email,
        subject="Application Received",
        html=render_template_string(CAREER_APPLICANT_TEMPLATE, application=application),
    )
    mailer.send(
        to=owner,
        subject="New Career Application",
        html=render_template_string(CAREER_OWNER_TEMPLATE, application=application),
        attachments=[Attachment(filename=resume.original_filename, path=resume.path)],
    )
