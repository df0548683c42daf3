import pytest

import config
import mailer


class FakeSMTP:
    instances = []

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.logins = []
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def login(self, user, password):
        self.logins.append((user, password))

    def send_message(self, msg):
        self.messages.append(msg)


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(mailer.smtplib, "SMTP_SSL", FakeSMTP)
    return FakeSMTP


def test_is_configured(monkeypatch):
    monkeypatch.setattr(config, "EMAIL_USER", "events@example.com")
    monkeypatch.setattr(config, "EMAIL_PASS", "secret")
    assert mailer.is_configured() is True

    monkeypatch.setattr(config, "EMAIL_USER", "")
    assert mailer.is_configured() is False


def test_send_html_mail(smtp):
    mailer.send_html_mail("ada@example.com", "Hello", "<p>Hi</p>")

    server = smtp.instances[0]
    assert (server.host, server.port) == (config.SMTP_HOST, config.SMTP_PORT)
    assert server.logins == [(config.EMAIL_USER, config.EMAIL_PASS)]

    msg = server.messages[0]
    assert msg["To"] == "ada@example.com"
    assert msg["From"] == config.EMAIL_USER
    assert msg["Subject"] == "Hello"
    assert msg.get_payload()[0].get_content_type() == "text/html"


def test_send_confirmation_email_swallows_errors(monkeypatch, caplog):
    def _fail(*args, **kwargs):
        raise OSError("connection refused")

    monkeypatch.setattr(mailer, "send_html_mail", _fail)

    mailer.send_confirmation_email("ada@example.com", "<p>Hi</p>")
    assert "Email send failed" in caplog.text
