import pytest

from patternkit.email_builder import Email, EmailBuilder, demo, send_mail


def _fill(eb):
    eb.from_("alice@example.com").to("bob@example.com").subject("First email").body(
        "Hello, how are you?"
    )


def test_send_mail_returns_built_email():
    email = send_mail(_fill)
    assert email == Email(
        sender="alice@example.com",
        recipient="bob@example.com",
        subject="First email",
        body="Hello, how are you?",
    )


def test_send_mail_prints_message(capsys):
    send_mail(_fill)
    out = capsys.readouterr().out
    assert "`bob@example.com`" in out
    assert "`alice@example.com`" in out
    assert "`First email`" in out


def test_invalid_sender_raises():
    with pytest.raises(ValueError, match="@"):
        send_mail(lambda eb: eb.from_("abcexample.com").to("bob@example.com"))


def test_invalid_recipient_raises():
    with pytest.raises(ValueError, match="@"):
        send_mail(lambda eb: eb.from_("alice@example.com").to("nobody"))


def test_invalid_email_is_not_sent(capsys):
    with pytest.raises(ValueError):
        send_mail(lambda eb: eb.from_("bad"))
    assert "Email sent" not in capsys.readouterr().out


def test_builder_is_fluent():
    builder = EmailBuilder()
    assert builder.subject("s").body("b") is builder
    assert builder.email.subject == "s"
    assert builder.email.body == "b"


def test_demo_reports_error(capsys):
    demo()
    out = capsys.readouterr().out
    assert "Email sent to" in out
    assert "Error sending email: From should contain an @" in out