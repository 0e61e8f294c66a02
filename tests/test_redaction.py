from signalwire_skill.redaction import Redactor


def test_redacts_contact_details_and_credentials():
    redactor = Redactor()
    text = redactor.redact(
        "call me at 555-123-4567 or mail a@example.com; "
        "SWML_BASIC_AUTH_PASSWORD=hunter2 and api_token: 'PT123abc'"
    )
    assert "555-123-4567" not in text
    assert "a@example.com" not in text
    assert "hunter2" not in text
    assert "PT123abc" not in text
    assert "SWML_BASIC_AUTH_PASSWORD=[REDACTED]" in text
    assert "api_token: [REDACTED]" in text


def test_leaves_code_alone():
    redactor = Redactor()
    code = "class SupportAgent(AgentBase):\n    port = 3000\n"
    assert redactor.redact(code) == code


def test_disabled_redactor_is_identity():
    text = "a@example.com"
    assert Redactor(enabled=False).redact(text) == text
