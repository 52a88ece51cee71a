"""
Basic tests for the subject, proxy and client.
"""

import pytest
from unittest.mock import MagicMock

from proxy_pattern import (
    Subject,
    RealSubject,
    Proxy,
    Client,
    InvalidSubjectError,
)


@pytest.fixture
def real_subject():
    """Create a real subject for testing"""
    return RealSubject()


@pytest.fixture
def proxy(real_subject):
    """Create a proxy wrapping the real subject"""
    return Proxy(real_subject)


class DenyingProxy(Proxy):
    """Proxy whose access check fails"""

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return False


class TestRealSubject:
    """Test the direct implementation"""

    def test_request_output(self, real_subject, capsys):
        """Test that a request writes exactly one line"""
        real_subject.request()

        out = capsys.readouterr().out
        assert out.splitlines() == ["RealSubject: Handling Request."]

    def test_is_subject(self, real_subject):
        """Test that the real subject implements the interface"""
        assert isinstance(real_subject, Subject)

    def test_subject_is_abstract(self):
        """Test that the interface cannot be instantiated"""
        with pytest.raises(TypeError):
            Subject()


class TestProxy:
    """Test the proxying implementation"""

    def test_request_output_order(self, proxy, capsys):
        """Test guard, delegated and logging lines appear in order"""
        proxy.request()

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Proxy: Checking access prior to firing a real request.",
            "RealSubject: Handling Request.",
            "Proxy: Logging the time of request.",
        ]

    def test_check_access_returns_true(self, proxy, capsys):
        """Test the access check stub always passes"""
        assert proxy.check_access() is True
        assert capsys.readouterr().out == "Proxy: Checking access prior to firing a real request.\n"

    def test_log_access_output(self, proxy, capsys):
        """Test the access log stub writes one line"""
        assert proxy.log_access() is None
        assert capsys.readouterr().out == "Proxy: Logging the time of request.\n"

    def test_holds_same_subject(self, real_subject, proxy):
        """Test the proxy keeps the instance it was built with"""
        assert proxy.real_subject is real_subject
        proxy.request()
        assert proxy.real_subject is real_subject

    def test_delegates_once_per_request(self):
        """Test each proxied request reaches the real subject exactly once"""
        inner = MagicMock(spec=Subject)
        proxy = Proxy(inner)

        proxy.request()
        proxy.request()

        assert inner.request.call_count == 2

    def test_denied_access_skips_delegation(self, real_subject, capsys):
        """Test nothing is delegated or logged when the check fails"""
        proxy = DenyingProxy(real_subject)
        proxy.request()

        out = capsys.readouterr().out
        assert out.splitlines() == ["Proxy: Checking access prior to firing a real request."]
        assert "RealSubject: Handling Request." not in out
        assert "Proxy: Logging the time of request." not in out

    def test_denied_access_never_calls_subject(self):
        """Test a failed check leaves the real subject untouched"""
        inner = MagicMock(spec=Subject)
        proxy = DenyingProxy(inner)

        proxy.request()

        inner.request.assert_not_called()

    def test_invalid_subject(self):
        """Test proxy creation with something that is not a Subject"""
        with pytest.raises(InvalidSubjectError) as exc_info:
            Proxy("not a subject")

        assert exc_info.value.details["subject_type"] == "str"

    def test_proxy_of_proxy(self, proxy, capsys):
        """Test a proxy can wrap another proxy"""
        outer = Proxy(proxy)
        outer.request()

        lines = capsys.readouterr().out.splitlines()
        assert lines.count("Proxy: Checking access prior to firing a real request.") == 2
        assert lines.count("RealSubject: Handling Request.") == 1
        assert lines[-1] == "Proxy: Logging the time of request."

    def test_debug_logging(self, proxy, caplog):
        """Test the proxy records its decisions at debug level"""
        with caplog.at_level("DEBUG", logger="proxy_pattern"):
            proxy.request()

        messages = [record.getMessage() for record in caplog.records]
        assert "Checked access" in messages
        assert "Access granted, delegating to RealSubject" in messages
        assert "Logged access" in messages


class TestClient:
    """Test the client code"""

    def test_client_with_real_subject(self, real_subject, capsys):
        """Test the client against the real subject"""
        Client().client_code(real_subject)
        assert capsys.readouterr().out == "RealSubject: Handling Request.\n"

    def test_client_with_proxy(self, proxy, capsys):
        """Test the same client code against the proxy"""
        Client().client_code(proxy)
        assert len(capsys.readouterr().out.splitlines()) == 3

    def test_client_uses_interface(self):
        """Test the client only calls request()"""
        subject = MagicMock(spec=Subject)
        Client().client_code(subject)
        subject.request.assert_called_once_with()
