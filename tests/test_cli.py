"""End-to-end tests for the `ipfetch` command (ipfetch.cli.main)."""

import httpx
import pytest
from typer.testing import CliRunner

from ipfetch import __version__
from ipfetch.adapters.http_client import HttpBodyFetcher
from ipfetch.cli import main as cli_main

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch):
    """Route the CLI's requests to `handler`; returns the list of requests seen."""

    def _serve(handler):
        seen = []

        def recording(request):
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(
            cli_main,
            "_build_fetcher",
            lambda settings: HttpBodyFetcher(settings, transport=httpx.MockTransport(recording)),
        )
        return seen

    return _serve


def _json(payload):
    return lambda request: httpx.Response(200, json=payload)


class TestSuccess:
    """Runs that exit 0."""

    def test_default_flags_print_ip(self, serve):
        seen = serve(_json({"IP": "127.0.0.1"}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0
        assert result.stdout == "127.0.0.1\n"
        assert seen[0].url.scheme == "https"
        assert seen[0].url.host == "myip.ruru910.com"
        assert seen[0].headers["User-Agent"] == "rust-agent"

    def test_url_and_field_flags(self, serve):
        seen = serve(_json({"IP": "1.2.3.4", "Country": "TW"}))

        result = runner.invoke(cli_main.app, ["-u", "http://localhost:8080/ip", "-f", "Country"])

        assert result.exit_code == 0
        assert result.stdout == "TW\n"
        assert str(seen[0].url) == "http://localhost:8080/ip"

    def test_long_flags(self, serve):
        serve(_json({"ASN": 3462}))

        result = runner.invoke(cli_main.app, ["--url", "http://localhost/", "--field", "ASN"])

        assert result.exit_code == 0
        assert result.stdout == "3462\n"

    def test_full_flag(self, serve):
        serve(_json({"IP": "127.0.0.1", "Country": "TW"}))

        result = runner.invoke(cli_main.app, ["--full"])

        assert result.exit_code == 0
        assert result.stdout == '{\n  "IP": "127.0.0.1",\n  "Country": "TW"\n}\n'

    def test_absent_field_prints_full_document(self, serve):
        serve(_json({"Country": "TW"}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0
        assert result.stdout == '{\n  "Country": "TW"\n}\n'

    def test_html_body(self, serve):
        serve(lambda request: httpx.Response(200, html="<html><body>Hello</body></html>"))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0
        assert result.stdout == "Hello\n"

    def test_html_without_body(self, serve):
        serve(lambda request: httpx.Response(200, html="<html><head></head></html>"))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0
        assert result.stdout == "No body content found\n"

    def test_version(self):
        result = runner.invoke(cli_main.app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout == f"ipfetch {__version__}\n"


class TestEnvironment:
    """Settings read from IPFETCH_* variables."""

    def test_env_defaults_apply(self, serve, monkeypatch):
        monkeypatch.setenv("IPFETCH_DEFAULT_URL", "http://internal.example/whoami")
        monkeypatch.setenv("IPFETCH_DEFAULT_FIELD", "Country")
        monkeypatch.setenv("IPFETCH_USER_AGENT", "probe/1.0")
        seen = serve(_json({"IP": "1.2.3.4", "Country": "JP"}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 0
        assert result.stdout == "JP\n"
        assert str(seen[0].url) == "http://internal.example/whoami"
        assert seen[0].headers["User-Agent"] == "probe/1.0"

    def test_flags_win_over_env(self, serve, monkeypatch):
        monkeypatch.setenv("IPFETCH_DEFAULT_FIELD", "Country")
        serve(_json({"IP": "1.2.3.4", "Country": "JP"}))

        result = runner.invoke(cli_main.app, ["-f", "IP"])

        assert result.stdout == "1.2.3.4\n"

    def test_invalid_env_exits_1(self, monkeypatch):
        monkeypatch.setenv("IPFETCH_HTTP_TIMEOUT_SECONDS", "-1")

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1


class TestFailures:
    """Runs that exit 1."""

    def test_http_404(self, serve):
        serve(lambda request: httpx.Response(404, json={"IP": "127.0.0.1"}))

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "http error: 404 Not Found" in result.stdout
        assert "127.0.0.1" not in result.stdout

    def test_transport_error(self, serve):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        serve(handler)

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1
        assert "http error" not in result.stdout

    def test_decode_error(self, serve):
        serve(
            lambda request: httpx.Response(
                200,
                content=b"\xff\xfe\xfa",
                headers={"Content-Type": "application/json; charset=utf-8"},
            )
        )

        result = runner.invoke(cli_main.app, [])

        assert result.exit_code == 1

    def test_empty_url_is_usage_error(self, serve):
        seen = serve(_json({"IP": "127.0.0.1"}))

        result = runner.invoke(cli_main.app, ["-u", ""])

        assert result.exit_code == 2
        assert seen == []
        assert "127.0.0.1" not in result.stdout

    def test_unknown_option_is_usage_error(self):
        result = runner.invoke(cli_main.app, ["--nope"])

        assert result.exit_code == 2
