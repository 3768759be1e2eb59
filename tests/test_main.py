"""
Command Line Tests
"""

import json
import sys

import httpx
import respx

from fxratesapi.main import build_parser, build_request, main

HOST = "api.fxratesapi.com"


class TestBuildRequest:
    """Option parsing into ExchangeRates."""

    def test_options_applied(self):
        args = build_parser().parse_args([
            "url", "--from", "2020-01-01", "--to", "2020-01-31",
            "--base", "usd", "--symbols", "eur, gbp", "--places", "3", "--api-key", "",
        ])

        request = build_request(args)

        assert request.state.symbols == ("EUR", "GBP")
        assert request.state.places == 3
        assert request.url() == (
            f"https://{HOST}/timeseries?start_date=2020-01-01&end_date=2020-01-31"
            "&base=USD&currencies=EUR,GBP&places=3&p=python"
        )

    def test_avg_decimal_places(self):
        args = build_parser().parse_args(["avg", "--from", "2020-01-01", "-d", "2"])

        assert args.decimal_places == 2


class TestMain:
    """End-to-end runs of main()."""

    def test_url(self, capsys):
        code = main(["url", "--at", "2022-11-12", "--symbols", "EUR"])

        assert code == 0
        assert capsys.readouterr().out.strip() == (
            f"https://{HOST}/historical?date=2022-11-12&currencies=EUR&p=python"
        )

    def test_validation_error(self, capsys):
        code = main(["url", "--from", "2020-02-01", "--to", "2020-01-01"])

        assert code == 1
        assert "start_date" in capsys.readouterr().err

    def test_invalid_currency(self, capsys):
        code = main(["url", "--base", "xyz"])

        assert code == 1
        assert "XYZ is not a valid currency" in capsys.readouterr().err

    def test_fetch_single_rate(self, capsys):
        with respx.mock:
            respx.get(host=HOST, path="/latest").mock(
                return_value=httpx.Response(200, json={"rates": {"EUR": 0.91}})
            )

            code = main(["fetch", "--symbols", "EUR"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "0.91"

    def test_avg_prints_json(self, capsys):
        body = {"rates": {"2020-01-01": {"EUR": 0.9, "GBP": 0.8}, "2020-01-02": {"EUR": 0.92}}}
        with respx.mock:
            respx.get(host=HOST, path="/timeseries").mock(return_value=httpx.Response(200, json=body))

            code = main(["avg", "--from", "2020-01-01", "--to", "2020-01-02", "-d", "2"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"EUR": "0.91", "GBP": "0.80"}


class TestLogging:
    """Log output stays off stdout, which carries the result."""

    def test_handler_writes_to_stderr(self, monkeypatch, capsys):
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))

        main(["url"])

        handlers = calls[0]["handlers"]
        assert [h.stream for h in handlers] == [sys.stderr]
        assert capsys.readouterr().out.strip() == f"https://{HOST}/latest?p=python"
