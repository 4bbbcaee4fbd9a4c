"""
Unit Tests for the lookup_rate CLI and console formatting.
"""

import json

import pytest

from fair_repair.scripts import lookup_rate
from fair_repair.services.labor_rate_service import resolve_labor_rate
from fair_repair.utils.rate_logger import configure_logging, format_rate_resolution


@pytest.fixture(autouse=True)
def quiet_logging():
    """main() reconfigures structlog; restore the quiet test config."""
    yield
    configure_logging("WARNING")


class TestFormatRateResolution:
    """Tests for the banner output."""

    def test_metro_banner(self):
        text = format_rate_resolution(resolve_labor_rate("10001"))
        assert "LABOR RATE: 10001" in text
        assert "new york metro area" in text
        assert "$140.00/hr" in text
        assert "(0.9 mi)" in text

    def test_national_banner(self):
        text = format_rate_resolution(resolve_labor_rate(None))
        assert "LABOR RATE: (none)" in text
        assert "State        : unknown" in text
        assert "n/a (n/a)" in text


class TestLookupRateMain:
    """Tests for lookup_rate.main."""

    def test_json_output(self, capsys):
        assert lookup_rate.main(["59999", "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["state"] == "MT"
        assert output["sourceType"] == "state_average"
        assert output["dataSource"].startswith("fair_repair_rates_")

    def test_banner_output_for_several_zips(self, capsys):
        assert lookup_rate.main(["10001", "00000"]) == 0
        out = capsys.readouterr().out
        assert "new york metro area" in out
        assert "National Average" in out

    def test_quote_json(self, capsys):
        code = lookup_rate.main(
            ["10001", "--json", "--price", "420", "610", "--labor", "180", "260"]
        )
        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["price"] == {"low": 408.0, "high": 593.0}
        assert output["labor"] == {"low": 175.0, "high": 253.0}
        assert output["laborRate"]["dataSource"].startswith("fair_repair_rates_")

    def test_quote_and_lookup_report_same_data_source(self, capsys):
        lookup_rate.main(["60601", "--json"])
        lookup_output = json.loads(capsys.readouterr().out)
        lookup_rate.main(["60601", "--json", "--price", "420", "610"])
        quote_output = json.loads(capsys.readouterr().out)
        assert quote_output["laborRate"] == lookup_output

    def test_invalid_price_exits_with_error_dict(self, capsys):
        assert lookup_rate.main(["10001", "--json", "--price", "610", "420"]) == 2
        output = json.loads(capsys.readouterr().out)
        assert output["code"] == "INVALID_PRICE_RANGE"

    def test_labor_requires_price(self):
        with pytest.raises(SystemExit):
            lookup_rate.main(["10001", "--labor", "1", "2"])
