"""Tests for the fetch_rates CLI."""

import json
from datetime import date

import pytest

from cnbrates.errors import DataNotFoundError, FetchError
from scripts.fetch_rates import main


class TestFetchRatesCli:
    def test_mock(self, capsys):
        main(["--mock"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["date"] == "2000-01-03"
        assert payload["sequenceNumber"] == 1
        assert [r["code"] for r in payload["rates"]] == ["AUD", "EUR", "GBP", "JPY", "USD"]

    def test_input_file(self, tmp_path, capsys, make_feed):
        feed_file = tmp_path / "daily.txt"
        feed_file.write_text(
            make_feed("USA|dollar|1|USD|25.347", "Australia|dollar|1|AUD|23.282", "bad row"),
            encoding="utf-8",
        )
        main(["--input", str(feed_file), "--indent", "2"])
        payload = json.loads(capsys.readouterr().out)
        assert [r["code"] for r in payload["rates"]] == ["AUD", "USD"]
        assert payload["rates"][0]["rate"] == pytest.approx(23.282)

    def test_unparseable_feed_exit_code(self, tmp_path):
        feed_file = tmp_path / "daily.txt"
        feed_file.write_text("not a feed\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(feed_file)])
        assert exc_info.value.code == 3

    def test_future_date_exit_code(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mock", "--date", "2999-01-01"])
        assert exc_info.value.code == 5

    def test_invalid_date_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mock", "--date", "15.01.2024"])
        assert exc_info.value.code == 2

    def test_non_utf8_input_file(self, tmp_path):
        feed_file = tmp_path / "daily.txt"
        feed_file.write_bytes(
            b"03 Jan 2000 #1\nCountry|Currency|Amount|Code|Rate\nCesk\xe1|koruna|1|CZK|1.0\n"
        )
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(feed_file)])
        assert exc_info.value.code == 2

    def test_missing_input_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize(
        "error, code",
        [(DataNotFoundError(date(2024, 1, 15)), 6), (FetchError("CNB API returned 503"), 4)],
    )
    def test_client_error_exit_codes(self, mocker, error, code):
        mocker.patch("cnbrates.client.CnbClient.fetch", side_effect=error)
        with pytest.raises(SystemExit) as exc_info:
            main(["--date", "2024-01-15"])
        assert exc_info.value.code == code

    def test_not_found_differs_from_usage_error(self, mocker):
        with pytest.raises(SystemExit) as bad_argument:
            main(["--mock", "--date", "nope"])

        mocker.patch(
            "cnbrates.client.CnbClient.fetch", side_effect=DataNotFoundError(date(2024, 1, 15))
        )
        with pytest.raises(SystemExit) as not_found:
            main(["--date", "2024-01-15"])

        assert bad_argument.value.code != not_found.value.code
