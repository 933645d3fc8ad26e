"""Tests for config decoding."""

import json

import pytest

from mou_deploy.config.parser import decode, parse_config
from mou_deploy.errors import ParseError


class TestDecode:
    """Tests for the ordered decoder attempts."""

    def test_json_wins_for_json_input(self) -> None:
        result = decode('{"app": "myApp"}')

        assert result.ok
        assert result.format == "json"
        assert result.value == {"app": "myApp"}

    def test_falls_back_to_yaml(self) -> None:
        result = decode("app: myApp\nchart: repo/chart")

        assert result.ok
        assert result.format == "yaml"
        assert result.value == {"app": "myApp", "chart": "repo/chart"}

    def test_reports_failure_when_no_decoder_accepts(self) -> None:
        result = decode("@$%^failconfig")

        assert not result.ok
        assert result.error is not None

    def test_stops_at_first_success(self) -> None:
        calls: list[str] = []

        def first(raw: str) -> dict[str, str]:
            calls.append("first")
            return {"decoded": "first"}

        def second(raw: str) -> dict[str, str]:
            calls.append("second")
            return {"decoded": "second"}

        result = decode("anything", (("first", first), ("second", second)))

        assert result.value == {"decoded": "first"}
        assert calls == ["first"]


class TestParseConfig:
    """Tests for parse_config."""

    def test_parses_json(self) -> None:
        config = {"app": "myApp", "values": {"image": {"tag": "1.0"}}}

        assert parse_config(json.dumps(config)) == config

    def test_parses_yaml(self) -> None:
        assert parse_config('token: myToken\nchannel: "#mychannel"') == {
            "token": "myToken",
            "channel": "#mychannel",
        }

    def test_empty_mapping_is_accepted(self) -> None:
        assert parse_config("{}") == {}

    def test_undecodable_content_is_echoed(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_config("@$%^failconfig")

        assert excinfo.value.message == (
            "Unable to parse config. Found content: @$%^failconfig"
        )
        assert excinfo.value.content == "@$%^failconfig"

    def test_empty_input_is_not_an_object(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_config("")

        assert excinfo.value.message == 'Unable to load config "None" into an object.'

    @pytest.mark.parametrize("raw", ["just a string", "[1, 2, 3]", "42"])
    def test_non_mapping_is_rejected(self, raw: str) -> None:
        with pytest.raises(ParseError, match="into an object"):
            parse_config(raw)
