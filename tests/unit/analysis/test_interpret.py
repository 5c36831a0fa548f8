"""Response interpretation tests: brace scanning and tolerant batch parsing."""

from __future__ import annotations

import json

import pytest

from polymarket_analyst.analysis.interpret import (
    extract_json_object,
    interpret_batch,
    interpret_single,
)
from polymarket_analyst.analysis.records import EventRecord

FINDING = {
    "eventId": "16085",
    "eventTitle": "Largest company end of year?",
    "slug": "largest-company-end-of-year",
    "marketQuestion": "Will Apple be the largest company?",
    "currentOdds": "Yes: 75%, No: 25%",
    "fairOdds": "Yes: 30%, No: 70%",
    "discrepancy": "45%",
    "reasoning": "Apple trails by a wide margin with weeks left.",
    "confidence": "High",
    "recommendation": "BUY NO",
}


class TestExtractJsonObject:
    def test_returns_none_without_braces(self) -> None:
        assert extract_json_object("no structure here") is None

    def test_returns_none_when_never_closed(self) -> None:
        assert extract_json_object('prefix {"a": {"b": 1}') is None

    def test_finds_object_wrapped_in_prose(self) -> None:
        text = 'Sure! {"a": 1} Hope that helps.'
        assert extract_json_object(text) == '{"a": 1}'

    def test_tracks_nesting(self) -> None:
        text = 'x {"a": {"b": {"c": []}}, "d": 2} y'
        assert extract_json_object(text) == '{"a": {"b": {"c": []}}, "d": 2}'

    def test_ignores_braces_inside_strings(self) -> None:
        text = '{"summary": "odd } text { here", "n": "\\"}"} trailing }'
        assert extract_json_object(text) == '{"summary": "odd } text { here", "n": "\\"}"}'

    def test_stops_at_first_balanced_object(self) -> None:
        assert extract_json_object('{"a": 1} and {"b": 2}') == '{"a": 1}'


class TestInterpretBatch:
    def test_fenced_json_with_prose(self) -> None:
        raw = 'Here is the result:\n```json\n{"mispriced":[],"summary":"none found"}\n```'
        result = interpret_batch(raw)

        assert result.mispriced == []
        assert result.summary == "none found"

    def test_no_braces_keeps_entire_text_as_summary(self) -> None:
        raw = "I could not evaluate these markets today."
        result = interpret_batch(raw)

        assert result.mispriced == []
        assert result.summary == raw

    def test_invalid_json_falls_back_to_raw_text(self) -> None:
        raw = "{mispriced: [oops]}"
        result = interpret_batch(raw)

        assert result.mispriced == []
        assert result.summary == raw

    def test_unclosed_object_falls_back_to_raw_text(self) -> None:
        raw = '{"mispriced": [], "summary": "cut off'
        assert interpret_batch(raw).summary == raw

    def test_findings_are_parsed_in_engine_order(self) -> None:
        second = {**FINDING, "eventId": "2", "confidence": "medium"}
        raw = json.dumps({"mispriced": [FINDING, second], "summary": "Two found."})
        result = interpret_batch(raw)

        assert [f.event_id for f in result.mispriced] == ["16085", "2"]
        first = result.mispriced[0]
        assert first.market_question == "Will Apple be the largest company?"
        assert first.current_odds == "Yes: 75%, No: 25%"
        assert first.fair_odds == "Yes: 30%, No: 70%"
        assert first.confidence == "High"
        assert first.recommendation == "BUY NO"
        assert result.mispriced[1].confidence == "Medium"
        assert result.summary == "Two found."

    def test_missing_mispriced_defaults_to_empty(self) -> None:
        result = interpret_batch('{"summary": "quiet day"}')
        assert result.mispriced == []
        assert result.summary == "quiet day"

    def test_numeric_fields_are_coerced_to_strings(self) -> None:
        raw = json.dumps({"mispriced": [{**FINDING, "eventId": 16085, "discrepancy": 45}]})
        finding = interpret_batch(raw).mispriced[0]

        assert finding.event_id == "16085"
        assert finding.discrepancy == "45"

    def test_findings_are_not_revalidated_numerically(self) -> None:
        low_gap = {**FINDING, "discrepancy": "5%", "confidence": "Low"}
        result = interpret_batch(json.dumps({"mispriced": [low_gap], "summary": ""}))

        assert len(result.mispriced) == 1
        assert result.mispriced[0].discrepancy == "5%"

    def test_malformed_finding_is_dropped_and_valid_ones_kept(self) -> None:
        second = {**FINDING, "eventId": "2"}
        payload = {
            "mispriced": [
                FINDING,
                {**FINDING, "eventId": "bad", "confidence": "Very High"},
                "not an object",
                {**FINDING, "eventId": "template", "confidence": "High/Medium/Low"},
                second,
            ],
            "summary": "two",
        }
        result = interpret_batch(json.dumps(payload))

        assert [f.event_id for f in result.mispriced] == ["16085", "2"]
        assert result.summary == "two"

    def test_all_findings_malformed_keeps_summary(self) -> None:
        payload = {"mispriced": [{**FINDING, "confidence": "Certain"}], "summary": "s"}
        result = interpret_batch(json.dumps(payload))

        assert result.mispriced == []
        assert result.summary == "s"

    @pytest.mark.parametrize(
        "payload",
        [
            {"mispriced": "none", "summary": "x"},
            {"mispriced": {"eventId": "1"}, "summary": "x"},
            {"mispriced": [], "summary": {"text": "nested"}},
        ],
    )
    def test_wrong_shape_falls_back_to_raw_text(self, payload: dict[str, object]) -> None:
        raw = f"Result: {json.dumps(payload)}"
        result = interpret_batch(raw)

        assert result.mispriced == []
        assert result.summary == raw

    def test_serializes_with_camel_case_keys(self) -> None:
        result = interpret_batch(json.dumps({"mispriced": [FINDING], "summary": "s"}))
        dumped = result.model_dump(by_alias=True)

        assert dumped["mispriced"][0] == FINDING
        assert dumped["summary"] == "s"


def test_interpret_single_passes_text_through_and_echoes_markets() -> None:
    event = EventRecord.model_validate(
        {
            "title": "Fed decision",
            "markets": [
                {"question": "Cut?", "outcomes": '["Yes","No"]', "outcomePrices": '["0.2","0.8"]'}
            ],
        }
    )
    result = interpret_single("Verdict: FAIR", event, model="m", cost_usd=0.01)

    assert result.analysis_text == "Verdict: FAIR"
    assert result.event_label == "Fed decision"
    assert result.model == "m"
    assert result.cost_usd == 0.01
    assert result.model_dump(by_alias=True)["marketsEcho"] == [
        {"question": "Cut?", "outcomes": ["Yes", "No"], "outcomePrices": ["0.2", "0.8"]}
    ]
