"""Tests for URL assembly, envelope decoding and response resolution."""

from typing import Any

import pytest

from tcgdex_api.endpoints.base import (
    build_url,
    decode_envelope,
    is_empty,
    normalize_query,
    resolve_envelope,
    targets_single,
)
from tcgdex_api.models import (
    ApiError,
    ApiErrorPayload,
    Card,
    CardBrief,
    DataEnvelope,
    EmptyResultError,
    ErrorEnvelope,
    Set,
    TransportError,
)
from tcgdex_api.query import ByFilter, ById, Order, Query

BASE = "https://api.tcgdex.net/v2/"


class TestBuildUrl:
    """Tests for request URL assembly."""

    def test_no_query(self) -> None:
        """Without a query the URL ends at the resource."""
        assert build_url(BASE, "en", "cards") == "https://api.tcgdex.net/v2/en/cards"

    def test_empty_query(self) -> None:
        """An empty Query behaves like no query."""
        assert build_url(BASE, "en", "cards", Query()) == "https://api.tcgdex.net/v2/en/cards"

    def test_id_is_path_segment(self) -> None:
        """An id query is appended after a slash."""
        url = build_url(BASE, "fr", "sets", Query().with_id("swsh3"))
        assert url == "https://api.tcgdex.net/v2/fr/sets/swsh3"

    def test_filter_is_query_string(self) -> None:
        """Filtering, pagination and sorting go after a question mark."""
        query = Query().with_filtering(["name=furret"]).with_sorting("localId", Order.DESC)
        url = build_url(BASE, "en", "cards", query)
        assert url == "https://api.tcgdex.net/v2/en/cards?name=furret&sort:field=localId&sort:order=DESC"

    def test_base_url_without_trailing_slash(self) -> None:
        """A base URL without trailing slash gives the same URL."""
        assert build_url("https://api.tcgdex.net/v2", "en", "hp") == "https://api.tcgdex.net/v2/en/hp"

    def test_lang_is_normalized(self) -> None:
        """Language codes are lowercased in the URL."""
        assert build_url(BASE, "DE", "types") == "https://api.tcgdex.net/v2/de/types"

    def test_typed_id_with_separator_chars_stays_in_path(self) -> None:
        """A ById is always a path segment, quoted."""
        url = build_url(BASE, "en", "cards", ById("a=b&c"))
        assert url == "https://api.tcgdex.net/v2/en/cards/a%3Db%26c"

    def test_raw_string_id(self) -> None:
        """A raw string without "&" or "=" is treated as an id."""
        assert build_url(BASE, "en", "cards", "swsh3-136") == "https://api.tcgdex.net/v2/en/cards/swsh3-136"

    def test_raw_string_filter(self) -> None:
        """A raw string with "=" is treated as a query string."""
        assert build_url(BASE, "en", "cards", "hp=100") == "https://api.tcgdex.net/v2/en/cards?hp=100"

    def test_unknown_lang_rejected(self) -> None:
        """An unsupported language raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported language"):
            build_url(BASE, "xx", "cards")


class TestQueryClassification:
    """Tests for query normalization."""

    def test_normalize_reduces_empty_forms_to_none(self) -> None:
        """Every empty query form becomes None."""
        assert normalize_query(None) is None
        assert normalize_query("") is None
        assert normalize_query(Query()) is None
        assert normalize_query(ByFilter()) is None

    def test_normalize_unwraps_query(self) -> None:
        """A Query is reduced to its variant."""
        assert normalize_query(Query().with_id("swsh3")) == ById("swsh3")

    def test_targets_single(self) -> None:
        """Only id queries address a single record."""
        assert targets_single(Query().with_id("swsh3")) is True
        assert targets_single("swsh3") is True
        assert targets_single(None) is False
        assert targets_single(Query().with_pagination(1, 10)) is False
        assert targets_single("name=furret") is False


class TestDecodeEnvelope:
    """Tests for shape-based response decoding."""

    def test_error_shape_decodes_to_error(self, not_found_payload: dict[str, Any]) -> None:
        """A problem-detail body becomes an ErrorEnvelope."""
        envelope = decode_envelope(not_found_payload, Card)

        assert isinstance(envelope, ErrorEnvelope)
        assert envelope.error.problem_type == "https://tcgdex.dev/errors/not-found"
        assert envelope.error.status == 404

    def test_record_decodes_to_data(self, furret_payload: dict[str, Any]) -> None:
        """A card body becomes a DataEnvelope holding a Card."""
        envelope = decode_envelope(furret_payload, Card)

        assert isinstance(envelope, DataEnvelope)
        assert isinstance(envelope.data, Card)
        assert envelope.data.name == "Furret"

    def test_list_decodes_to_data(self, card_briefs_payload: list[dict[str, Any]]) -> None:
        """A JSON array decodes into a data envelope."""
        envelope = decode_envelope(card_briefs_payload, list[CardBrief])

        assert isinstance(envelope, DataEnvelope)
        assert [card.id for card in envelope.data] == ["ex7-22", "ex12-33"]

    def test_mismatched_shape_is_transport_error(self) -> None:
        """A body matching neither shape raises TransportError."""
        with pytest.raises(TransportError, match="Unexpected response shape"):
            decode_envelope({"message": "boom"}, list[CardBrief], url="https://x/en/cards")

    def test_legacy_error_shape_is_not_an_error_envelope(self) -> None:
        """The old {"error": ...} wrapper is not recognized as an error."""
        envelope = decode_envelope({"error": {"message": "not found"}}, Card)
        assert isinstance(envelope, DataEnvelope)


class TestResolveEnvelope:
    """Tests for turning envelopes into results."""

    def test_error_round_trips_payload(self, not_found_payload: dict[str, Any]) -> None:
        """The raised ApiError carries the payload exactly as received."""
        payload = ApiErrorPayload.model_validate(not_found_payload)

        with pytest.raises(ApiError) as exc_info:
            resolve_envelope(ErrorEnvelope(payload))

        assert exc_info.value.payload == payload
        assert exc_info.value.payload.model_dump(by_alias=True, exclude_defaults=True) == not_found_payload

    def test_empty_record_is_empty_result(self) -> None:
        """A record without id and name raises EmptyResultError."""
        with pytest.raises(EmptyResultError):
            resolve_envelope(DataEnvelope(Set()))

    def test_empty_list_is_empty_result(self) -> None:
        """An empty list resolves to EmptyResultError."""
        with pytest.raises(EmptyResultError):
            resolve_envelope(DataEnvelope([]))

    def test_empty_check_can_be_disabled(self) -> None:
        """With check_empty off an empty payload is returned."""
        assert resolve_envelope(DataEnvelope([]), check_empty=False) == []

    def test_populated_record_is_returned(self, darkness_ablaze_payload: dict[str, Any]) -> None:
        """A populated record is returned as is."""
        record = Set.model_validate(darkness_ablaze_payload)
        assert resolve_envelope(DataEnvelope(record)) is record

    def test_url_attached_to_errors(self) -> None:
        """Raised errors carry the request URL."""
        with pytest.raises(EmptyResultError) as exc_info:
            resolve_envelope(DataEnvelope(Card()), url="https://x/en/cards/nope")
        assert exc_info.value.url == "https://x/en/cards/nope"


class TestIsEmpty:
    """Tests for payload emptiness."""

    def test_record_with_id_only_is_not_empty(self) -> None:
        """An id alone makes a record non-empty."""
        assert is_empty(Card(id="swsh3-136")) is False

    def test_record_with_name_only_is_not_empty(self) -> None:
        """A name alone makes a record non-empty."""
        assert is_empty(Card(name="Furret")) is False

    def test_primitives_are_never_empty(self) -> None:
        """Strings and numbers are never empty."""
        assert is_empty(0) is False
        assert is_empty("") is False
