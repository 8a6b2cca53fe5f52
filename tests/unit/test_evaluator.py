"""Unit tests for conditional request evaluation."""

import pytest

from etag_middleware.core.evaluator import evaluate_conditionals, parse_validators
from etag_middleware.models import ConditionalVerdict, ValidatorList

TAG = '"3610a686"'
WEAK_TAG = 'W/"3610a686"'


class TestParseValidators:
    """Tests for parse_validators function."""

    def test_absent(self):
        assert parse_validators(None) is None

    def test_undecodable_is_absent(self):
        assert parse_validators('"café"'.encode()) is None

    def test_bytes(self):
        assert parse_validators(b'"a", "b"') == ValidatorList(tokens=('"a"', '"b"'))

    def test_text(self):
        assert parse_validators(' "a" ') == ValidatorList(tokens=('"a"',))


class TestNoConditionals:
    """Requests without validator headers."""

    @pytest.mark.parametrize("method", ["GET", "HEAD", "POST", "PUT", "DELETE"])
    def test_proceeds(self, method):
        assert evaluate_conditionals(method, TAG) == ConditionalVerdict.proceed(TAG)


class TestIfMatch:
    """Step 1: If-Match."""

    def test_matching_strong_tag_proceeds(self):
        assert evaluate_conditionals("PUT", TAG, if_match=TAG) == ConditionalVerdict.proceed(TAG)

    def test_non_matching_tag_fails(self):
        verdict = evaluate_conditionals("GET", TAG, if_match='"deadbeef"')

        assert verdict == ConditionalVerdict.short_circuit(412, TAG)

    def test_wildcard_proceeds(self):
        assert evaluate_conditionals("PUT", TAG, if_match="*").is_short_circuit is False

    def test_wildcard_satisfies_weak_tag(self):
        assert evaluate_conditionals("PUT", WEAK_TAG, if_match="*").is_short_circuit is False

    def test_weak_tag_fails_against_itself(self):
        verdict = evaluate_conditionals("GET", WEAK_TAG, if_match=WEAK_TAG)

        assert verdict == ConditionalVerdict.short_circuit(412, WEAK_TAG)

    def test_weak_request_tag_fails(self):
        assert evaluate_conditionals("PUT", TAG, if_match=WEAK_TAG).status == 412

    def test_one_of_many(self):
        header = '"other", ' + TAG
        assert evaluate_conditionals("PUT", TAG, if_match=header).is_short_circuit is False

    def test_empty_header_fails(self):
        assert evaluate_conditionals("PUT", TAG, if_match="").status == 412

    def test_undecodable_header_is_ignored(self):
        verdict = evaluate_conditionals("PUT", TAG, if_match=b'"\xff\xfe"')

        assert verdict == ConditionalVerdict.proceed(TAG)

    def test_case_sensitive(self):
        assert evaluate_conditionals("PUT", TAG, if_match=TAG.upper()).status == 412


class TestIfNoneMatch:
    """Step 2: If-None-Match."""

    @pytest.mark.parametrize("method", ["GET", "HEAD"])
    def test_match_on_safe_method_is_not_modified(self, method):
        verdict = evaluate_conditionals(method, TAG, if_none_match=TAG)

        assert verdict == ConditionalVerdict.short_circuit(304, TAG)

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "PURGE"])
    def test_match_on_other_method_fails(self, method):
        verdict = evaluate_conditionals(method, TAG, if_none_match=TAG)

        assert verdict == ConditionalVerdict.short_circuit(412, TAG)

    def test_method_case_is_normalised(self):
        assert evaluate_conditionals("get", TAG, if_none_match=TAG).status == 304

    def test_strong_form_matches_weak_tag(self):
        verdict = evaluate_conditionals("GET", WEAK_TAG, if_none_match=TAG)

        assert verdict == ConditionalVerdict.short_circuit(304, WEAK_TAG)

    def test_weak_form_matches_strong_tag(self):
        assert evaluate_conditionals("GET", TAG, if_none_match=WEAK_TAG).status == 304

    def test_wildcard(self):
        assert evaluate_conditionals("GET", TAG, if_none_match="*").status == 304
        assert evaluate_conditionals("PUT", TAG, if_none_match="*").status == 412

    def test_no_match_proceeds(self):
        verdict = evaluate_conditionals("GET", TAG, if_none_match='"x", W/"y"')

        assert verdict == ConditionalVerdict.proceed(TAG)

    def test_empty_header_proceeds(self):
        assert evaluate_conditionals("GET", TAG, if_none_match="").is_short_circuit is False

    def test_undecodable_header_is_ignored(self):
        verdict = evaluate_conditionals("GET", TAG, if_none_match=b"\x80" + TAG.encode())

        assert verdict == ConditionalVerdict.proceed(TAG)

    def test_whitespace_around_entries(self):
        assert evaluate_conditionals("GET", TAG, if_none_match=f'  "x" ,\t{TAG}  ').status == 304


class TestPrecedence:
    """If-Match is decided before If-None-Match is looked at."""

    def test_failed_if_match_wins(self):
        verdict = evaluate_conditionals("GET", TAG, if_match='"deadbeef"', if_none_match=TAG)

        assert verdict == ConditionalVerdict.short_circuit(412, TAG)

    def test_passed_if_match_continues_to_if_none_match(self):
        verdict = evaluate_conditionals("GET", TAG, if_match=TAG, if_none_match=TAG)

        assert verdict == ConditionalVerdict.short_circuit(304, TAG)

    def test_both_pass(self):
        verdict = evaluate_conditionals("GET", TAG, if_match="*", if_none_match='"other"')

        assert verdict == ConditionalVerdict.proceed(TAG)

    def test_ignored_if_match_does_not_block(self):
        verdict = evaluate_conditionals("GET", TAG, if_match=b"\xff", if_none_match=TAG)

        assert verdict.status == 304
