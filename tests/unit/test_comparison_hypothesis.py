"""Property-based tests for comparison and derivation using Hypothesis.

These tests check the entity-tag rules across arbitrary tokens and bodies:
determinism, strength markers, and the strong/weak comparison laws.
"""

from hypothesis import given
from hypothesis import strategies as st

from etag_middleware.core.comparison import (
    match_if_match,
    match_if_none_match,
    strip_weak_prefix,
    strong_compare,
    weak_compare,
)
from etag_middleware.core.deriver import build_entity_tag
from etag_middleware.core.evaluator import evaluate_conditionals
from etag_middleware.models import Strength, ValidatorList

# Opaque tag contents: visible ASCII without quotes or commas
token_strategy = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E, blacklist_characters='",'),
    min_size=1,
    max_size=40,
)

strong_tag_strategy = token_strategy.map(lambda t: f'"{t}"')
weak_tag_strategy = token_strategy.map(lambda t: f'W/"{t}"')
tag_strategy = st.one_of(strong_tag_strategy, weak_tag_strategy)

strength_strategy = st.sampled_from(list(Strength))
body_strategy = st.binary(min_size=0, max_size=4096)
unsafe_method_strategy = st.sampled_from(["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])


class TestDerivationProperties:
    """Properties of build_entity_tag."""

    @given(body=body_strategy, strength=strength_strategy)
    def test_deterministic(self, body: bytes, strength: Strength) -> None:
        """Identical bytes always yield the identical tag."""
        assert build_entity_tag(body, strength) == build_entity_tag(bytes(body), strength)

    @given(body=body_strategy)
    def test_weak_marker(self, body: bytes) -> None:
        assert build_entity_tag(body, Strength.WEAK).startswith('W/"')

    @given(body=body_strategy)
    def test_strong_marker(self, body: bytes) -> None:
        tag = build_entity_tag(body, Strength.STRONG)

        assert tag.startswith('"')
        assert not tag.startswith("W/")

    @given(body=body_strategy)
    def test_same_token_for_both_strengths(self, body: bytes) -> None:
        weak = build_entity_tag(body, Strength.WEAK)
        strong = build_entity_tag(body, Strength.STRONG)

        assert strip_weak_prefix(weak) == strong

    @given(body=body_strategy, strength=strength_strategy)
    def test_lowercase_hex_token(self, body: bytes, strength: Strength) -> None:
        token = strip_weak_prefix(build_entity_tag(body, strength)).strip('"')

        assert token == token.lower()
        int(token, 16)


class TestComparisonProperties:
    """Laws of strong and weak comparison."""

    @given(token=token_strategy)
    def test_strong_compare_false_across_strengths(self, token: str) -> None:
        assert strong_compare(f'W/"{token}"', f'"{token}"') is False
        assert strong_compare(f'"{token}"', f'W/"{token}"') is False

    @given(left=tag_strategy, right=tag_strategy)
    def test_weak_compare_symmetric(self, left: str, right: str) -> None:
        assert weak_compare(left, right) == weak_compare(right, left)

    @given(tag=tag_strategy)
    def test_weak_compare_reflexive(self, tag: str) -> None:
        assert weak_compare(tag, tag) is True

    @given(left=tag_strategy, right=tag_strategy)
    def test_strong_implies_weak(self, left: str, right: str) -> None:
        if strong_compare(left, right):
            assert weak_compare(left, right)

    @given(tag=tag_strategy, others=st.lists(tag_strategy, max_size=5))
    def test_wildcard_universality(self, tag: str, others: list[str]) -> None:
        validators = ValidatorList.parse(", ".join([*others, "*"]))

        assert match_if_match(tag, validators) is True
        assert match_if_none_match(tag, validators) is True


class TestEvaluationProperties:
    """Properties of the full conditional evaluation."""

    @given(tag=tag_strategy, if_none_match=st.one_of(st.just("*"), tag_strategy))
    def test_failed_if_match_wins(self, tag: str, if_none_match: str) -> None:
        """A failing If-Match decides the verdict whatever If-None-Match says."""
        verdict = evaluate_conditionals(
            "GET", tag, if_match=f'"{tag}-other"', if_none_match=if_none_match
        )

        assert verdict.status == 412

    @given(tag=tag_strategy, method=unsafe_method_strategy)
    def test_method_sensitivity(self, tag: str, method: str) -> None:
        assert evaluate_conditionals("GET", tag, if_none_match=tag).status == 304
        assert evaluate_conditionals(method, tag, if_none_match=tag).status == 412

    @given(tag=tag_strategy)
    def test_resolved_tag_is_echoed(self, tag: str) -> None:
        assert evaluate_conditionals("GET", tag).etag == tag
        assert evaluate_conditionals("GET", tag, if_none_match="*").etag == tag
