"""Hypothesis-based property tests for translate().

Properties:
- Round trip: a value built from a locale's own names translates to the
  value built from the English names
- Idempotence: English values are unchanged by the English locale
- Case-insensitivity of value text and of the layout's day period element
- Whitespace runs in the value are preserved verbatim
- Longest match over prefix collisions
"""

from __future__ import annotations

import pytest
from hypothesis import assume, event, given, settings
from hypothesis import strategies as st

from dateglot import translate
from dateglot.constants import (
    DAY_PERIODS_STD,
    LONG_DAY_NAMES_STD,
    LONG_MONTH_NAMES_STD,
    SHORT_DAY_NAMES_STD,
    SHORT_MONTH_NAMES_STD,
    TokenKind,
)
from dateglot.locales import (
    GenericLocale,
    available_locales,
    canonical_table,
    new_default_locale,
    table_for,
)
from tests.strategies import (
    CLDR_LOCALE_POOL,
    LAYOUT_TEMPLATES,
    LocalizedSample,
    build_sample,
    is_unambiguous,
    localized_samples,
    name_tables,
    synthetic_locales,
    whitespace_runs,
)

ENGLISH = GenericLocale(
    language="en",
    short_day_names=SHORT_DAY_NAMES_STD,
    long_day_names=LONG_DAY_NAMES_STD,
    short_month_names=SHORT_MONTH_NAMES_STD,
    long_month_names=LONG_MONTH_NAMES_STD,
    day_periods=DAY_PERIODS_STD,
)


@st.composite
def cldr_locales(draw: st.DrawFn) -> GenericLocale:
    """Resolve a tag from the curated pool."""
    tag = draw(st.sampled_from(CLDR_LOCALE_POOL))
    locale, errors = new_default_locale(tag)
    assert not errors
    assert locale is not None
    return locale


def _usable(locale: GenericLocale, kinds: tuple[TokenKind, ...]) -> bool:
    return all(
        table_for(locale, kind) and is_unambiguous(table_for(locale, kind)) for kind in kinds
    )


class TestRoundTrip:
    """Localized values translate to their English counterparts."""

    @given(sample=localized_samples(synthetic_locales()))
    def test_synthetic_locales(self, sample: LocalizedSample) -> None:
        result, errors = translate(sample.layout, sample.value, sample.locale)
        assert errors == ()
        assert result == sample.expected

    @given(sample=localized_samples(cldr_locales()))
    @settings(max_examples=200)
    def test_cldr_locales(self, sample: LocalizedSample) -> None:
        template = next(t for t in LAYOUT_TEMPLATES if t[0] == sample.layout)
        assume(_usable(sample.locale, template[2]))
        event(f"locale={sample.locale.language}")

        result, errors = translate(sample.layout, sample.value, sample.locale)
        assert errors == ()
        assert result == sample.expected

    @given(sample=localized_samples(st.just(ENGLISH)))
    def test_english_is_idempotent(self, sample: LocalizedSample) -> None:
        assert sample.value == sample.expected
        result, errors = translate(sample.layout, sample.value, ENGLISH)
        assert errors == ()
        assert result == sample.value


class TestCaseInsensitivity:
    """Case of the value and of the layout's day period does not matter."""

    @given(
        locale=synthetic_locales(),
        template=st.sampled_from(LAYOUT_TEMPLATES),
        data=st.data(),
        transform=st.sampled_from([str.upper, str.lower, str.title, str.swapcase]),
    )
    def test_value_case(self, locale, template, data, transform) -> None:
        indices = [
            data.draw(st.integers(min_value=0, max_value=len(canonical_table(kind)) - 1))
            for kind in template[2]
        ]
        sample = build_sample(template, locale, indices, transform)

        result, errors = translate(sample.layout, sample.value, locale)
        assert errors == ()
        assert result == sample.expected

    @given(
        periods=name_tables(TokenKind.DAY_PERIODS),
        index=st.integers(min_value=0, max_value=1),
        layout=st.sampled_from(["3:04PM", "3:04pm", "3:04Pm", "3:04pM"]),
    )
    def test_day_period_layout_case(self, periods, index, layout) -> None:
        locale = GenericLocale(language="x-synthetic", day_periods=periods)
        result, errors = translate(layout, f"7:45{periods[index]}", locale)
        assert errors == ()
        assert result == f"7:45{DAY_PERIODS_STD[index]}"


class TestWhitespacePreservation:
    """Whitespace runs are copied to the output unchanged."""

    @given(
        locale=synthetic_locales(),
        day=st.integers(min_value=0, max_value=6),
        month=st.integers(min_value=0, max_value=11),
        lead=st.one_of(st.just(""), whitespace_runs()),
        middle=whitespace_runs(),
        trail=st.one_of(st.just(""), whitespace_runs()),
    )
    def test_runs_around_elements(self, locale, day, month, lead, middle, trail) -> None:
        value = (
            f"{lead}{locale.long_day_names[day]}{middle}"
            f"{locale.short_month_names[month]}{trail}"
        )
        result, errors = translate("Monday Jan", value, locale)
        assert errors == ()
        assert result == (
            f"{lead}{LONG_DAY_NAMES_STD[day]}{middle}{SHORT_MONTH_NAMES_STD[month]}{trail}"
        )


class TestLongestMatch:
    """The longest entry wins when entries share a prefix."""

    @given(
        stem=st.text(alphabet="abcdefghij", min_size=1, max_size=5),
        suffix=st.text(alphabet="klmnop", min_size=1, max_size=3),
        short_first=st.booleans(),
    )
    def test_prefix_collision(self, stem, suffix, short_first) -> None:
        others = [f"q{i}" for i in range(10)]
        pair = [stem, stem + suffix] if short_first else [stem + suffix, stem]
        locale = GenericLocale(language="x-synthetic", long_month_names=(*pair, *others))
        long_index = 1 if short_first else 0
        short_index = 1 - long_index

        result, _ = translate("January 2006", f"{stem + suffix} 2010", locale)
        assert result == f"{LONG_MONTH_NAMES_STD[long_index]} 2010"

        result, _ = translate("January 2006", f"{stem} 2010", locale)
        assert result == f"{LONG_MONTH_NAMES_STD[short_index]} 2010"


@pytest.mark.fuzz
class TestAllCldrLocales:
    """Every entry of every CLDR locale translates (run with: pytest -m fuzz)."""

    _LAYOUTS = {
        TokenKind.SHORT_DAY_NAMES: ("Mon 2006", "{} 2010"),
        TokenKind.LONG_DAY_NAMES: ("Monday 2006", "{} 2010"),
        TokenKind.SHORT_MONTH_NAMES: ("2 Jan 2006", "4 {} 2010"),
        TokenKind.LONG_MONTH_NAMES: ("2 January 2006", "4 {} 2010"),
        TokenKind.DAY_PERIODS: ("3:04PM", "7:45{}"),
    }

    @pytest.mark.parametrize("tag", available_locales())
    def test_every_entry(self, tag: str) -> None:
        locale, _ = new_default_locale(tag)
        if locale is None:
            pytest.skip(f"no usable calendar data for {tag}")

        for kind, (layout, pattern) in self._LAYOUTS.items():
            table = table_for(locale, kind)
            if not table or not is_unambiguous(table):
                continue
            for local, english in zip(table, canonical_table(kind), strict=True):
                result, errors = translate(layout, pattern.format(local), locale)
                assert errors == (), (tag, kind, local)
                assert result == pattern.format(english)
