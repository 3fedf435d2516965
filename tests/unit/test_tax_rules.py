"""Tests for tax rules loading and schema validation."""

import json

import pytest
import yaml
from pydantic import ValidationError

from careerpay.sdk import calculate_take_home, set_setting
from careerpay.sdk.taxes import rules as rules_module
from careerpay.sdk.errors import InvalidInputError, TaxRulesNotFoundError, UnknownStateError
from careerpay.sdk.taxes import (
    FILING_STATUSES,
    FilingStatusRules,
    StateTaxInfo,
    TaxRules,
    get_available_years,
    get_state_info,
    list_states,
    load_tax_rules,
    normalize_filing_status,
    normalize_state_code,
)


def minimal_rules(**overrides):
    data = {
        "year": 2099,
        "federal": {
            "single": {"tax_brackets": [
                {"min": 0, "max": 1000, "rate": 0.1},
                {"min": 1000, "rate": 0.2},
            ]},
        },
        "social_security": {"wage_cap": 100000, "tax_rate": 0.062},
        "medicare": {"tax_rate": 0.0145},
        "states": {"TX": {"name": "Texas", "rate": 0, "no_income_tax": True}},
    }
    data.update(overrides)
    return data


class TestLoadTaxRules:

    def test_available_years(self):
        years = get_available_years()
        assert 2024 in years
        assert 2026 in years
        assert years == sorted(years, reverse=True)

    @pytest.mark.parametrize("year", [2024, 2026])
    def test_every_year_loads(self, year):
        rules = load_tax_rules(year)
        assert rules.year == year
        assert set(rules.federal) == set(FILING_STATUSES)
        assert len(rules.states) == 51

    def test_year_as_string(self):
        assert load_tax_rules("2024").year == 2024

    def test_default_year(self):
        assert load_tax_rules().year == 2024

    def test_default_year_from_settings(self):
        set_setting("tax_year", "2026")
        assert load_tax_rules().year == 2026

    def test_2024_constants(self):
        rules = load_tax_rules(2024)
        assert rules.social_security.wage_cap == 168600
        assert rules.social_security.tax_rate == 0.062
        assert rules.medicare.tax_rate == 0.0145
        assert rules.brackets_for("single")[0].upper_bound == 11600

    def test_cached(self):
        assert load_tax_rules(2024) is load_tax_rules(2024)

    def test_cached_tables_are_read_only(self):
        rules = load_tax_rules(2024)

        with pytest.raises(AttributeError):
            rules.states.pop("TX")
        with pytest.raises(TypeError):
            rules.states["ZZ"] = rules.states["TX"]
        with pytest.raises(TypeError):
            del rules.federal["single"]
        with pytest.raises(TypeError):
            rules.brackets_for("single")[0] = rules.brackets_for("single")[1]

        result = calculate_take_home(18, "hourly", "TX", tax_year=2024)
        assert result.annual_net == pytest.approx(30315.04)

    def test_dump_round_trip(self):
        rules = load_tax_rules(2024)

        assert TaxRules.model_validate(rules.model_dump()) == rules
        data = json.loads(rules.model_dump_json())
        assert data["states"]["CA"]["rate"] == 0.0725
        assert data["federal"]["single"]["tax_brackets"][0]["upper_bound"] == 11600

    def test_year_mismatch_in_file(self, tmp_path, monkeypatch):
        (tmp_path / "2098.yaml").write_text(yaml.safe_dump(minimal_rules(year=2097)))
        monkeypatch.setattr(rules_module, "_get_tax_rules_dir", lambda: tmp_path)

        with pytest.raises(TaxRulesNotFoundError, match="declares year 2097"):
            load_tax_rules(2098)

    def test_missing_year(self):
        with pytest.raises(TaxRulesNotFoundError, match="1999"):
            load_tax_rules(1999)

    def test_non_numeric_year(self):
        with pytest.raises(InvalidInputError):
            load_tax_rules("next year")

    @pytest.mark.parametrize("year", [2024, 2026])
    def test_brackets_contiguous_and_ascending(self, year):
        rules = load_tax_rules(year)
        for status in FILING_STATUSES:
            brackets = rules.brackets_for(status)
            assert brackets[0].lower_bound == 0
            assert brackets[-1].upper_bound is None
            for prev, current in zip(brackets, brackets[1:]):
                assert current.lower_bound == prev.upper_bound
                assert current.rate > prev.rate


class TestStateLookups:

    def test_get_state_info(self):
        info = get_state_info("ca", load_tax_rules(2024))
        assert info.code == "CA"
        assert info.name == "California"
        assert info.rate == 0.0725

    def test_unknown_state(self):
        with pytest.raises(UnknownStateError, match="ZZ"):
            get_state_info("ZZ", load_tax_rules(2024))

    def test_unknown_state_is_lookup_error(self):
        with pytest.raises(LookupError):
            load_tax_rules(2024).state("ZZ")

    def test_list_states_sorted_by_name(self):
        states = list_states(load_tax_rules(2024))
        names = [s.name for s in states]
        assert names == sorted(names)

    def test_list_no_tax_states(self):
        codes = {s.code for s in list_states(load_tax_rules(2024), no_tax_only=True)}
        assert codes == {"AK", "FL", "NV", "NH", "SD", "TN", "TX", "WA", "WY"}


class TestNormalization:

    @pytest.mark.parametrize("value", ["tx", " TX ", "Tx"])
    def test_state_code(self, value):
        assert normalize_state_code(value) == "TX"

    @pytest.mark.parametrize("value", ["", "T", "TEX", "1A", None])
    def test_bad_state_code(self, value):
        with pytest.raises(InvalidInputError):
            normalize_state_code(value)

    @pytest.mark.parametrize("value,expected", [
        ("single", "single"),
        ("MFJ", "mfj"),
        ("married filing jointly", "mfj"),
        ("married-filing-separately", "mfs"),
        ("head_of_household", "hoh"),
    ])
    def test_filing_status(self, value, expected):
        assert normalize_filing_status(value) == expected

    def test_bad_filing_status(self):
        with pytest.raises(InvalidInputError, match="Valid"):
            normalize_filing_status("widow")


class TestSchemas:

    def test_minimal_rules_valid(self):
        rules = TaxRules.model_validate(minimal_rules())
        assert rules.state("TX").code == "TX"

    def test_missing_filing_status_table(self):
        rules = TaxRules.model_validate(minimal_rules())
        with pytest.raises(InvalidInputError, match="mfj"):
            rules.brackets_for("mfj")

    def test_single_required(self):
        data = minimal_rules(federal={
            "mfj": {"tax_brackets": [{"min": 0, "rate": 0.1}]},
        })
        with pytest.raises(ValidationError, match="single"):
            TaxRules.model_validate(data)

    def test_gap_between_brackets_rejected(self):
        with pytest.raises(ValidationError, match="contiguous"):
            FilingStatusRules.model_validate({"tax_brackets": [
                {"min": 0, "max": 1000, "rate": 0.1},
                {"min": 1500, "rate": 0.2},
            ]})

    def test_first_bracket_must_start_at_zero(self):
        with pytest.raises(ValidationError, match="start at 0"):
            FilingStatusRules.model_validate({"tax_brackets": [{"min": 100, "rate": 0.1}]})

    def test_top_bracket_must_be_unbounded(self):
        with pytest.raises(ValidationError, match="unbounded"):
            FilingStatusRules.model_validate({"tax_brackets": [{"min": 0, "max": 1000, "rate": 0.1}]})

    def test_inverted_bracket_rejected(self):
        with pytest.raises(ValidationError, match="greater than min"):
            FilingStatusRules.model_validate({"tax_brackets": [
                {"min": 0, "max": 0, "rate": 0.1},
                {"min": 0, "rate": 0.2},
            ]})

    def test_no_tax_state_with_rate_rejected(self):
        with pytest.raises(ValidationError, match="rate 0"):
            StateTaxInfo.model_validate({"code": "TX", "name": "Texas", "rate": 0.05, "no_income_tax": True})

    def test_unknown_top_level_keys_ignored(self):
        rules = TaxRules.model_validate(minimal_rules(notes="forward compat"))
        assert rules.year == 2099

    def test_rules_are_frozen(self):
        rules = TaxRules.model_validate(minimal_rules())
        with pytest.raises(ValidationError):
            rules.year = 2000
