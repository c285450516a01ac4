"""Tests for the BedWars level and prestige calculation."""

import math

import pytest

from bedwars_level.errors import InvalidInputError
from bedwars_level.formatting import MinecraftFormatting
from bedwars_level.levels import (
    EASY_LEVELS,
    EXP_PER_PRESTIGE,
    MAX_PRESTIGE,
    PRESTIGES,
    LevelInfo,
    compute_level,
    easy_level_cost,
    level_from_exp,
    level_progress,
    prestige_from_level,
    prestige_name_and_color,
)
from bedwars_level.player import PlayerRecord


class TestConstants:
    def test_exp_per_prestige(self):
        assert EXP_PER_PRESTIGE == 487000

    def test_easy_levels(self):
        assert EASY_LEVELS == 4


class TestEasyLevelCost:
    def test_costs(self):
        assert [easy_level_cost(i) for i in range(1, 5)] == [500, 1000, 2000, 3500]

    def test_easy_levels_sum_to_7000(self):
        assert sum(easy_level_cost(i) for i in range(1, EASY_LEVELS + 1)) == 7000


class TestLevelFromExp:
    def test_zero(self):
        assert level_from_exp(0) == 0

    def test_just_under_first_level(self):
        assert level_from_exp(499) == 0

    def test_easy_level_boundaries(self):
        assert level_from_exp(500) == 1
        assert level_from_exp(1499) == 1
        assert level_from_exp(1500) == 2
        assert level_from_exp(3500) == 3
        assert level_from_exp(7000) == 4

    def test_flat_levels(self):
        assert level_from_exp(11999) == 4
        assert level_from_exp(12000) == 5

    def test_last_level_before_prestige(self):
        assert level_from_exp(EXP_PER_PRESTIGE - 1) == 99

    def test_exact_prestige_boundary(self):
        assert level_from_exp(EXP_PER_PRESTIGE) == 100

    def test_easy_levels_repeat_after_prestige(self):
        assert level_from_exp(EXP_PER_PRESTIGE + 499) == 100
        assert level_from_exp(EXP_PER_PRESTIGE + 500) == 101

    def test_fractional_experience_is_floored(self):
        assert level_from_exp(499.9) == 0
        assert level_from_exp(500.5) == 1

    def test_monotonically_non_decreasing(self):
        prev = 0
        for exp in range(0, 2_000_000, 997):
            curr = level_from_exp(exp)
            assert curr >= prev
            prev = curr


class TestPrestigeFromLevel:
    def test_below_first_prestige(self):
        assert prestige_from_level(99) == 0

    def test_boundaries(self):
        assert prestige_from_level(100) == 1
        assert prestige_from_level(999) == 9
        assert prestige_from_level(1000) == 10

    def test_clamped(self):
        assert prestige_from_level(5000) == MAX_PRESTIGE


class TestPrestigeNameAndColor:
    def test_all_prestiges_named(self):
        assert set(PRESTIGES) == set(range(11))

    def test_known_names(self):
        assert prestige_name_and_color(0) == ("None", MinecraftFormatting.GRAY)
        assert prestige_name_and_color(1) == ("Iron", MinecraftFormatting.WHITE)
        assert prestige_name_and_color(4) == ("Emerald", MinecraftFormatting.DARK_GREEN)
        assert prestige_name_and_color(10) == ("Rainbow", MinecraftFormatting.WHITE)

    def test_unknown_defaults_to_none(self):
        assert prestige_name_and_color(11) == ("None", MinecraftFormatting.GRAY)
        assert prestige_name_and_color(-1) == ("None", MinecraftFormatting.GRAY)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PRESTIGES[11] = ("Mythic", MinecraftFormatting.RED)


class TestComputeLevel:
    def test_zero_experience(self):
        info = compute_level(0)
        assert info.level == 0
        assert info.prestige == 0
        assert info.prestige_name == "None"
        assert info.prestige_color is MinecraftFormatting.GRAY
        assert info.prestige_color_hex == "#AAAAAA"
        assert info.level_in_current_prestige == 0

    def test_first_prestige(self):
        info = compute_level(487000)
        assert info.level == 100
        assert info.prestige == 1
        assert info.prestige_name == "Iron"
        assert info.prestige_color_hex == "#FFFFFF"
        assert info.level_in_current_prestige == 0

    def test_mid_prestige(self):
        info = compute_level(3 * EXP_PER_PRESTIGE + 7000 + 10 * 5000)
        assert info.level == 314
        assert info.prestige == 3
        assert info.prestige_name == "Diamond"
        assert info.level_in_current_prestige == 14

    def test_level_999(self):
        info = compute_level(9 * EXP_PER_PRESTIGE + 7000 + 95 * 5000)
        assert info.level == 999
        assert info.prestige == 9
        assert info.prestige_name == "Amethyst"
        assert info.level_in_current_prestige == 99

    def test_level_in_current_prestige_in_range(self):
        for exp in range(0, 10 * EXP_PER_PRESTIGE, 12_345):
            info = compute_level(exp)
            assert info.level_in_current_prestige == info.level - 100 * info.prestige
            assert 0 <= info.level_in_current_prestige <= 99

    def test_prestige_capped(self):
        info = compute_level(40 * EXP_PER_PRESTIGE)
        assert info.level == 4000
        assert info.prestige == MAX_PRESTIGE
        assert info.prestige_name == "Rainbow"
        assert info.level_in_current_prestige == 3000

    def test_returns_frozen_value_object(self):
        info = compute_level(500)
        assert isinstance(info, LevelInfo)
        assert info == compute_level(500)
        with pytest.raises(AttributeError):
            info.level = 5

    def test_accepts_player_record(self):
        assert compute_level(PlayerRecord(experience=487000)).level == 100

    def test_player_record_prefers_current_field(self):
        record = PlayerRecord(experience=500, legacy_experience=487000)
        assert compute_level(record).level == 1

    def test_player_record_falls_back_to_legacy(self):
        record = PlayerRecord(legacy_experience=487000)
        assert compute_level(record).level == 100

    def test_accepts_api_payload(self):
        payload = {"player": {"stats": {"Bedwars": {"Experience": 12000}}}}
        assert compute_level(payload).level == 5

    def test_to_dict(self):
        assert compute_level(487000).to_dict() == {
            "level": 100,
            "prestige": 1,
            "prestigeName": "Iron",
            "prestigeColor": "§f",
            "prestigeColorHex": "#FFFFFF",
            "levelInCurrentPrestige": 0,
        }

    @pytest.mark.parametrize("bad", [None, "1000", math.nan, -1, math.inf, True, [487000]])
    def test_invalid_input_raises(self, bad):
        with pytest.raises(InvalidInputError):
            compute_level(bad)

    def test_missing_stats_raises(self):
        with pytest.raises(InvalidInputError):
            compute_level({"player": {"displayname": "Technoblade"}})


class TestLevelProgress:
    def test_zero(self):
        assert level_progress(0) == (0, 500)

    def test_inside_easy_level(self):
        assert level_progress(600) == (100, 1000)

    def test_after_easy_levels(self):
        assert level_progress(7000) == (0, 5000)

    def test_flat_level(self):
        assert level_progress(12345) == (345, 5000)

    def test_resets_after_prestige(self):
        assert level_progress(EXP_PER_PRESTIGE) == (0, 500)

    def test_invalid(self):
        with pytest.raises(InvalidInputError):
            level_progress(-10)
