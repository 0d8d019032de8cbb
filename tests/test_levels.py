import pytest
from tslog.core.errors import ConfigurationError
from tslog.core.levels import LEVELS, LEVEL_STYLES, INDICATORS, rank, indicator


def test_levels_ascending():
    assert LEVELS == ("debug", "info", "warn", "error")
    assert [rank(l) for l in LEVELS] == [0, 1, 2, 3]


def test_full_pads_to_five():
    full = INDICATORS["full"]
    assert [full(l) for l in LEVELS] == [" DEBUG", " INFO ", " WARN ", " ERROR"]


def test_initial_single_letter():
    assert [INDICATORS["initial"](l) for l in LEVELS] == [" D", " I", " W", " E"]


def test_symbol_and_none():
    assert INDICATORS["symbol"]("error") == " " + LEVEL_STYLES["error"].symbol
    assert INDICATORS["none"]("warn") == ""


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LEVEL_STYLES["debug"] = None
    with pytest.raises(TypeError):
        INDICATORS["loud"] = str.upper


def test_unknown_names_rejected():
    with pytest.raises(ConfigurationError) as exc:
        rank("fatal")
    assert exc.value.value == "fatal"
    with pytest.raises(ConfigurationError):
        indicator("emoji")


def test_unhashable_names_rejected():
    with pytest.raises(ConfigurationError):
        indicator(["full"])
    with pytest.raises(ConfigurationError):
        rank(["debug"])
