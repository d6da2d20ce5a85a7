import pytest

from nerdlog.options import Options, SharedOptions, option_meta_by_name


def test_default_max_num_lines():
    assert Options().max_num_lines == 250


def test_unknown_option_is_none():
    assert option_meta_by_name("nosuchoption") is None


def test_alias_resolves_to_target():
    assert option_meta_by_name("numlines") is option_meta_by_name("maxnumlines")


def test_set_and_get_max_num_lines():
    opts = Options()
    meta = option_meta_by_name("numlines")
    meta.set(opts, "100")
    assert opts.max_num_lines == 100
    assert meta.get(opts) == "100"


@pytest.mark.parametrize("value", ["1", "0", "-5", "abc", "", "1.5"])
def test_invalid_max_num_lines(value):
    opts = Options()
    with pytest.raises(ValueError):
        option_meta_by_name("maxnumlines").set(opts, value)
    assert opts.max_num_lines == 250


def test_min_max_num_lines_error_message():
    with pytest.raises(ValueError, match="numlines must be at least 2"):
        option_meta_by_name("maxnumlines").set(Options(), "1")


def test_timezone_utc_round_trip():
    opts = Options()
    meta = option_meta_by_name("timezone")
    meta.set(opts, "UTC")
    assert meta.get(opts) == "UTC"


def test_timezone_local():
    opts = Options()
    meta = option_meta_by_name("timezone")
    meta.set(opts, "Local")
    assert meta.get(opts) == "Local"


def test_invalid_timezone():
    opts = Options()
    with pytest.raises(ValueError):
        option_meta_by_name("timezone").set(opts, "Not/AZone")


def test_shared_options_accessors():
    base = Options(max_num_lines=42)
    shared = SharedOptions(base)
    assert shared.get_max_num_lines() == 42
    assert shared.get_timezone() is base.timezone


def test_shared_get_all_returns_copy():
    shared = SharedOptions(Options(max_num_lines=42))
    snapshot = shared.get_all()
    snapshot.max_num_lines = 7
    assert shared.get_max_num_lines() == 42


def test_shared_call_mutates_and_returns():
    shared = SharedOptions(Options())
    meta = option_meta_by_name("maxnumlines")
    shared.call(lambda o: meta.set(o, "30"))
    assert shared.get_max_num_lines() == 30
    assert shared.call(meta.get) == "30"