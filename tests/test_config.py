import pytest

from judgebox.config import (
    InvalidFileError,
    InvalidRootError,
    MissingValueError,
    SETTING_NAMES,
    main,
    read_configuration,
)


def _write(tmp_path, body, root="Configuration"):
    path = tmp_path / "conf.xml"
    path.write_text(f"<?xml version='1.0'?>\n<{root}>{body}</{root}>\n")
    return path


def _setting(name, value, description="limit"):
    return (
        f"<{name}><Description>{description}</Description>"
        f"<Value>{value}</Value></{name}>"
    )


def test_reads_settings_in_order(tmp_path):
    body = _setting("Max_cache_size", "2048") + _setting("Max_data_number", "100")
    path = _write(tmp_path, body)
    assert read_configuration(path) == [
        ("Max_cache_size", 2048),
        ("Max_data_number", 100),
    ]


def test_first_digit_run_is_taken(tmp_path):
    path = _write(tmp_path, _setting("Max_data_length", "about 42 items, 7 more"))
    assert read_configuration(path) == [("Max_data_length", 42)]


def test_unknown_elements_are_ignored(tmp_path):
    body = "<Other><Value>5</Value></Other>" + _setting("Max_gamma_tree_size", "9")
    path = _write(tmp_path, body)
    assert read_configuration(path) == [("Max_gamma_tree_size", 9)]


def test_every_known_name_is_accepted(tmp_path):
    body = "".join(_setting(name, str(i)) for i, name in enumerate(SETTING_NAMES))
    path = _write(tmp_path, body)
    result = read_configuration(path)
    assert [name for name, _ in result] == list(SETTING_NAMES)
    assert [value for _, value in result] == list(range(len(SETTING_NAMES)))


def test_large_value(tmp_path):
    path = _write(tmp_path, _setting("Max_cache_size", "1000000000000"))
    assert read_configuration(path) == [("Max_cache_size", 1000000000000)]


def test_wrong_root(tmp_path):
    path = _write(tmp_path, _setting("Max_cache_size", "1"), root="Settings")
    with pytest.raises(InvalidRootError):
        read_configuration(path)


def test_malformed_file(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<Configuration><Max_cache_size>")
    with pytest.raises(InvalidFileError):
        read_configuration(path)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidFileError):
        read_configuration(tmp_path / "absent.xml")


def test_value_without_digits_keeps_earlier_entries(tmp_path):
    body = _setting("Max_data_number", "3") + _setting("Max_cache_size", "none")
    path = _write(tmp_path, body)
    with pytest.raises(MissingValueError) as info:
        read_configuration(path)
    assert info.value.name == "Max_cache_size"
    assert info.value.entries == [("Max_data_number", 3)]


def test_missing_value_element(tmp_path):
    path = _write(tmp_path, "<Max_cache_size><Description>x</Description></Max_cache_size>")
    with pytest.raises(MissingValueError):
        read_configuration(path)


def test_value_starting_with_element_fails(tmp_path):
    path = _write(tmp_path, "<Max_cache_size><Value><n>4</n></Value></Max_cache_size>")
    with pytest.raises(MissingValueError):
        read_configuration(path)


def test_main_prints_settings(tmp_path, capsys):
    path = _write(tmp_path, _setting("Max_Buffer_length", "64"))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Max_Buffer_length: 64\n"


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().out == ""


def test_main_invalid_file(tmp_path, capsys):
    path = tmp_path / "absent.xml"
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == f"error: Invalid Configuration File {path}\n"


def test_main_invalid_root(tmp_path, capsys):
    path = _write(tmp_path, "", root="Other")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Invalid Configuration!\n"


def test_main_reports_failure_after_partial_output(tmp_path, capsys):
    body = _setting("Max_data_number", "12") + _setting("Max_cache_size", "")
    path = _write(tmp_path, body)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == (
        "Max_data_number: 12\nFail to retrieve the configuration!\n"
    )