import logging

import yaml

from backup_writer import write_backup, export_summary_yaml


def test_backup_lines_sorted_by_name(tmp_path):
    backup = tmp_path / "frequency.dat"
    assert write_backup({"apples": 1, "Bananas": 2, "Apples": 1}, backup)
    assert backup.read_text(encoding='utf-8') == "Apples 1\nBananas 2\napples 1\n"


def test_backup_overwrites_previous_content(tmp_path):
    backup = tmp_path / "frequency.dat"
    backup.write_text("Old 99\nStale 5\nLeftover 1\n", encoding='utf-8')
    write_backup({"Peas": 4}, backup)
    assert backup.read_text(encoding='utf-8') == "Peas 4\n"


def test_backup_for_empty_mapping_is_empty_file(tmp_path):
    backup = tmp_path / "frequency.dat"
    assert write_backup({}, backup)
    assert backup.read_text(encoding='utf-8') == ""


def test_unwritable_backup_only_warns(tmp_path, caplog):
    target = tmp_path / "no_such_dir" / "frequency.dat"
    with caplog.at_level(logging.WARNING):
        assert write_backup({"Peas": 4}, target) is False
    assert "Could not write backup file" in caplog.text
    assert not target.exists()


def test_summary_yaml_contents(tmp_path):
    out = tmp_path / "summary.yml"
    assert export_summary_yaml({"Bananas": 2, "Apples": 3}, out, source="log.txt", backup="frequency.dat")
    data = yaml.safe_load(out.read_text(encoding='utf-8'))
    assert data["source"] == "log.txt"
    assert data["backup"] == "frequency.dat"
    assert data["total_purchases"] == 5
    assert data["distinct_items"] == 2
    assert list(data["counts"].items()) == [("Apples", 3), ("Bananas", 2)]


def test_unwritable_summary_only_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert export_summary_yaml({"Peas": 1}, tmp_path / "missing" / "summary.yml") is False
    assert "Could not write YAML summary" in caplog.text


def test_backup_keeps_raw_log_bytes(tmp_path):
    backup = tmp_path / "frequency.dat"
    assert write_backup({"Jalape\udcf1os": 2}, backup)
    assert backup.read_bytes() == b"Jalape\xf1os 2\n"
