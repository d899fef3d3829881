from scripts.check_nappi_file import check_nappi_file, main


def test_check_valid_file_with_queries(nappi_file, sample_entries, capsys):
    path = nappi_file(sample_entries)

    assert check_nappi_file(str(path), ["paracetamol"]) is True

    out = capsys.readouterr().out
    assert "Entries:        5" in out
    assert "Distinct names: 4" in out
    assert "Query 'paracetamol': 3 matches" in out


def test_check_reports_malformed_line(nappi_file, sample_entries, capsys):
    path = nappi_file([sample_entries[0], "x" * 60])

    assert check_nappi_file(str(path)) is False
    assert "INVALID: Malformed record on line 2" in capsys.readouterr().out


def test_main_exit_status(nappi_file, sample_entries, tmp_path):
    assert main([str(nappi_file(sample_entries)), "-q", "asp tab"]) == 0
    assert main([str(tmp_path / "missing.txt")]) == 1
