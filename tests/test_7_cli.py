"""
Command Line and Utility Tests

Test Coverage:
- Output directory handling
- Id list parsing
- Full command line runs
"""

import pytest

from cardsplit.cli import build_parser, main
from cardsplit.exceptions import ReadError
from cardsplit.exporter import DEFAULT_EXPORT_FILENAME, EXPORT_HEADER
from cardsplit.utils import ensure_directory, parse_id_list


@pytest.fixture
def log_file(tmp_path, monkeypatch):
    """Keep CLI logs inside the test directory"""
    path = tmp_path / "logs" / "test.log"
    monkeypatch.setenv('LOG_FILE', str(path))
    return path


class TestUtils:
    """Test suite for helper functions."""

    def test_ensure_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv('DATA_DIR', str(tmp_path))
        path = ensure_directory('output')
        assert path == tmp_path / 'output'
        assert path.is_dir()

    def test_ensure_directory_invalid(self):
        with pytest.raises(ValueError, match="Invalid directory type"):
            ensure_directory('archive')

    @pytest.mark.parametrize("value,expected", [
        ('', []),
        (None, []),
        ('0', [0]),
        ('0,3, 7', [0, 3, 7]),
        ('1,,2,', [1, 2]),
    ])
    def test_parse_id_list(self, value, expected):
        assert parse_id_list(value) == expected

    def test_parse_id_list_invalid(self):
        with pytest.raises(ValueError, match="Invalid transaction id"):
            parse_id_list('1,two')


class TestCli:
    """Test suite for the command line shell."""

    def test_defaults(self):
        args = build_parser().parse_args(['--input', 'card.csv'])
        assert args.filter == 'all'
        assert args.sort == 'date-desc'
        assert args.output is None
        assert not args.restore_categories

    def test_invalid_filter_choice(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--input', 'card.csv', '--filter', 'shared'])

    def test_categorize_and_export(self, sample_file, tmp_path, log_file, capsys):
        """Test a full run.

        Verifies:
        - Categories from the id flags are applied
        - Summary and view are printed
        - Export is written to the requested path
        """
        output_path = tmp_path / "out" / "result.csv"
        output = main([
            '--input', str(sample_file),
            '--splitwise', '0,2',
            '--personal', '4',
            '--filter', 'splitwise',
            '--sort', 'amount-desc',
            '--output', str(output_path),
        ])
        assert output == output_path

        lines = output_path.read_text(encoding='utf-8').split('\n')
        assert lines[0] == EXPORT_HEADER
        assert [line.rsplit(',', 1)[1] for line in lines[1:]] == [
            'splitwise', 'uncategorized', 'splitwise', 'uncategorized', 'personal'
        ]

        printed = capsys.readouterr().out
        assert "Splitwise Transactions: 2" in printed
        assert "Splitwise Amount: $496.12" in printed
        assert "AIRBNB" in printed
        assert "Uber Trip" not in printed
        assert printed.index("AIRBNB") < printed.index("WHOLE FOODS MARKET")

    def test_default_output_directory(self, sample_file, tmp_path, log_file, monkeypatch):
        monkeypatch.setenv('DATA_DIR', str(tmp_path / "data"))
        output = main(['--input', str(sample_file)])
        assert output == tmp_path / "data" / "output" / DEFAULT_EXPORT_FILENAME
        assert output.exists()

    def test_no_matches_message(self, sample_file, tmp_path, log_file, capsys):
        main(['--input', str(sample_file), '--filter', 'personal', '--output', str(tmp_path)])
        assert "No transactions match your current filters." in capsys.readouterr().out

    def test_restore_categories(self, sample_file, tmp_path, log_file):
        first = main(['--input', str(sample_file), '--personal', '1', '--output', str(tmp_path / "a.csv")])
        second = main(['--input', str(first), '--restore-categories', '--output', str(tmp_path / "b.csv")])
        assert second.read_text(encoding='utf-8') == first.read_text(encoding='utf-8')

    def test_missing_input(self, tmp_path, log_file):
        with pytest.raises(ReadError):
            main(['--input', str(tmp_path / "missing.csv"), '--output', str(tmp_path)])
