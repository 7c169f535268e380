"""
Tests for the command-line entry point.
"""

import pytest

import run_all
from prime_audit.predicates import PREDICATES


class TestParseBool:

    def test_true_any_case(self):
        assert run_all.parse_bool('true')
        assert run_all.parse_bool('TRUE')
        assert run_all.parse_bool('True')

    def test_everything_else_false(self):
        for value in ['false', 'yes', '1', '']:
            assert not run_all.parse_bool(value)


class TestSettings:

    def test_defaults_from_config(self):
        args = run_all.build_parser().parse_args([])
        config = run_all.resolve_settings(args)

        assert config['upper_bound'] == 1299709
        assert config['certainty'] == 100
        assert config['parallel'] is True
        assert config['num_non_primes'] == 10000

    def test_positional_overrides(self):
        args = run_all.build_parser().parse_args(['1000', '20', 'false'])
        config = run_all.resolve_settings(args)

        assert config['upper_bound'] == 1000
        assert config['certainty'] == 20
        assert config['parallel'] is False

    def test_config_file(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text("upper_bound: 500\nnum_non_primes: 50\n")

        args = run_all.build_parser().parse_args(['--config', str(path)])
        config = run_all.resolve_settings(args)

        assert config['upper_bound'] == 500
        assert config['num_non_primes'] == 50
        assert config['certainty'] == 100

    def test_unknown_config_key(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("upperbound: 500\n")

        with pytest.raises(ValueError):
            run_all.load_config(path)

    def test_malformed_integer(self):
        with pytest.raises(SystemExit):
            run_all.build_parser().parse_args(['ten'])

    def test_bound_too_small(self):
        args = run_all.build_parser().parse_args(['1'])
        with pytest.raises(ValueError):
            run_all.resolve_settings(args)

    def test_negative_certainty(self):
        args = run_all.build_parser().parse_args(['100', '-4', 'false'])
        with pytest.raises(ValueError):
            run_all.resolve_settings(args)

    def test_zero_certainty_accepted(self):
        args = run_all.build_parser().parse_args(['100', '0'])
        assert run_all.resolve_settings(args)['certainty'] == 0

    def test_quoted_parallel_in_config(self, tmp_path):
        for text, expected in [('"false"', False), ('"False"', False),
                               ('"true"', True), ('false', False)]:
            path = tmp_path / 'parallel.yaml'
            path.write_text(f"parallel: {text}\n")

            args = run_all.build_parser().parse_args(['--config', str(path)])
            config = run_all.resolve_settings(args)

            assert config['parallel'] is expected, text

    @pytest.mark.parametrize("line", [
        "chunk_size: 0",
        "chunk_size: -10",
        "num_non_primes: -1",
        "num_workers: 0",
    ])
    def test_invalid_numeric_settings(self, tmp_path, line):
        path = tmp_path / 'bad_numbers.yaml'
        path.write_text(line + "\n")

        args = run_all.build_parser().parse_args(['--config', str(path)])
        with pytest.raises(ValueError):
            run_all.resolve_settings(args)

    def test_unknown_predicate(self, tmp_path):
        path = tmp_path / 'pred.yaml'
        path.write_text("predicate: fermat\n")

        with pytest.raises(ValueError):
            run_all.main(['--config', str(path)])


class TestMain:

    def test_success(self, tmp_path, capsys):
        code = run_all.main(['1000', '20', 'false', '--seed', '1',
                             '--output', str(tmp_path)])
        out = capsys.readouterr().out

        assert code == 0
        assert "Upper bound = 1000" in out
        assert "Certainty = 20" in out
        assert "Parallel = false" in out
        assert "Created 169 primes" in out
        assert "Prime test result: SUCCESS" in out
        assert "Non-prime test result: SUCCESS" in out
        assert "PrimeTest succeeded!" in out
        assert (tmp_path / 'prime_test_summary.csv').exists()

    def test_failure_exit_code(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setitem(PREDICATES, 'reject-all', lambda n, c: False)
        path = tmp_path / 'reject.yaml'
        path.write_text("predicate: reject-all\nnum_non_primes: 100\noutput_dir: null\n")

        code = run_all.main(['100', '10', 'false', '--config', str(path)])
        captured = capsys.readouterr()

        assert code == 1
        assert "Prime test result: FAILURE" in captured.out
        assert "PrimeTest FAILED!" in captured.err
