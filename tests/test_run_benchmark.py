"""Tests for the benchmark CLI functions."""

from binary_stride.searches import NOT_FOUND, SEARCHES
from run_benchmark import pick_query, run_benchmark, run_crossover_demo, run_smoke


class TestRunSmoke:
    """Test the literal example harness."""

    def test_rows_match_expected(self, capsys):
        """Both searches report the documented indices."""
        rows = run_smoke()
        expected_for_4 = {
            "[1, 2, 3, 4, 5, 6, 7, 8, 9]": 3,
            "[4]": 0,
            "[1, 4, 9]": 1,
            "[1, 4]": 1,
            "[4, 9]": 0,
            "[]": NOT_FOUND,
        }
        for array, needle, bs_idx, stride_idx in rows:
            if needle == 4:
                assert bs_idx == stride_idx == expected_for_4[array]
            else:
                assert bs_idx == stride_idx == NOT_FOUND
        assert len(rows) == 21

    def test_prints_found_elements(self, capsys):
        """The element at each found index is the needle."""
        run_smoke()
        lines = capsys.readouterr().out.splitlines()
        # header, 7 indices, then 6 elements
        assert lines[8:14] == ["4"] * 6


class TestRunBenchmark:
    """Test the benchmark pipeline on small datasets."""

    def test_all_searches_succeed(self, capsys):
        """Every search agrees with binary search on every query."""
        results = run_benchmark(2000, distribution="uniform", num_runs=20, seed=1, miss_rate=0.3)
        assert set(results) == set(SEARCHES)
        for data in results.values():
            assert len(data['comps']) == 20
            assert all(data['successes'])
        assert "Final Averaged Benchmark Results" in capsys.readouterr().out

    def test_duplicates(self, capsys):
        """Duplicate-heavy data is still searched correctly."""
        results = run_benchmark(1000, distribution="duplicates", num_runs=10, seed=4)
        assert all(results["Binary Stride"]['successes'])

    def test_data_file(self, tmp_path, capsys):
        """Values can be loaded from a CSV file."""
        csv_file = tmp_path / "keys.csv"
        csv_file.write_text("key\n" + "\n".join(str(v) for v in range(100, 0, -3)) + "\n")
        results = run_benchmark(0, num_runs=5, seed=9, data_file=str(csv_file))
        assert all(results["Binary Stride"]['successes'])

    def test_zero_runs(self, capsys):
        """With no queries the report has no NaN averages."""
        results = run_benchmark(100, num_runs=0, seed=3)
        assert all(not data['comps'] for data in results.values())
        assert "nan" not in capsys.readouterr().out

    def test_duplicates_note(self, capsys):
        """The duplicates note describes landing on the last index of a run."""
        run_benchmark(500, distribution="duplicates", num_runs=3, seed=8)
        assert "last index of the run" in capsys.readouterr().out

    def test_missing_data_file(self, tmp_path, capsys):
        """An unreadable data file ends the run."""
        assert run_benchmark(0, num_runs=5, data_file=str(tmp_path / "nope.csv")) is None
        assert "Exiting" in capsys.readouterr().out


class TestHelpers:
    """Test query selection and the crossover demo."""

    def test_pick_query_misses(self):
        """With miss_rate 1 the query is never in the array."""
        values = [1, 2, 3, 10, 11, 12]
        for _ in range(50):
            assert pick_query(values, 1.0) not in values

    def test_pick_query_hits(self):
        """With miss_rate 0 the query is always in the array."""
        values = [5, 8, 13]
        for _ in range(20):
            assert pick_query(values, 0.0) in values

    def test_crossover_demo(self, capsys):
        """The crossover is just past the median."""
        values = list(range(10))
        assert run_crossover_demo(values) == 6
        assert "index 6" in capsys.readouterr().out
