"""End-to-end tests for analyze()."""

import threading

import pytest

from source_metrics import AnalysisConfig, analyze


class TestAnalyze:
    def test_empty_input_never_raises(self):
        report = analyze([])
        assert report.summary.total_files == 0
        assert report.code_metrics.lines_of_code.total_lines == 0
        assert report.code_metrics.lines_of_code.comment_ratio == 0
        assert report.complexity_analysis.cyclomatic_complexity.files_analyzed == 0

    def test_sample_corpus(self, write_file, sample_ruby):
        source = write_file("app/services/signup_service.rb", sample_ruby)
        gemfile = write_file("Gemfile", 'source "https://rubygems.org"\ngem "rails"\n')

        report = analyze([source], [gemfile])

        loc = report.code_metrics.lines_of_code
        assert loc.total_lines == 17
        assert loc.total_lines == loc.code_lines + loc.comment_lines + loc.blank_lines
        assert loc.comment_ratio == pytest.approx(11.76)

        complexity = report.complexity_analysis
        assert complexity.cyclomatic_complexity.total_complexity == 6
        assert complexity.nesting_depth.max_nesting_depth == 4
        assert complexity.method_length_distribution.count == 2
        assert complexity.method_length_distribution.median == 7
        assert complexity.class_size_distribution.maximum == 14

        summary = report.summary
        assert summary.total_methods == 2
        assert summary.total_classes == 1
        assert summary.total_modules == 1
        assert summary.manifest_count == 1
        assert summary.complexity_score == 6.0
        assert summary.most_common_extension == ".rb"
        assert report.manifest_analysis.dependencies.total_gems == 1

    def test_unreadable_file_is_reported_not_raised(self, write_file, tmp_path):
        good = write_file("a.rb", "class Foo\nend\n")
        missing = str(tmp_path / "deleted.rb")

        report = analyze([good, missing])

        assert report.basic_stats.source_files == 2
        assert report.basic_stats.files_analyzed == 1
        assert report.complexity_analysis.nesting_depth.files_analyzed == 1
        assert [s.path for s in report.skipped_files] == [missing]
        # the vanished file still shows up in metadata distributions with size 0
        assert report.file_analysis.largest_files[-1].size == 0
        assert report.file_analysis.file_size_distribution.tiny == 1

    def test_parallel_config(self, write_file, sample_ruby):
        paths = [write_file(f"lib/m{i}.rb", sample_ruby) for i in range(6)]
        report = analyze(paths, config=AnalysisConfig(workers=3, parallel_threshold=2))
        assert report.code_metrics.lines_of_code.total_lines == 17 * 6
        assert report.code_metrics.method_density.total_methods == 12

    def test_cancelled_run_keeps_metadata(self, write_file):
        paths = [write_file("a.rb", "x = 1\n")]
        cancel = threading.Event()
        cancel.set()
        report = analyze(paths, cancel=cancel)
        assert report.basic_stats.files_analyzed == 0
        assert report.basic_stats.source_files == 1


class TestSmallPrograms:
    def test_empty_class(self, write_file):
        report = analyze([write_file("foo.rb", "class Foo\nend\n")])
        classes = report.complexity_analysis.class_size_distribution
        assert classes.count == 1
        assert classes.maximum == 2
        assert report.complexity_analysis.nesting_depth.max_nesting_depth == 1
        assert report.summary.total_classes == 1

    def test_method_with_conditional(self, write_file):
        report = analyze([write_file("m.rb", "def m\nif x\nend\nend\n")])
        assert report.complexity_analysis.method_length_distribution.maximum == 4
        assert report.complexity_analysis.nesting_depth.max_nesting_depth == 2
        assert report.complexity_analysis.cyclomatic_complexity.total_complexity == 2

    def test_unterminated_method_does_not_leak(self, write_file):
        broken = write_file("a.rb", "def broken\n  x = 1\n")
        healthy = write_file("b.rb", "def ok\nend\n")
        report = analyze([broken, healthy])
        methods = report.complexity_analysis.method_length_distribution
        assert methods.count == 1
        assert methods.maximum == 2
        assert report.summary.total_methods == 2
