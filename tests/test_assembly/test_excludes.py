"""Tests for exclude pattern accumulation."""

from lxclocal.assembly.excludes import DEVICE_PATTERN, ExcludeListBuilder


class TestExcludeListBuilder:
    """Test ExcludeListBuilder."""

    def test_starts_empty(self):
        builder = ExcludeListBuilder()

        assert builder.patterns == ()
        assert builder.as_tar_args() == []

    def test_exclude_devices(self):
        builder = ExcludeListBuilder()
        builder.exclude_devices()

        assert builder.patterns == ("./dev/*",)
        assert DEVICE_PATTERN == "./dev/*"

    def test_add_from_file_keeps_order_and_skips_blanks(self, tmp_path):
        excludes = tmp_path / "excludes"
        excludes.write_text("./var/cache/*\n\n./tmp/*\n   \n./var/cache/*\n")

        builder = ExcludeListBuilder()
        added = builder.add_from_file(excludes)

        assert added == 3
        # No deduplication
        assert builder.patterns == ("./var/cache/*", "./tmp/*", "./var/cache/*")

    def test_devices_then_file(self, tmp_path):
        excludes = tmp_path / "excludes"
        excludes.write_text("./var/cache/*\n")

        builder = ExcludeListBuilder()
        builder.exclude_devices()
        builder.add_from_file(excludes)

        assert builder.patterns == ("./dev/*", "./var/cache/*")
        assert builder.as_tar_args() == ["--exclude=./dev/*", "--exclude=./var/cache/*"]

    def test_invalid_globs_are_passed_through(self, tmp_path):
        excludes = tmp_path / "excludes"
        excludes.write_text("./[unclosed\n")

        builder = ExcludeListBuilder()
        builder.add_from_file(excludes)

        assert builder.patterns == ("./[unclosed",)

    def test_patterns_kept_verbatim(self, tmp_path):
        excludes = tmp_path / "excludes"
        excludes.write_text("  ./tmp/* \n\t\n./var/log/*\n")

        builder = ExcludeListBuilder()

        assert builder.add_from_file(excludes) == 2
        assert builder.patterns == ("  ./tmp/* ", "./var/log/*")
