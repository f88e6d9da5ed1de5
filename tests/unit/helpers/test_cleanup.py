"""Unit tests for legacy artifact cleanup."""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from safari_ext_builder.helpers.cleanup import (
    CleanupResult,
    cleanup_legacy_artifacts,
    remove_path,
    sanitize_project_name,
)
from safari_ext_builder.pipeline.config import PipelineConfig

DERIVED_DATA = Path("Library/Developer/Xcode/DerivedData")


@pytest.fixture
def workspace(tmp_path):
    """Project output directory and a fake home with DerivedData."""
    output = tmp_path / "safari"
    home = tmp_path / "home"
    output.mkdir()
    (home / DERIVED_DATA).mkdir(parents=True)
    return output, home


def make_config(output, home, legacy_names, **kwargs):
    return PipelineConfig(
        app_name="Current",
        project_location=output,
        home_dir=home,
        legacy_names=tuple(legacy_names),
        **kwargs,
    )


class TestSanitizeProjectName:
    """Test DerivedData name sanitization."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("AllAPIHub", "AllAPIHub"),
            ("All API Hub", "All_API_Hub"),
            ("my-app.v2", "my_app_v2"),
            ("snake_case_1", "snake_case_1"),
            ("Ünïcode!", "_n_code_"),
            ("", ""),
        ],
    )
    def test_sanitize(self, name, expected):
        assert sanitize_project_name(name) == expected

    @pytest.mark.parametrize("name", ["All API Hub", "a-b.c/d", "x__y", "🚀 launch"])
    def test_sanitize_is_idempotent(self, name):
        once = sanitize_project_name(name)
        assert sanitize_project_name(once) == once


class TestRemovePath:
    """Test the forced removal helper."""

    def test_missing_path_returns_false(self, tmp_path):
        assert remove_path(tmp_path / "missing") is False

    def test_removes_nested_tree(self, tmp_path):
        target = tmp_path / "tree"
        (target / "a" / "b").mkdir(parents=True)
        (target / "a" / "b" / "file.txt").write_text("data")

        assert remove_path(target) is True
        assert not target.exists()

    def test_removes_plain_file(self, tmp_path):
        target = tmp_path / "stale"
        target.write_text("not a project")

        assert remove_path(target) is True
        assert not target.exists()

    def test_symlink_is_unlinked_not_followed(self, tmp_path):
        real = tmp_path / "real"
        (real / "keep").mkdir(parents=True)
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        assert remove_path(link) is True
        assert not link.is_symlink()
        assert (real / "keep").is_dir()

    def test_removes_dangling_symlink(self, tmp_path):
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "gone")

        assert remove_path(link) is True
        assert not link.is_symlink()


class TestCleanupLegacyArtifacts:
    """Test cleanup of legacy projects and DerivedData."""

    def test_removes_projects_and_matching_derived_data(self, workspace):
        output, home = workspace
        (output / "Old1").mkdir()
        (output / "Old2" / "Old2.xcodeproj").mkdir(parents=True)
        derived = home / DERIVED_DATA
        for name in ["Old1-ABCDEF", "Old2Suffix", "Unrelated-XYZ"]:
            (derived / name).mkdir()

        result = cleanup_legacy_artifacts(make_config(output, home, ["Old1", "Old2"]))

        assert result == CleanupResult(projects_removed=2, derived_data_removed=1)
        assert not (output / "Old1").exists()
        assert not (output / "Old2").exists()
        assert not (derived / "Old1-ABCDEF").exists()
        assert (derived / "Old2Suffix").exists()
        assert (derived / "Unrelated-XYZ").exists()

    def test_file_and_symlink_at_legacy_paths_are_removed(self, workspace, tmp_path):
        output, home = workspace
        (output / "Old1").write_text("left over")
        target = tmp_path / "elsewhere"
        target.mkdir()
        (output / "Old2").symlink_to(target, target_is_directory=True)

        result = cleanup_legacy_artifacts(make_config(output, home, ["Old1", "Old2"]))

        assert result.projects_removed == 2
        assert not (output / "Old1").exists()
        assert not (output / "Old2").is_symlink()
        assert target.is_dir()

    def test_sanitized_prefix_matches_names_with_spaces(self, workspace):
        output, home = workspace
        derived = home / DERIVED_DATA
        (derived / "All_API_Hub-gfhxkqwzbyrjds").mkdir()
        (derived / "All API Hub-abc").mkdir()

        result = cleanup_legacy_artifacts(make_config(output, home, ["All API Hub"]))

        assert result.derived_data_removed == 1
        assert not (derived / "All_API_Hub-gfhxkqwzbyrjds").exists()
        assert (derived / "All API Hub-abc").exists()

    def test_current_project_is_untouched(self, workspace):
        output, home = workspace
        (output / "Current").mkdir()
        (home / DERIVED_DATA / "Current-ABC").mkdir()

        cleanup_legacy_artifacts(make_config(output, home, ["Old"]))

        assert (output / "Current").exists()
        assert (home / DERIVED_DATA / "Current-ABC").exists()

    def test_missing_projects_are_not_counted(self, workspace):
        output, home = workspace
        result = cleanup_legacy_artifacts(make_config(output, home, ["Old1", "Old2"]))
        assert result == CleanupResult(0, 0)

    def test_files_in_derived_data_are_ignored(self, workspace):
        output, home = workspace
        stray = home / DERIVED_DATA / "Old1-info.plist"
        stray.write_text("")

        result = cleanup_legacy_artifacts(make_config(output, home, ["Old1"]))

        assert result.derived_data_removed == 0
        assert stray.exists()

    def test_skip_cleanup_touches_nothing(self, workspace):
        output, home = workspace
        (output / "Old1").mkdir()
        (home / DERIVED_DATA / "Old1-ABC").mkdir()

        with patch("safari_ext_builder.helpers.cleanup.shutil.rmtree") as mock_rmtree:
            result = cleanup_legacy_artifacts(
                make_config(output, home, ["Old1"], skip_cleanup=True)
            )

        mock_rmtree.assert_not_called()
        assert result == CleanupResult(0, 0)
        assert (output / "Old1").exists()
        assert (home / DERIVED_DATA / "Old1-ABC").exists()

    def test_empty_legacy_names_is_noop(self, workspace):
        output, home = workspace
        with patch("safari_ext_builder.helpers.cleanup.shutil.rmtree") as mock_rmtree:
            result = cleanup_legacy_artifacts(make_config(output, home, []))

        mock_rmtree.assert_not_called()
        assert result == CleanupResult(0, 0)

    def test_no_home_skips_derived_data(self, tmp_path):
        output = tmp_path / "safari"
        (output / "Old1").mkdir(parents=True)

        result = cleanup_legacy_artifacts(make_config(output, None, ["Old1"]))

        assert result == CleanupResult(projects_removed=1, derived_data_removed=0)

    def test_missing_derived_data_root_is_not_an_error(self, tmp_path):
        output = tmp_path / "safari"
        output.mkdir()
        home = tmp_path / "empty-home"
        home.mkdir()

        result = cleanup_legacy_artifacts(make_config(output, home, ["Old1"]))

        assert result == CleanupResult(0, 0)

    def test_removal_failure_is_logged_and_skipped(self, workspace, caplog):
        output, home = workspace
        (output / "Old1").mkdir()
        (output / "Old2").mkdir()
        (home / DERIVED_DATA / "Old1-ABC").mkdir()

        real_rmtree = shutil.rmtree

        def flaky_rmtree(path, *args, **kwargs):
            if Path(path).name == "Old1":
                raise PermissionError("permission denied")
            return real_rmtree(path, *args, **kwargs)

        with patch(
            "safari_ext_builder.helpers.cleanup.shutil.rmtree", side_effect=flaky_rmtree
        ):
            with caplog.at_level("WARNING"):
                result = cleanup_legacy_artifacts(
                    make_config(output, home, ["Old1", "Old2"])
                )

        assert result == CleanupResult(projects_removed=1, derived_data_removed=1)
        assert (output / "Old1").exists()
        assert not (output / "Old2").exists()
        assert "permission denied" in caplog.text

    def test_listing_failure_does_not_raise(self, workspace):
        output, home = workspace
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            result = cleanup_legacy_artifacts(make_config(output, home, ["Old1"]))
        assert result.derived_data_removed == 0

    def test_prints_summary(self, workspace, capsys):
        output, home = workspace
        (output / "Old1").mkdir()

        cleanup_legacy_artifacts(make_config(output, home, ["Old1"]))

        assert "1 project(s), 0 DerivedData folder(s)" in capsys.readouterr().out
