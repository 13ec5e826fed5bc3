"""
Tests for directory resolution and derived asset URLs.
"""

from pathlib import Path

from compass_config.examples import build_foundation_config
from compass_config.model import ProjectConfig
from compass_config.paths import http_asset_paths, missing_directories, resolve_directories


class TestResolveDirectories:
    """Directories resolve against the project root."""

    def test_relative_paths(self, tmp_path):
        resolved = resolve_directories(build_foundation_config(), tmp_path)
        assert resolved["sass_dir"] == tmp_path / "_source/assets/sass"
        assert set(resolved) == {"css_dir", "sass_dir", "images_dir", "javascripts_dir"}

    def test_absolute_path_kept(self, tmp_path):
        config = ProjectConfig(css_dir="/srv/css")
        resolved = resolve_directories(config, tmp_path)
        assert resolved["css_dir"] == Path("/srv/css")

    def test_unset_paths_skipped(self):
        resolved = resolve_directories(ProjectConfig(sass_dir="sass"), "/project")
        assert list(resolved) == ["sass_dir"]


class TestHttpAssetPaths:
    """Asset URLs are built from http_path and the directories."""

    def test_foundation_urls(self):
        urls = http_asset_paths(build_foundation_config())
        assert urls == {
            "http_stylesheets_path": "_site/_source/assets/stylesheets",
            "http_images_path": "_site/_source/assets/images",
            "http_javascripts_path": "_site/_source/assets/javascript",
        }

    def test_default_http_path(self):
        urls = http_asset_paths(ProjectConfig(images_dir="images"))
        assert urls == {"http_images_path": "/images"}

    def test_missing_slash_joined(self):
        urls = http_asset_paths(ProjectConfig(http_path="/static", css_dir="/css"))
        assert urls["http_stylesheets_path"] == "/static/css"


class TestMissingDirectories:
    """Only reports; never creates directories."""

    def test_all_missing(self, tmp_path):
        missing = missing_directories(build_foundation_config(), tmp_path)
        assert missing == ["css_dir", "sass_dir", "images_dir", "javascripts_dir"]
        assert not (tmp_path / "_source").exists()

    def test_some_present(self, tmp_path):
        (tmp_path / "_source/assets/sass").mkdir(parents=True)
        (tmp_path / "_source/assets/images").mkdir(parents=True)
        missing = missing_directories(build_foundation_config(), tmp_path)
        assert missing == ["css_dir", "javascripts_dir"]
