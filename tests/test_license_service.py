# =============================================================================
# File: test_license_service.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import pytest

from copywriter.config.appsettings import AppSettings
from copywriter.exceptions.custom_exceptions import DiscoveryError
from copywriter.services.license_service import LicenseService, normalize_license_text


@pytest.fixture
def shallow_settings():
    settings = AppSettings()
    settings.license.max_search_depth = 3
    return settings


class TestFindLicenseFile:

    def test_found_in_ancestor(self, tmp_path, shallow_settings):
        (tmp_path / "LICENSE").write_text("MIT\n", encoding="utf-8")
        nested = tmp_path / "proj" / "src"
        nested.mkdir(parents=True)

        found = LicenseService.find_license_file(str(nested), shallow_settings)

        assert found == str(tmp_path / "LICENSE")

    def test_file_target_searches_its_directory(self, tmp_path, shallow_settings):
        (tmp_path / "LICENSE.md").write_text("MIT\n", encoding="utf-8")
        target = tmp_path / "main.py"
        target.write_text("x = 1\n", encoding="utf-8")

        assert LicenseService.find_license_file(str(target), shallow_settings) == str(tmp_path / "LICENSE.md")

    def test_case_variant_matches(self, tmp_path, shallow_settings):
        (tmp_path / "license.txt").write_text("MIT\n", encoding="utf-8")
        assert LicenseService.find_license_file(str(tmp_path), shallow_settings) == str(tmp_path / "license.txt")

    def test_priority_follows_configured_order(self, tmp_path, shallow_settings):
        (tmp_path / "COPYING").write_text("GPL\n", encoding="utf-8")
        (tmp_path / "LICENSE.md").write_text("MIT\n", encoding="utf-8")
        assert LicenseService.find_license_file(str(tmp_path), shallow_settings) == str(tmp_path / "LICENSE.md")

    def test_directories_named_license_are_ignored(self, tmp_path, shallow_settings):
        (tmp_path / "a" / "b" / "LICENSE").mkdir(parents=True)
        assert LicenseService.find_license_file(str(tmp_path / "a" / "b"), shallow_settings) is None

    def test_search_depth_is_bounded(self, tmp_path, shallow_settings):
        (tmp_path / "LICENSE").write_text("MIT\n", encoding="utf-8")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        assert LicenseService.find_license_file(str(deep), shallow_settings) is None


class TestResolve:

    def test_explicit_license(self, tmp_path, make_options):
        license_file = tmp_path / "terms.txt"
        license_file.write_text("\nMIT License   \n\nPermission.\n\n", encoding="utf-8")
        options = make_options(tmp_path, license_path=str(license_file))

        assert LicenseService.resolve(options, AppSettings()) == "MIT License\n\nPermission."

    def test_explicit_license_missing(self, tmp_path, make_options):
        options = make_options(tmp_path, license_path=str(tmp_path / "missing"))
        with pytest.raises(DiscoveryError):
            LicenseService.resolve(options, AppSettings())

    def test_explicit_license_empty(self, tmp_path, make_options):
        license_file = tmp_path / "LICENSE"
        license_file.write_text("\n  \n", encoding="utf-8")
        options = make_options(tmp_path, license_path=str(license_file))
        with pytest.raises(DiscoveryError):
            LicenseService.resolve(options, AppSettings())

    def test_discovered_license(self, tmp_path, make_options, shallow_settings):
        (tmp_path / "LICENSE").write_text("MIT\n", encoding="utf-8")
        assert LicenseService.resolve(make_options(tmp_path), shallow_settings) == "MIT"

    def test_nothing_discovered(self, tmp_path, make_options, shallow_settings):
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        assert LicenseService.resolve(make_options(deep), shallow_settings) is None

    def test_undecodable_license(self, tmp_path, make_options):
        license_file = tmp_path / "LICENSE"
        license_file.write_bytes(b"\xff\xfe\x81")
        options = make_options(tmp_path, license_path=str(license_file))
        with pytest.raises(DiscoveryError):
            LicenseService.resolve(options, AppSettings())


class TestNormalizeLicenseText:

    def test_strips_outer_blank_lines_and_trailing_spaces(self):
        assert normalize_license_text("\n\nMIT  \n\nterms\t\n\n") == "MIT\n\nterms"

    def test_blank_text(self):
        assert normalize_license_text("  \n\n") is None

    def test_bom_removed(self):
        assert normalize_license_text("\ufeffMIT\n") == "MIT"
