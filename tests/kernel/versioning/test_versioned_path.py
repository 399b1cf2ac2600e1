import pytest

from pe_stage.kernel.versioning import versioned_path


@pytest.mark.parametrize("pattern, version, expected", [
    ("product-:version.tar.gz", "2019.0.0", "product-2019.0.0.tar.gz"),
    (":version/pe-:version.tar.gz", "2019.0.0", "2019.0.0/pe-2019.0.0.tar.gz"),
    ("no-placeholder.tar.gz", "2019.0.0", "no-placeholder.tar.gz"),
    ("pe-:version", "", "pe-"),
    ("pe-:version-el-7", "2019.0.0-rc1", "pe-2019.0.0-rc1-el-7"),
])
def test_version_is_substituted(pattern, version, expected):
    assert versioned_path(pattern, version) == expected


def test_pattern_is_returned_unexpanded_without_version():
    assert versioned_path("product-:version.tar.gz", None) == "product-:version.tar.gz"


@pytest.mark.parametrize("pattern", [
    "puppet-enterprise-:version-el-7-x86_64.tar.gz",
    ":version:version",
    "a:versionb:versionc",
])
def test_substitution_keeps_surrounding_characters(pattern):
    result = versioned_path(pattern, "X")

    assert ":version" not in result
    # Removing the inserted version leaves the pattern's other characters in order.
    assert result.replace("X", "") == pattern.replace(":version", "")


def test_version_containing_placeholder_text_is_not_expanded_again():
    assert versioned_path("pe-:version", ":version") == "pe-:version"
