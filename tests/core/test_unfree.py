"""Tests for Nix unfree package detection."""

import pytest

from pkgverify.core.unfree import find_unfree_packages, is_unfree_package


class TestIsUnfreePackage:
    """Test is_unfree_package function."""

    @pytest.mark.parametrize(
        "package", ["discord", "spotify", "google-chrome", "1password"]
    )
    def test_known_unfree(self, package: str) -> None:
        assert is_unfree_package(package) is True

    def test_nested_attribute_exact(self) -> None:
        assert is_unfree_package("jetbrains.idea-ultimate") is True

    def test_nested_attribute_by_containment(self) -> None:
        assert is_unfree_package("pkgs.jetbrains.webstorm") is True

    def test_case_and_whitespace_are_normalized(self) -> None:
        assert is_unfree_package("  Discord \n") is True

    @pytest.mark.parametrize("package", ["firefox", "vim", "git", ""])
    def test_free_packages(self, package: str) -> None:
        assert is_unfree_package(package) is False

    def test_containment_over_approximates(self) -> None:
        """Anything containing a listed name is flagged."""
        assert is_unfree_package("steam-run") is True


class TestFindUnfreePackages:
    def test_keeps_input_order(self) -> None:
        selection = ["vim", "steam", "git", "slack"]
        assert find_unfree_packages(selection) == ["steam", "slack"]

    def test_none_found(self) -> None:
        assert find_unfree_packages(["vim", "git"]) == []
