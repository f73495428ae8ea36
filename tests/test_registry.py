"""Tests for PathRegistry prefix and override tables."""

from pathlib import Path

from autoload_cli.registry import PathRegistry


class TestPrefixes:
    """Prefix table is additive only."""

    def test_add_single_path(self):
        registry = PathRegistry()
        registry.add("Foo_", "/path/to/Foo")
        assert registry.get_prefixes() == {"Foo_": ["/path/to/Foo"]}

    def test_add_strips_trailing_separator(self):
        registry = PathRegistry()
        registry.add("pkg.", ["/src/", "/other//"])
        assert registry.get_prefixes() == {"pkg.": ["/src", "/other"]}

    def test_add_keeps_root_directory(self):
        registry = PathRegistry()
        registry.add("pkg.", "/")
        assert registry.get_prefixes() == {"pkg.": ["/"]}

    def test_add_accepts_pathlike(self):
        registry = PathRegistry()
        registry.add("pkg.", Path("/src"))
        assert registry.get_prefixes() == {"pkg.": ["/src"]}

    def test_add_appends_to_existing_prefix(self):
        registry = PathRegistry()
        registry.add("pkg.", "/a")
        registry.add("pkg.", "/b")
        assert registry.get_prefixes() == {"pkg.": ["/a", "/b"]}

    def test_add_all_never_removes_directories(self):
        registry = PathRegistry()
        registry.add("pkg.", "/A")
        registry.add_all({"pkg.": "/B", "other.": ["/C", "/D"]})
        assert registry.get_prefixes() == {"pkg.": ["/A", "/B"], "other.": ["/C", "/D"]}

    def test_registration_order_preserved(self):
        registry = PathRegistry()
        registry.add("b.", "/b")
        registry.add("a.", "/a")
        assert list(registry.get_prefixes()) == ["b.", "a."]

    def test_get_prefixes_is_snapshot(self):
        registry = PathRegistry()
        registry.add("pkg.", "/a")
        snapshot = registry.get_prefixes()
        snapshot["pkg."].append("/mutated")
        snapshot["new."] = ["/x"]
        assert registry.get_prefixes() == {"pkg.": ["/a"]}


class TestOverrides:
    """Override table supports merge-one and replace-all."""

    def test_set_override_and_get_overrides(self):
        registry = PathRegistry()
        registry.set_override("FooBar", "/path/to/FooBar.py")
        assert registry.get_overrides() == {"FooBar": "/path/to/FooBar.py"}

    def test_set_override_merges(self):
        registry = PathRegistry()
        registry.set_override("x", "/1.py")
        registry.set_override("y", "/2.py")
        registry.set_override("x", "/3.py")
        assert registry.get_overrides() == {"x": "/3.py", "y": "/2.py"}

    def test_set_overrides_replaces_whole_table(self):
        registry = PathRegistry()
        registry.set_override("x", "/1.py")
        registry.set_overrides({"y": "/2.py"})
        assert registry.get_overrides() == {"y": "/2.py"}

    def test_set_overrides_copies_mapping(self):
        registry = PathRegistry()
        mapping = {"FooBar": "/path/to/FooBar.py", "BazDib": "/path/to/BazDib.py"}
        registry.set_overrides(mapping)
        mapping["Extra"] = "/extra.py"
        assert registry.get_overrides() == {"FooBar": "/path/to/FooBar.py", "BazDib": "/path/to/BazDib.py"}

    def test_remove_override(self):
        registry = PathRegistry()
        registry.set_override("x", "/1.py")
        assert registry.remove_override("x") is True
        assert registry.remove_override("x") is False
        assert registry.get_overrides() == {}

    def test_overrides_do_not_touch_prefixes(self):
        registry = PathRegistry()
        registry.add("pkg.", "/src")
        registry.set_overrides({})
        assert registry.get_prefixes() == {"pkg.": ["/src"]}
