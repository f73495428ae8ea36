"""Tests for the resolver lookup algorithm and its diagnostic trail."""

import os
from pathlib import Path

from autoload_cli.host import FileSystem
from autoload_cli.registry import PathRegistry
from autoload_cli.resolver import Resolver

from conftest import write_source


def make_resolver(search_path=()) -> Resolver:
    return Resolver(PathRegistry(), FileSystem(search_path=list(search_path)))


class TestOverrides:
    def test_override_returned_without_existence_check(self, src: Path):
        resolver = make_resolver()
        resolver.registry.set_override("pkg.Widget", "/does/not/exist.py")
        # A real file under a matching prefix must not win over the override
        write_source(src, "pkg/Widget.py")
        resolver.registry.add("pkg.", str(src))

        resolution = resolver.find("pkg.Widget")

        assert resolution.path == "/does/not/exist.py"
        assert resolution.source == "override"
        assert resolution.trail == ()


class TestPrefixes:
    def test_finds_file_under_prefix_root(self, src: Path):
        expected = write_source(src, "pkg/Widget.py")
        resolver = make_resolver()
        resolver.registry.add("pkg.", str(src))

        resolution = resolver.find("pkg.Widget")

        assert resolution.found
        assert resolution.path == str(expected)
        assert resolution.source == "prefix"
        assert resolution.trail == (f"{src} (prefix pkg.)",)

    def test_underscore_leaf_maps_to_directories(self, src: Path):
        expected = write_source(src, "ns/Baz/Dib.py")
        resolver = make_resolver()
        resolver.registry.add("ns.", str(src))

        assert resolver.find("ns.Baz_Dib").path == str(expected)

    def test_overlapping_prefix_entries_are_all_tried(self, tmp_path: Path):
        a = tmp_path / "A"
        a.mkdir()
        b = tmp_path / "B"
        expected = write_source(b, "pkg/Widget.py")
        resolver = make_resolver()
        resolver.registry.add("pkg.", str(a))
        resolver.registry.add("pkg.Widget", str(b))

        resolution = resolver.find("pkg.Widget")

        assert resolution.path == str(expected)
        assert resolution.trail == (f"{a} (prefix pkg.)", f"{b} (prefix pkg.Widget)")

    def test_non_matching_entry_does_not_stop_search(self, tmp_path: Path):
        other = tmp_path / "other"
        good = tmp_path / "good"
        expected = write_source(good, "pkg/Widget.py")
        resolver = make_resolver()
        resolver.registry.add("zzz.", str(other))
        resolver.registry.add("pkg.", str(good))

        resolution = resolver.find("pkg.Widget")

        assert resolution.path == str(expected)
        # The non-matching entry is skipped without a trail record
        assert resolution.trail == (f"{good} (prefix pkg.)",)

    def test_directories_tried_in_registration_order(self, tmp_path: Path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        write_source(first, "pkg/Widget.py")
        write_source(second, "pkg/Widget.py")
        resolver = make_resolver()
        resolver.registry.add("pkg.", [str(first), str(second)])

        assert resolver.find("pkg.Widget").path == str(first / "pkg" / "Widget.py")

    def test_prefix_match_is_case_sensitive(self, src: Path):
        write_source(src, "Pkg/Widget.py")
        resolver = make_resolver()
        resolver.registry.add("pkg.", str(src))

        assert not resolver.find("Pkg.Widget").found

    def test_directory_is_not_a_readable_file(self, src: Path):
        (src / "pkg" / "Widget.py").mkdir(parents=True)
        resolver = make_resolver()
        resolver.registry.add("pkg.", str(src))

        assert not resolver.find("pkg.Widget").found


class TestFallback:
    def test_search_path_used_when_prefixes_fail(self, tmp_path: Path):
        lib = tmp_path / "lib"
        expected = write_source(lib, "Foo/Bar.py")
        resolver = make_resolver(search_path=[lib])

        resolution = resolver.find("Foo_Bar")

        assert resolution.path == os.path.realpath(expected)
        assert resolution.source == "search_path"
        assert resolution.trail == (f"{lib} (search path)",)

    def test_search_path_roots_tried_in_order(self, tmp_path: Path):
        one = tmp_path / "one"
        two = tmp_path / "two"
        one.mkdir()
        expected = write_source(two, "Widget.py")
        resolver = make_resolver(search_path=[one, two])

        resolution = resolver.find("Widget")

        assert resolution.path == os.path.realpath(expected)
        assert resolution.trail == (f"{one}{os.pathsep}{two} (search path)",)

    def test_not_found_keeps_full_trail(self, tmp_path: Path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        resolver = make_resolver(search_path=[tmp_path / "lib"])
        resolver.registry.add("pkg.", [str(a), str(b)])

        resolution = resolver.find("pkg.Missing")

        assert not resolution.found
        assert not resolution
        assert resolution.path is None
        assert resolution.trail == (
            f"{a} (prefix pkg.)",
            f"{b} (prefix pkg.)",
            f"{tmp_path / 'lib'} (search path)",
        )

    def test_each_find_has_its_own_trail(self, tmp_path: Path):
        resolver = make_resolver()
        resolver.registry.add("a.", str(tmp_path / "a"))
        resolver.registry.add("b.", str(tmp_path / "b"))

        first = resolver.find("a.Missing")
        second = resolver.find("b.Missing")

        assert first.trail[0] == f"{tmp_path / 'a'} (prefix a.)"
        assert second.trail[0] == f"{tmp_path / 'b'} (prefix b.)"
        assert len(first.trail) == len(second.trail) == 2


class TestFindDirs:
    def test_collects_existing_namespace_dirs(self, tmp_path: Path):
        one = tmp_path / "one"
        two = tmp_path / "two"
        three = tmp_path / "three"
        (one / "Vendor" / "Package").mkdir(parents=True)
        (three / "Vendor" / "Package").mkdir(parents=True)
        two.mkdir()
        resolver = make_resolver()
        resolver.registry.add("Vendor.", [str(one), str(two)])
        resolver.registry.add("Vendor.Package.", str(three))

        found = resolver.find_dirs("Vendor.Package.")

        assert found == [
            str(one / "Vendor" / "Package"),
            str(three / "Vendor" / "Package"),
        ]

    def test_no_match_returns_empty_list(self, tmp_path: Path):
        resolver = make_resolver()
        resolver.registry.add("Other.", str(tmp_path))
        assert resolver.find_dirs("Vendor") == []

    def test_duplicates_collapsed(self, tmp_path: Path):
        (tmp_path / "Vendor").mkdir()
        resolver = make_resolver()
        resolver.registry.add("Vendor.", str(tmp_path))
        resolver.registry.add("Vendor", str(tmp_path))
        assert resolver.find_dirs("Vendor") == [str(tmp_path / "Vendor")]
