"""Tests for PathNamer and convert_paths_to_names."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from assettree.naming.models import FileRecord
from assettree.naming.namer import PathNamer, convert_paths_to_names
from assettree.tree.errors import InvalidArgumentError, RootNotFoundError
from assettree.utils.strings import get_extension_from_filename


class TestConvertPathsToNames:
    """Tests for scanning a tree into FileRecords."""

    def test_worked_example(self, sound_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """sounds/sfx/ui/click.wav becomes ui-click, path as discovered."""
        monkeypatch.chdir(sound_tree.parent)

        records = convert_paths_to_names("sounds", base=None)

        click = os.path.join("sounds", "sfx", "ui", "click.wav")
        assert FileRecord(path=click, filename="click.wav", name="ui-click") in records

    def test_all_names(self, sound_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Every file below a type directory gets a name, in traversal order."""
        monkeypatch.chdir(sound_tree.parent)

        records = convert_paths_to_names("sounds", base=None)

        assert [r.name for r in records] == ["level1-boss-theme", "boom", "ui-click"]

    def test_file_directly_under_root_dropped(
        self, sound_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """sounds/readme.txt has no type directory and is dropped."""
        monkeypatch.chdir(sound_tree.parent)

        records = convert_paths_to_names("sounds", base=None)

        assert "readme.txt" not in {r.filename for r in records}

    def test_os_metadata_files_dropped(self, sound_tree: Path) -> None:
        """.DS_Store never becomes a record."""
        records = convert_paths_to_names(sound_tree, base=None)
        assert ".DS_Store" not in {r.filename for r in records}

    def test_resource_base_gives_absolute_paths(
        self, sound_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Scanning through the resource base keeps the resolved paths."""
        monkeypatch.setenv("ASSETTREE_RESOURCE_DIR", str(sound_tree.parent))

        records = convert_paths_to_names("sounds")

        click = next(r for r in records if r.name == "ui-click")
        assert click.path == str(sound_tree / "sfx" / "ui" / "click.wav")

    def test_trailing_separator_on_root(self, sound_tree: Path) -> None:
        """A trailing slash on the root does not change the names."""
        plain = convert_paths_to_names(sound_tree, base=None)
        slashed = convert_paths_to_names(str(sound_tree) + "/", base=None)

        assert [r.name for r in slashed] == [r.name for r in plain]

    def test_idempotent(self, sound_tree: Path) -> None:
        """Two scans of an unchanged tree give identical ordered lists."""
        first = convert_paths_to_names(sound_tree, base=None)
        second = convert_paths_to_names(sound_tree, base=None)

        assert first == second

    def test_names_have_no_separator_or_extension(
        self, make_tree: Callable[..., Path]
    ) -> None:
        """Names never contain a path separator or the file's extension."""
        root = make_tree(
            [
                "sfx/ui/menu/open.wav",
                "sfx/hit.mp3",
                "gfx/tiles/grass.png",
                "gfx/a.b.c.txt",
                "data/.gitkeep",
            ]
        )

        records = convert_paths_to_names(root, base=None)

        assert len(records) == 5
        for record in records:
            assert "/" not in record.name
            assert "\\" not in record.name
            assert "." not in record.name

    def test_name_collisions_are_kept(self, make_tree: Callable[..., Path]) -> None:
        """Different paths may produce the same name; both are returned."""
        root = make_tree(["sfx/ui/click.wav", "music/ui/click.ogg"])

        records = convert_paths_to_names(root, base=None)

        assert [r.name for r in records] == ["ui-click", "ui-click"]
        assert records[0].path != records[1].path

    def test_configured_ignored_filenames(
        self, make_tree: Callable[..., Path], config_writer: Callable[[str], Path]
    ) -> None:
        """The config file's ignored_filenames list is used by default."""
        root = make_tree(["sfx/click.wav", "sfx/notes.md"])
        config_writer('ignored_filenames = ["notes.md"]\n')

        records = convert_paths_to_names(root, base=None)

        assert [r.filename for r in records] == ["click.wav"]

    def test_explicit_ignored_filenames(self, make_tree: Callable[..., Path]) -> None:
        """An explicit ignore list replaces the default one."""
        root = make_tree(["sfx/click.wav", "sfx/.DS_Store"])

        records = convert_paths_to_names(root, base=None, ignored_filenames=[])

        assert [r.name for r in records] == ["DS_Store", "click"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        """A missing root propagates RootNotFoundError."""
        with pytest.raises(RootNotFoundError):
            convert_paths_to_names(tmp_path / "missing", base=None)

    def test_empty_root_raises(self) -> None:
        """An empty root raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            convert_paths_to_names("")

    def test_empty_tree(self, tmp_path: Path) -> None:
        """An empty directory gives no records."""
        assert convert_paths_to_names(tmp_path, base=None) == []


class TestPathNamer:
    """Tests for naming individual paths."""

    @pytest.fixture
    def namer(self) -> PathNamer:
        """Namer for the relative root 'sounds'."""
        return PathNamer("sounds", base=None, ignored_filenames=[".DS_Store"])

    def test_type_tag_stripped(self, namer: PathNamer) -> None:
        """A file directly inside the type directory is named by its stem."""
        record = namer.name_path("sounds/sfx/boom.ogg")

        assert record is not None
        assert record.name == "boom"
        assert record.filename == "boom.ogg"

    def test_nested_directories_hyphenated(self, namer: PathNamer) -> None:
        """Directories below the type tag are joined with hyphens."""
        record = namer.name_path("sounds/music/level1/boss/theme.mp3")

        assert record is not None
        assert record.name == "level1-boss-theme"

    def test_multi_dot_filename(self, namer: PathNamer) -> None:
        """Only text before the first dot is the name; the extension is the second field."""
        record = namer.name_path("sounds/docs/a.b.c.txt")

        assert record is not None
        assert record.name == "a"
        assert get_extension_from_filename(record.filename) == "b"

    def test_hyphenated_filename(self, namer: PathNamer) -> None:
        """Hyphens in filenames are kept literally."""
        record = namer.name_path("sounds/sfx/ui/big-boom.wav")

        assert record is not None
        assert record.name == "ui-big-boom"
        assert record.filename == "big-boom.wav"

    def test_hidden_file(self, namer: PathNamer) -> None:
        """A leading dot is skipped when taking the name."""
        record = namer.name_path("sounds/sfx/ui/.gitkeep")

        assert record is not None
        assert record.name == "ui-gitkeep"

    def test_extensionless_file(self, namer: PathNamer) -> None:
        """A filename without a dot is used whole."""
        record = namer.name_path("sounds/docs/README")

        assert record is not None
        assert record.name == "README"

    def test_dots_only_filename_dropped(self, namer: PathNamer) -> None:
        """A filename with no name part is dropped."""
        assert namer.name_path("sounds/sfx/...") is None

    def test_directly_under_root_dropped(self, namer: PathNamer) -> None:
        """A file with no type directory is dropped."""
        assert namer.name_path("sounds/readme.txt") is None

    def test_ignored_filename_dropped(self, namer: PathNamer) -> None:
        """Ignored filenames are dropped."""
        assert namer.name_path("sounds/sfx/.DS_Store") is None

    def test_outside_root_dropped(self, namer: PathNamer) -> None:
        """A path not under the root is dropped."""
        assert namer.name_path("music/sfx/click.wav") is None

    def test_absolute_path_does_not_match_relative_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """/sounds/... is not under the relative root sounds."""
        monkeypatch.chdir(tmp_path)
        namer = PathNamer("sounds", base=None, ignored_filenames=[])

        assert namer.name_path("/sounds/sfx/ui/click.wav") is None
        assert namer.name_path("sounds/sfx/ui/click.wav") is not None

    def test_absolute_root_matches_absolute_paths(self) -> None:
        """The filesystem root itself is a valid scan root."""
        namer = PathNamer("/", base=None, ignored_filenames=[])

        record = namer.name_path("/sfx/ui/click.wav")

        assert record is not None
        assert record.name == "ui-click"

    def test_dotted_directory_kept_in_name(self, namer: PathNamer) -> None:
        """Directory segments are used verbatim; only the filename loses its suffix."""
        record = namer.name_path("sounds/sfx/v1.2/click.wav")

        assert record is not None
        assert record.name == "v1.2-click"

    def test_backslash_separators(self) -> None:
        """Backslash-separated paths are decomposed like slash-separated ones."""
        namer = PathNamer("sounds", base=None, ignored_filenames=[])

        record = namer.name_path("sounds\\sfx\\ui\\click.wav")

        assert record is not None
        assert record.name == "ui-click"
        assert record.filename == "click.wav"

    def test_absolute_paths_with_relative_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Absolute walker output matches a relative root via its resolved form."""
        monkeypatch.chdir(tmp_path)
        namer = PathNamer("sounds", base=None, ignored_filenames=[])

        record = namer.name_path(str(tmp_path / "sounds" / "sfx" / "ui" / "click.wav"))

        assert record is not None
        assert record.name == "ui-click"

    def test_name_files_preserves_order(self, namer: PathNamer) -> None:
        """Surviving records keep their relative order."""
        files = [
            "sounds/sfx/z.wav",
            "sounds/readme.txt",
            "sounds/sfx/a.wav",
            "sounds/sfx/.DS_Store",
            "sounds/music/m.ogg",
        ]

        records = namer.name_files(files)

        assert [r.name for r in records] == ["z", "a", "m"]

    def test_empty_root_rejected(self) -> None:
        """PathNamer('') raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            PathNamer("")
