"""
Tests for command resolution and platform strategies.

Covers working directory validation, single-pass placeholder
substitution, and per-platform argv extraction.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from termlaunch.core.launch import (
    ErrorKind,
    InvalidDirectoryError,
    LaunchContext,
    PlatformKind,
    default_template,
    get_strategy,
    resolve,
    substitute_placeholders,
)
from termlaunch.core.launch.resolver import has_parent_traversal, validate_directory
from termlaunch.core.launch.strategies import (
    MacOSStrategy,
    PosixShellStrategy,
    UnknownPlatformStrategy,
    WindowsStrategy,
)


def _context(directory: str | Path, command: str = "claude", template: str = "{DIR} {CMD}"):
    return LaunchContext(
        working_directory=str(directory),
        command=command,
        terminal_template=template,
    )


# ============================================================================
# Directory Validation Tests
# ============================================================================


class TestValidateDirectory:
    """Tests for validate_directory and traversal detection."""

    @pytest.mark.parametrize(
        "path",
        ["/tmp/../etc", "../sibling", "a/../../b", "/tmp/..", "C:\\work\\..\\secrets"],
    )
    def test_parent_traversal_rejected(self, path: str) -> None:
        with pytest.raises(InvalidDirectoryError) as exc_info:
            validate_directory(path)
        assert exc_info.value.kind == ErrorKind.INVALID_DIRECTORY
        assert exc_info.value.reason == "path traversal"

    def test_dotted_names_are_not_traversal(self) -> None:
        assert not has_parent_traversal("/home/me/..hidden/x..y")
        assert has_parent_traversal("/home/me/../x")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidDirectoryError) as exc_info:
            validate_directory(str(tmp_path / "nope"))
        assert exc_info.value.reason == "does not exist"

    def test_file_is_not_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "CLAUDE.md"
        target.write_text("")
        with pytest.raises(InvalidDirectoryError) as exc_info:
            validate_directory(str(target))
        assert exc_info.value.reason == "not a directory"

    @pytest.mark.parametrize("path", ["", "   "])
    def test_empty_path(self, path: str) -> None:
        with pytest.raises(InvalidDirectoryError):
            validate_directory(path)

    def test_normalizes_to_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        monkeypatch.chdir(tmp_path)
        result = validate_directory(os.path.join("a", ".", "b") + os.sep)
        assert os.path.isabs(result)
        assert os.path.samefile(result, sub)


# ============================================================================
# Substitution Tests
# ============================================================================


class TestSubstitutePlaceholders:
    """Tests for substitute_placeholders."""

    def test_basic(self) -> None:
        assert substitute_placeholders("cd {DIR} && {CMD}", "/w", "claude") == "cd /w && claude"

    def test_command_text_not_resubstituted(self) -> None:
        """Test {DIR} inside the command survives literally."""
        assert substitute_placeholders("{CMD}", "/tmp", "echo {DIR}") == "echo {DIR}"

    def test_directory_text_not_resubstituted(self) -> None:
        assert substitute_placeholders("{DIR} {CMD}", "/odd/{CMD}", "run") == "/odd/{CMD} run"

    def test_every_occurrence_replaced(self) -> None:
        result = substitute_placeholders("{DIR}:{DIR} {CMD};{CMD}", "/w", "x")
        assert result == "/w:/w x;x"

    def test_backslashes_inserted_literally(self) -> None:
        result = substitute_placeholders("cd /D {DIR}", r"C:\Users\me\1", "x")
        assert result == r"cd /D C:\Users\me\1"


# ============================================================================
# Resolve Tests
# ============================================================================


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.parametrize(
        "template",
        ["{DIR} {CMD}", "", "no placeholders", default_template(PlatformKind.LINUX)],
    )
    def test_traversal_fails_regardless_of_template(self, template: str) -> None:
        with pytest.raises(InvalidDirectoryError) as exc_info:
            resolve(_context("/tmp/../etc", template=template), PlatformKind.LINUX)
        assert exc_info.value.kind == ErrorKind.INVALID_DIRECTORY

    def test_single_pass_in_command_slot(self, tmp_path: Path) -> None:
        resolved = resolve(
            _context(tmp_path, command="echo {DIR}", template="{CMD}"), PlatformKind.LINUX
        )
        assert resolved.argv == ["-c", "echo {DIR}"]

    def test_linux(self, tmp_path: Path) -> None:
        resolved = resolve(_context(tmp_path), PlatformKind.LINUX)
        assert resolved.executable == "/bin/sh"
        assert resolved.argv == ["-c", f"{os.path.abspath(tmp_path)} claude"]
        assert resolved.cwd == os.path.abspath(tmp_path)

    def test_unknown_same_as_linux(self, tmp_path: Path) -> None:
        linux = resolve(_context(tmp_path), PlatformKind.LINUX)
        unknown = resolve(_context(tmp_path), PlatformKind.UNKNOWN)
        assert linux == unknown

    def test_windows(self, tmp_path: Path) -> None:
        template = default_template(PlatformKind.WINDOWS)
        resolved = resolve(_context(tmp_path, template=template), PlatformKind.WINDOWS)
        directory = os.path.abspath(tmp_path)
        assert resolved.executable == "cmd"
        assert resolved.argv == ["/c", f'start cmd /K "cd /D {directory} && claude"']

    def test_macos_osascript_payload(self, tmp_path: Path) -> None:
        template = default_template(PlatformKind.MACOS)
        resolved = resolve(
            _context(tmp_path, command="claude --resume", template=template),
            PlatformKind.MACOS,
        )
        directory = os.path.abspath(tmp_path)
        assert resolved.executable == "osascript"
        assert resolved.argv == [
            "-e",
            f'tell application "Terminal" to do script "cd {directory} && claude --resume"',
        ]

    @pytest.mark.skipif(sys.platform == "win32", reason="requires /bin/sh")
    def test_echo_scenario_executes(self, tmp_path: Path) -> None:
        """Test the resolved argv, when run, prints the substituted line."""
        proj = tmp_path / "proj"
        proj.mkdir()
        resolved = resolve(
            _context(proj, command="run", template="echo {DIR} {CMD}"), PlatformKind.LINUX
        )
        completed = subprocess.run(
            resolved.as_list(), capture_output=True, text=True, check=True
        )
        assert completed.stdout == f"{os.path.abspath(proj)} run\n"


# ============================================================================
# Strategy Tests
# ============================================================================


class TestStrategies:
    """Tests for get_strategy and the strategy implementations."""

    def test_factory(self) -> None:
        assert isinstance(get_strategy(PlatformKind.MACOS), MacOSStrategy)
        assert isinstance(get_strategy(PlatformKind.WINDOWS), WindowsStrategy)
        assert isinstance(get_strategy(PlatformKind.LINUX), PosixShellStrategy)
        assert isinstance(get_strategy(PlatformKind.UNKNOWN), UnknownPlatformStrategy)

    def test_factory_returns_same_instance(self) -> None:
        assert get_strategy(PlatformKind.LINUX) is get_strategy(PlatformKind.LINUX)

    def test_kinds(self) -> None:
        for kind in PlatformKind:
            assert get_strategy(kind).kind == kind

    def test_macos_without_osascript_uses_shell(self) -> None:
        resolved = MacOSStrategy().extract_argv("open -a iTerm /w && claude")
        assert resolved.executable == "/bin/sh"
        assert resolved.argv == ["-c", "open -a iTerm /w && claude"]

    def test_macos_multiline_payload(self) -> None:
        substituted = (
            "osascript -e 'tell application \"Terminal\"\n"
            "    do script \"cd /w && claude\"\n"
            "    activate\n"
            "end tell'"
        )
        resolved = MacOSStrategy().extract_argv(substituted)
        assert resolved.executable == "osascript"
        assert resolved.argv[0] == "-e"
        assert resolved.argv[1].startswith('tell application "Terminal"\n')
        assert resolved.argv[1].endswith("end tell")

    def test_macos_unquoted_payload_passes_remainder(self) -> None:
        resolved = MacOSStrategy().extract_argv("osascript -e do_something")
        assert resolved.executable == "osascript"
        assert resolved.argv == ["-e", "do_something"]

    def test_windows_line_is_single_argument(self) -> None:
        line = 'wt.exe -w -1 new-tab -d "C:\\work" cmd /K claude && echo done'
        resolved = WindowsStrategy().extract_argv(line)
        assert resolved.argv == ["/c", line]

    def test_posix_line_is_single_argument(self) -> None:
        line = "xterm -e \"cd '/w x' && claude; exec bash\""
        resolved = PosixShellStrategy().extract_argv(line)
        assert resolved.argv == ["-c", line]
