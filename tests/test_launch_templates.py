"""
Tests for terminal templates and template validation.
"""

from __future__ import annotations

import pytest

from termlaunch.core.launch import (
    CMD_PLACEHOLDER,
    DIR_PLACEHOLDER,
    ErrorKind,
    PlatformKind,
    TemplateError,
    default_template,
    get_strategy,
    template_examples,
    validate_template,
)
from termlaunch.core.launch.templates import is_valid_template

# ============================================================================
# Default Template Tests
# ============================================================================


class TestDefaultTemplate:
    """Tests for default_template function."""

    @pytest.mark.parametrize("platform", list(PlatformKind))
    def test_contains_both_placeholders(self, platform: PlatformKind) -> None:
        """Test every platform default has {DIR} and {CMD}."""
        template = default_template(platform)
        assert DIR_PLACEHOLDER in template
        assert CMD_PLACEHOLDER in template

    @pytest.mark.parametrize("platform", list(PlatformKind))
    def test_default_passes_validation(self, platform: PlatformKind) -> None:
        """Test every default validates."""
        validate_template(default_template(platform))

    def test_unknown_matches_linux_exactly(self) -> None:
        """Test the UNKNOWN fallback is the Linux template byte-for-byte."""
        for _ in range(3):
            assert default_template(PlatformKind.UNKNOWN) == default_template(PlatformKind.LINUX)

    def test_macos_uses_osascript(self) -> None:
        template = default_template(PlatformKind.MACOS)
        assert template.startswith("osascript -e '")
        assert '"cd {DIR} && {CMD}"' in template
        assert 'tell application "Terminal"' in template

    def test_windows_keeps_console_open(self) -> None:
        assert default_template(PlatformKind.WINDOWS) == 'start cmd /K "cd /D {DIR} && {CMD}"'

    def test_linux_uses_terminal_emulator(self) -> None:
        assert default_template(PlatformKind.LINUX) == (
            'gnome-terminal --working-directory="{DIR}" -- bash -c "{CMD}; exec bash"'
        )

    @pytest.mark.parametrize("platform", list(PlatformKind))
    def test_matches_strategy_default(self, platform: PlatformKind) -> None:
        """Test default_template delegates to the platform strategy."""
        assert default_template(platform) == get_strategy(platform).default_template()


# ============================================================================
# Validation Tests
# ============================================================================


class TestValidateTemplate:
    """Tests for validate_template function."""

    @pytest.mark.parametrize("template", ["", "   ", "\t\n"])
    def test_blank_template(self, template: str) -> None:
        """Test blank templates fail with EMPTY_TEMPLATE."""
        with pytest.raises(TemplateError) as exc_info:
            validate_template(template)
        assert exc_info.value.kind == ErrorKind.EMPTY_TEMPLATE

    def test_no_placeholders(self) -> None:
        """Test a template without placeholders fails with MISSING_PLACEHOLDER."""
        with pytest.raises(TemplateError) as exc_info:
            validate_template("no placeholders here")
        assert exc_info.value.kind == ErrorKind.MISSING_PLACEHOLDER

    def test_missing_cmd(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            validate_template("xterm -e 'cd {DIR}'")
        assert exc_info.value.kind == ErrorKind.MISSING_PLACEHOLDER
        assert "{CMD}" in str(exc_info.value)

    def test_missing_dir(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            validate_template("xterm -e {CMD}")
        assert exc_info.value.kind == ErrorKind.MISSING_PLACEHOLDER
        assert "{DIR}" in str(exc_info.value)

    def test_placeholders_are_case_sensitive(self) -> None:
        assert not is_valid_template("xterm -e 'cd {dir} && {cmd}'")

    def test_valid_template(self) -> None:
        validate_template('xterm -e "cd {DIR} && {CMD}; exec bash"')
        assert is_valid_template("{DIR}{CMD}")


# ============================================================================
# Example Catalogue Tests
# ============================================================================


class TestTemplateExamples:
    """Tests for template_examples function."""

    @pytest.mark.parametrize("platform", list(PlatformKind))
    def test_examples_are_valid(self, platform: PlatformKind) -> None:
        examples = template_examples(platform)
        assert examples
        for example in examples:
            assert is_valid_template(example.template), example.name

    def test_first_example_is_default(self) -> None:
        for platform in PlatformKind:
            assert template_examples(platform)[0].template == default_template(platform)

    def test_known_terminals_listed(self) -> None:
        mac = [e.name for e in template_examples(PlatformKind.MACOS)]
        win = [e.name for e in template_examples(PlatformKind.WINDOWS)]
        linux = [e.name for e in template_examples(PlatformKind.LINUX)]
        assert "iTerm2" in mac
        assert "Windows Terminal" in win and "PowerShell" in win
        assert "konsole" in linux and "xterm" in linux

    def test_unknown_gets_linux_examples(self) -> None:
        assert template_examples(PlatformKind.UNKNOWN) == template_examples(PlatformKind.LINUX)

    def test_returns_copy(self) -> None:
        examples = template_examples(PlatformKind.LINUX)
        examples.clear()
        assert template_examples(PlatformKind.LINUX)
