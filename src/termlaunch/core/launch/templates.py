"""
Terminal command templates.

A template is a shell-level command line containing the ``{DIR}`` and
``{CMD}`` placeholders. This module owns the per-platform defaults, the
example catalogue shown to users, and template validation.
"""

from __future__ import annotations

from dataclasses import dataclass

from termlaunch.core.launch.models import ErrorKind, PlatformKind, TemplateError

DIR_PLACEHOLDER = "{DIR}"
CMD_PLACEHOLDER = "{CMD}"

MACOS_DEFAULT_TEMPLATE = (
    "osascript -e 'tell application \"Terminal\" to do script \"cd {DIR} && {CMD}\"'"
)
WINDOWS_DEFAULT_TEMPLATE = 'start cmd /K "cd /D {DIR} && {CMD}"'
LINUX_DEFAULT_TEMPLATE = (
    'gnome-terminal --working-directory="{DIR}" -- bash -c "{CMD}; exec bash"'
)


@dataclass(frozen=True)
class TemplateExample:
    """A named alternative template for a terminal application."""

    name: str
    template: str


_EXAMPLES: dict[PlatformKind, list[TemplateExample]] = {
    PlatformKind.MACOS: [
        TemplateExample("Terminal.app", MACOS_DEFAULT_TEMPLATE),
        TemplateExample(
            "iTerm2",
            "osascript -e 'tell application \"iTerm2\" to create window with "
            "default profile command \"cd {DIR} && {CMD}\"'",
        ),
    ],
    PlatformKind.WINDOWS: [
        TemplateExample("cmd.exe", WINDOWS_DEFAULT_TEMPLATE),
        TemplateExample("Windows Terminal", 'wt.exe -w -1 new-tab -d "{DIR}" cmd /K {CMD}'),
        TemplateExample(
            "PowerShell",
            "start pwsh -NoExit -Command \"Set-Location '{DIR}'; {CMD}\"",
        ),
    ],
    PlatformKind.LINUX: [
        TemplateExample("gnome-terminal", LINUX_DEFAULT_TEMPLATE),
        TemplateExample("konsole", 'konsole --workdir "{DIR}" --noclose -e {CMD}'),
        TemplateExample("xterm", 'xterm -e "cd {DIR} && {CMD}; exec bash"'),
    ],
}


def default_template(platform: PlatformKind) -> str:
    """
    Return the canonical template for a platform.

    UNKNOWN platforms get the Linux template.

    Args:
        platform: Platform to look up

    Returns:
        Template string containing both placeholders
    """
    from termlaunch.core.launch.strategies import get_strategy

    return get_strategy(platform).default_template()


def template_examples(platform: PlatformKind) -> list[TemplateExample]:
    """Return example templates for a platform (Linux examples for UNKNOWN)."""
    if platform == PlatformKind.UNKNOWN:
        platform = PlatformKind.LINUX
    return list(_EXAMPLES[platform])


def validate_template(template: str) -> None:
    """
    Validate a terminal template.

    Args:
        template: Template to check

    Raises:
        TemplateError: EMPTY_TEMPLATE if blank, MISSING_PLACEHOLDER if
            either {DIR} or {CMD} is absent

    Examples:
        >>> validate_template('xterm -e "cd {DIR} && {CMD}"')
        >>> validate_template("")
        Traceback (most recent call last):
        ...
        TemplateError: Terminal template is empty.
    """
    if not template or not template.strip():
        raise TemplateError(ErrorKind.EMPTY_TEMPLATE)

    missing = [p for p in (DIR_PLACEHOLDER, CMD_PLACEHOLDER) if p not in template]
    if missing:
        raise TemplateError(
            ErrorKind.MISSING_PLACEHOLDER,
            f"Terminal template must contain {DIR_PLACEHOLDER} and {CMD_PLACEHOLDER} "
            f"placeholders (missing: {', '.join(missing)})",
        )


def is_valid_template(template: str) -> bool:
    """Whether a template passes validate_template()."""
    try:
        validate_template(template)
    except TemplateError:
        return False
    return True


__all__ = [
    "CMD_PLACEHOLDER",
    "DIR_PLACEHOLDER",
    "LINUX_DEFAULT_TEMPLATE",
    "MACOS_DEFAULT_TEMPLATE",
    "TemplateExample",
    "WINDOWS_DEFAULT_TEMPLATE",
    "default_template",
    "is_valid_template",
    "template_examples",
    "validate_template",
]
