import subprocess
from collections import namedtuple
from types import MappingProxyType


class Environment(namedtuple("Environment", ["prefers_dark", "default_target"])):
    """Ambient state a theme is applied against.

    prefers_dark: zero-argument callable returning the system dark preference
    default_target: zero-argument callable returning the StyleNode to write to
    """

    __slots__ = ()


GSETTINGS_COMMAND = [
    "gsettings",
    "get",
    "org.gnome.desktop.interface",
    "color-scheme",
]


class StyleNode:
    """A styled element: a CSS selector plus its custom properties."""

    def __init__(self, selector=":root"):
        self.selector = selector
        self._properties = {}

    @property
    def properties(self):
        """Read-only view of the properties in the order they were first set."""
        return MappingProxyType(self._properties)

    def set_property(self, name, value):
        self._properties[name] = value

    def get_property(self, name):
        return self._properties.get(name, "")

    def remove_property(self, name):
        return self._properties.pop(name, "")

    def to_css(self, indent=""):
        lines = [f"{indent}{self.selector} {{"]
        for name, value in self._properties.items():
            lines.append(f"{indent}  {name}: {value};")
        lines.append(f"{indent}}}")
        return "\n".join(lines)

    def __repr__(self):
        return f"StyleNode({self.selector!r}, {len(self._properties)} properties)"


_document_root = StyleNode(":root")


def document_root():
    """The process-wide root node themes are applied to by default."""
    return _document_root


def system_prefers_dark():
    """Whether the desktop asks applications for a dark color scheme.

    Reads the GNOME color-scheme setting; machines without gsettings, or
    where the query fails, report no dark preference.
    """
    try:
        result = subprocess.run(
            GSETTINGS_COMMAND, capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError):
        return False
    return "prefer-dark" in result.stdout


def default_environment():
    return Environment(prefers_dark=system_prefers_dark, default_target=document_root)
