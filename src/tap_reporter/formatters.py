"""Default user-agent and error formatters, used when the host supplies none."""
from __future__ import annotations
import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple
import yaml

# order matters: Edge and Opera UAs also advertise Chrome, Chrome advertises Safari
_BROWSERS: List[Tuple[str, str]] = [
    ("Edge", r"Edg(?:e|A|iOS)?/([\d.]+)"),
    ("Opera", r"OPR/([\d.]+)"),
    ("Firefox", r"Firefox/([\d.]+)"),
    ("Chrome Headless", r"HeadlessChrome/([\d.]+)"),
    ("Chrome", r"Chrome/([\d.]+)"),
    ("Safari", r"Version/([\d.]+).*Safari/"),
]
_SYSTEMS: List[Tuple[str, str]] = [
    ("Windows", r"Windows NT ([\d.]+)"),
    ("iOS", r"(?:iPhone|iPad).*? OS ([\d_]+)"),
    ("Mac OS X", r"Mac OS X ([\d_.]+)"),
    ("Android", r"Android ([\d.]+)"),
    ("Linux", r"Linux"),
]
_WINDOWS = {"10.0": "10", "6.3": "8.1", "6.2": "8", "6.1": "7"}

def _short(version: str, parts: int = 3) -> str:
    return ".".join(version.replace("_", ".").split(".")[:parts])

def _system(ua: str) -> Optional[str]:
    for name, pattern in _SYSTEMS:
        m = re.search(pattern, ua)
        if not m:
            continue
        if not m.groups():
            return name
        version = m.group(1)
        if name == "Windows":
            version = _WINDOWS.get(version, version)
        return f"{name} {_short(version)}"
    return None

def format_ua(full_name: str) -> str:
    """Shorten a user agent to ``Chrome 90.0.4430 (Mac OS X 10.15.7)``; unknown names pass through trimmed."""
    ua = (full_name or "").strip()
    for name, pattern in _BROWSERS:
        m = re.search(pattern, ua)
        if m:
            label = f"{name} {_short(m.group(1))}"
            system = _system(ua)
            return f"{label} ({system})" if system else label
    return ua

def format_error(err: Any, indentation: str = "") -> str:
    if isinstance(err, str):
        text = err
    elif isinstance(err, Mapping):
        text = str(err.get("stack") or err.get("message") or dict(err))
    elif isinstance(err, BaseException):
        text = str(err) or type(err).__name__
    else:
        text = repr(err)
    lines = text.rstrip().splitlines() or [""]
    return "\n".join(indentation + line if line else line for line in lines)

class _FailureDumper(yaml.SafeDumper):
    # indent sequence items under their key
    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)

def _str_representer(dumper: yaml.SafeDumper, data: str):
    style = "|" if "\n" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)

_FailureDumper.add_representer(str, _str_representer)

def dump_failures(failures: List[str], indent: int = 4) -> str:
    """YAML body of a TAP diagnostic block, indented and without a trailing newline."""
    text = yaml.dump({"failures": list(failures)}, Dumper=_FailureDumper, default_flow_style=False,
                     sort_keys=False, allow_unicode=True, width=float("inf"))
    pad = " " * indent
    return "\n".join(pad + line if line.strip() else line for line in text.rstrip("\n").split("\n"))
