# Lightweight package init: avoid eager imports that can fail at console start.
__all__ = ["TapReporter", "ReporterConfig"]

def __getattr__(name):
    if name == "TapReporter":
        from .reporters.tap import TapReporter as _TapReporter
        return _TapReporter
    if name == "ReporterConfig":
        from .config import ReporterConfig as _ReporterConfig
        return _ReporterConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
