from enum import Enum
from typing import NoReturn, Optional
import typer
import yaml
from pydantic import ValidationError
from .config import load_config, ReporterConfig
from .logging import setup_logging
from .reporters.tap import TapReporter
from .runners.recording import load_recording, replay

app = typer.Typer(add_completion=False, help="TAP Reporter - render browser test runs as TAP version 13")

class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"

def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=2)

def _config(path: Optional[str]) -> ReporterConfig:
    if path is None:
        return ReporterConfig()
    try:
        return load_config(path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        _fail(f"cannot load config {path}: {e}")

@app.command()
def render(
    recording: str = typer.Argument(..., help="Recorded run (YAML or JSON) to replay"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to reporter config YAML"),
    outfile: Optional[str] = typer.Option(None, "--outfile", "-o", help="Append TAP output to this file instead of stdout"),
    log_level: LogLevel = typer.Option(LogLevel.warning, "--log-level", case_sensitive=False, help="Log level for stderr diagnostics"),
):
    log = setup_logging(log_level.value)
    cfg = _config(config)
    if outfile:
        cfg = cfg.model_copy(update={"outfile": outfile})
    try:
        rec = load_recording(recording)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        _fail(f"cannot load recording {recording}: {e}")
    try:
        reporter = TapReporter(config=cfg)
    except OSError as e:
        _fail(f"cannot prepare outfile {cfg.outfile}: {e}")

    state = replay(rec, reporter)
    log.info("Rendered %d tests, %d failed, %d skipped", state.total, state.failures, state.skips)
    raise typer.Exit(code=0 if state.failures == 0 else 1)

@app.command("check-config")
def check_config(path: str = typer.Argument(..., help="Path to reporter config YAML")):
    cfg = _config(path)
    typer.echo(f"outfile: {cfg.outfile}" if cfg.outfile else "outfile: <stdout>")
