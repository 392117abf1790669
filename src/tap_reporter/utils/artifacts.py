import logging
import pathlib

log = logging.getLogger(__name__)

def prepare_outfile(path: str) -> pathlib.Path:
    """Remove a previous run's output and make sure the parent directory exists.

    A missing file is fine; any other OSError (permissions, path is a directory)
    propagates and aborts reporter setup.
    """
    p = pathlib.Path(path)
    try:
        p.unlink()
    except FileNotFoundError:
        pass
    else:
        log.debug("Removed previous output %s", p)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
