from pydantic import BaseModel, Field
from typing import Optional
import yaml, pathlib

# section name the reporter options live under in a host config file
SECTION = "tape"

class ReporterConfig(BaseModel):
    outfile: Optional[str] = Field(None, description="Append TAP output to this file instead of stdout")

def load_config(path: str) -> ReporterConfig:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    if isinstance(data, dict) and SECTION in data:
        data = data[SECTION] or {}
    return ReporterConfig.model_validate(data)
