"""
Compilation Service Configuration

Loads the remote LaTeX compilation service settings from compile_service.yaml,
with environment variable overrides for the values deployments usually change.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
COMPILE_SERVICE_CONFIG_PATH = Path(
    os.getenv(
        "COMPILE_SERVICE_CONFIG_PATH", str(Path(__file__).parent / "compile_service.yaml")
    )
)

# Environment variable -> config key
ENV_OVERRIDES = {
    "LATEX_SERVICE_URL": "url",
    "LATEX_ENGINE": "engine",
    "LATEX_SERVICE_TIMEOUT": "timeout_s",
}


@dataclass(frozen=True)
class CompileServiceConfig:
    """
    Settings for one remote compilation service.

    Attributes:
        url: Endpoint accepting the multipart submission
        engine: LaTeX engine selector (e.g., pdflatex)
        output_format: Requested output format selector (e.g., pdf)
        source_filename: Name given to the submitted source file
        timeout_s: Transport timeout in seconds for the single request
    """

    url: str = "https://texlive.net/cgi-bin/latexcgi.pl"
    engine: str = "pdflatex"
    output_format: str = "pdf"
    source_filename: str = "resume.tex"
    timeout_s: float = 60


def load_service_config(config_path: Path = None) -> CompileServiceConfig:
    """
    Load service settings from YAML and apply environment overrides.

    Args:
        config_path: Optional YAML path (defaults to COMPILE_SERVICE_CONFIG_PATH)

    Returns:
        CompileServiceConfig

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If LATEX_SERVICE_TIMEOUT is not a number
    """
    if config_path is None:
        config_path = COMPILE_SERVICE_CONFIG_PATH

    values = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    for env_var, key in ENV_OVERRIDES.items():
        override = os.getenv(env_var)
        if override:
            values[key] = override

    return CompileServiceConfig(
        url=str(values["url"]),
        engine=str(values["engine"]),
        output_format=str(values["output_format"]),
        source_filename=str(values["source_filename"]),
        timeout_s=float(values["timeout_s"]),
    )
