import os
from pathlib import Path

DEFAULT_FILENAME = "chaincodec.yaml"
ENV_VAR = "CHAINCODECCONFIG"


def get_configfile(cli_path: str | None = None) -> Path | None:
    """
    Resolve the YAML configuration file.

    Priority: explicit path > CHAINCODECCONFIG > chaincodec.yaml in the
    current working directory. The default file is optional; an explicitly
    requested file that does not exist is an error.
    """
    raw = cli_path or os.getenv(ENV_VAR)

    if raw is None:
        file = Path.cwd() / DEFAULT_FILENAME
        return file if file.is_file() else None

    file = Path(raw).expanduser()
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            f"  - Or set the {ENV_VAR} environment variable\n"
            f"  - Or place a '{DEFAULT_FILENAME}' file in the current working directory."
        )

    return file
