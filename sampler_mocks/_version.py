from importlib import metadata
from pathlib import Path
import tomllib

DISTRIBUTION_NAME = "deterministic-sampler-mocks"


def _get_version() -> str:
    current_file = Path(__file__)
    pyproject_path = current_file.parent.parent / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return str(pyproject_data["project"]["version"])
    except (FileNotFoundError, KeyError):
        pass

    # Installed without the source tree next to it
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        raise ValueError("Failed to read version from pyproject.toml or package metadata")


SDK_VERSION = _get_version()
