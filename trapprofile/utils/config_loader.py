import tomllib
from pathlib import Path

from trapprofile.core.exceptions import ConfigurationError
from trapprofile.motion_profiles.limits import KinematicLimits


def load_config_toml(file_path: str | Path) -> dict:
    try:
        with Path(file_path).open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file '{file_path}' not found.") from None
    except tomllib.TOMLDecodeError as err:
        raise ConfigurationError(f"Invalid TOML in '{file_path}': {err}") from err


def load_limits_toml(file_path: str | Path) -> KinematicLimits:
    """
    Reads the kinematic limits of an axis from a TOML file. The limits may be
    placed at the top level of the file or in a `[limits]` table, e.g.:

        [limits]
        max_velocity = 10.0
        max_accel = 5.0
        max_decel = -5.0
        loop_frequency = 100.0
    """
    return KinematicLimits.from_dict(load_config_toml(file_path))
