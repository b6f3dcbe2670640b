"""
Generates a motion profile from the limits in `axis_config.toml` and steps
through it at the loop frequency, the way a control loop would.
"""
import logging
from pathlib import Path

from trapprofile import LoggerTelemetry, ProfileGenerator
from trapprofile.utils import init_logger, load_limits_toml


BASE_DIR = Path(__file__).parent


def main(distance: float = 100.0) -> None:
    logger = init_logger(log_file=str(BASE_DIR / "logs" / "profile.log"))
    limits = load_limits_toml(BASE_DIR / "axis_config.toml")

    generator = ProfileGenerator(
        limits,
        telemetry=LoggerTelemetry(logger, level=logging.INFO),
        logger=logger
    )
    summary = generator.generate(distance)

    t = 0.0
    for i in range(summary.sample_count):
        t = i * limits.sample_interval
        if i % max(1, int(limits.loop_frequency / 4)) == 0:
            logger.info(
                f"t = {t:6.2f} s | x = {generator.read_distance(t):8.3f} | "
                f"v = {generator.read_velocity(t):7.3f} | "
                f"a = {generator.read_acceleration(t):6.2f}"
            )


if __name__ == "__main__":
    main()
