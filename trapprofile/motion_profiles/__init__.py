from .limits import KinematicLimits

from .generator import (
    Phase,
    ProfileSample,
    ProfileSummary,
    Profile,
    ProfileGenerator
)


__all__ = [
    "KinematicLimits",
    "Phase",
    "ProfileSample",
    "ProfileSummary",
    "Profile",
    "ProfileGenerator"
]
