"""Options relaxing the safety checks of an extraction.

Flags are fixed for the duration of one call. All checks are enabled by
default, and every option has to be turned off by name.
"""
from pydantic import BaseModel, ConfigDict


class FeatureFlags(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # don't read or verify the header checksum field
    skip_checksum_validation: bool = False
    # absolute entry paths pass the string checks (containment still applies)
    allow_absolute_paths: bool = False


DEFAULT_FLAGS = FeatureFlags()
