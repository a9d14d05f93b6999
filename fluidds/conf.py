#
# FluidDS Configuration
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final


# Classes --------------------------------------------------------------------------------------------------------------

class FluidConf:
    """
    Names and defaults shared by the fluid value engine.

    CSS variable names are derived from a single prefix so that a host can relocate them
    without touching the formula codec:

        FluidConf().min_screen_var            -> '--arts-fluid-min-screen'
        FluidConf(prefix="acme").min_screen_var -> '--acme-min-screen'
    """

    CSS_VAR_PREFIX: Final = "arts-fluid"

    # Dropdown token for the "custom inline value" mode
    CUSTOM_FLUID_VALUE: Final = "__custom__"

    DESKTOP: Final = "desktop"
    WIDESCREEN: Final = "widescreen"

    DEFAULT_UNIT: Final = "px"
    DEFAULT_PRESET_GROUP: Final = "spacing"

    def __init__(self, prefix: str | None = None) -> None:
        prefix = self.CSS_VAR_PREFIX if prefix is None else prefix
        if not isinstance(prefix, str):
            raise TypeError(f"prefix must be a string, got {type(prefix).__name__}")
        prefix = prefix.strip().lstrip("-")
        if not prefix:
            raise ValueError("prefix cannot be empty")
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"FluidConf(prefix={self.prefix!r})"

    @property
    def min_screen_var(self) -> str:
        """CSS variable holding the minimum reference screen width."""
        return f"--{self.prefix}-min-screen"

    @property
    def screen_diff_var(self) -> str:
        """CSS variable holding the max - min reference screen width span."""
        return f"--{self.prefix}-screen-diff"

    @property
    def preset_prefix(self) -> str:
        return f"--{self.prefix}-preset--"

    @property
    def min_screen_ref(self) -> str:
        return f"var({self.min_screen_var})"

    @property
    def screen_diff_ref(self) -> str:
        return f"var({self.screen_diff_var})"

    def css_var_preset(self, preset_id: str) -> str:
        """CSS variable name of a preset, e.g. '--arts-fluid-preset--heading_1'."""
        return f"{self.preset_prefix}{preset_id}"


fluid_conf = FluidConf()


# Methods --------------------------------------------------------------------------------------------------------------

def css_var_preset(preset_id: str) -> str:
    """CSS variable name of a preset under the default configuration."""
    return fluid_conf.css_var_preset(preset_id)
