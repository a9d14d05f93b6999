#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def device_order() -> list[str]:
    """Breakpoints from largest to smallest, desktop first."""
    return ["desktop", "tablet", "mobile_extra", "mobile"]


@pytest.fixture
def catalog() -> list[dict]:
    """Preset catalog with a shortcut group, a fluid group and a custom group."""
    return [
        {"name": "Inherit", "value": "inherit"},
        {
            "name": "Spacing",
            "value": [
                {
                    "id": "space_sm",
                    "value": "var(--arts-fluid-preset--space_sm)",
                    "title": "Small",
                    "min_size": "8",
                    "min_unit": "px",
                    "max_size": "16",
                    "max_unit": "px",
                },
                {
                    "id": "space_lg",
                    "value": "var(--arts-fluid-preset--space_lg)",
                    "title": "Large",
                    "min_size": "2",
                    "min_unit": "rem",
                    "max_size": "4",
                    "max_unit": "rem",
                    "min_screen_width_size": "360",
                    "min_screen_width_unit": "px",
                    "max_screen_width_size": "1920",
                    "max_screen_width_unit": "px",
                    "editable": True,
                },
            ],
        },
        {
            "name": "Custom",
            "value": [
                {"id": "auto", "value": "auto", "title": "Auto", "display_value": "auto"},
            ],
        },
    ]
