#
# FluidDS - Control Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fluidds.clamp import ParsedClamp, clamp_formula
from fluidds.conf import FluidConf
from fluidds.control import FluidControl
from fluidds.presets import ComplexPresetMatch, PresetResolver, SimplePresetMatch


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def settings() -> dict:
    return {
        "font_size": {"size": "clamp(min(16px, 24px), calc((16px) + 1vw), max(16px, 24px))", "unit": "custom"},
        "font_size_tablet": {},
    }


@pytest.fixture
def control(settings, catalog, device_order) -> FluidControl:
    return FluidControl(
        "font_size_mobile",
        device_order,
        settings.get,
        is_empty=lambda value: not value or not value.get("size"),
        presets=PresetResolver(catalog=catalog),
    )


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFluidControl:
    def test_inherited_value(self, control):
        inherited = control.inherited_value()
        assert inherited.inherited_from == "desktop"
        assert inherited.direct_parent == "mobile_extra"
        assert inherited.inherit_path == ("desktop", "tablet", "mobile_extra")
        assert inherited.source_unit == "custom"

    def test_default_emptiness(self, settings, device_order):
        control = FluidControl("font_size_mobile_extra", device_order, settings.get)
        inherited = control.inherited_value()
        assert inherited.inherited_from == "desktop"
        assert inherited.direct_parent == "tablet"

    def test_desktop_control(self, settings, device_order):
        assert FluidControl("font_size", device_order, settings.get).inherited_value() is None

    def test_inline_inputs(self, control):
        assert control.inline_inputs(clamp_formula("24", "px", "1.5", "rem")) == ("24px", "1.5rem")
        assert control.inline_inputs("var(--arts-fluid-preset--space_sm)") is None

    def test_commit_inline(self, control):
        formula = control.commit_inline(" 16px ", "2rem")
        assert formula == clamp_formula("16", "px", "2", "rem")
        assert control.inline_inputs(formula) == ("16px", "2rem")

    def test_commit_inline_defaults_unit(self, control):
        assert control.inline_inputs(control.commit_inline("10", "")) == ("10px", "0px")

    @pytest.mark.parametrize(
        "min_raw, max_raw",
        [
            pytest.param("0px", "0rem", id="zero-range"),
            pytest.param("16pt", "24px", id="invalid-format"),
            pytest.param(".", ".", id="dots-without-digits"),
        ],
    )
    def test_commit_inline_rejected(self, control, min_raw, max_raw):
        assert control.commit_inline(min_raw, max_raw) is None

    def test_commit_inline_uses_conf(self, settings, device_order):
        control = FluidControl("gap_tablet", device_order, settings.get, conf=FluidConf(prefix="acme"))
        formula = control.commit_inline("8px", "16px")
        assert "var(--acme-min-screen)" in formula
        assert "var(--acme-screen-diff)" in formula

    def test_validate_inputs(self, control):
        assert control.validate_inputs("0px", "0px").error == "Cannot create 0~0 preset"
        assert control.validate_inputs("1px", "2px").valid is True

    @pytest.mark.parametrize(
        "min_raw, max_raw, expected",
        [
            pytest.param("16px", "16px", "=", id="equal"),
            pytest.param("16px", "24px", "~", id="range"),
            pytest.param("", "", "~", id="blank"),
            pytest.param("bad", "16px", "~", id="invalid"),
        ],
    )
    def test_separator(self, control, min_raw, max_raw, expected):
        assert control.separator(min_raw, max_raw) == expected

    def test_describe_complex_preset(self, control):
        described = control.describe("var(--arts-fluid-preset--space_sm)")
        assert isinstance(described, ComplexPresetMatch)
        assert described.title == "Small"

    def test_describe_simple_preset(self, control):
        assert control.describe("inherit") == SimplePresetMatch(id="inherit", name="Inherit")

    def test_describe_formula(self, control):
        assert control.describe(clamp_formula("1", "rem", "2", "rem")) == ParsedClamp("1", "rem", "2", "rem")

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("clamp(broken", "clamp(broken", id="unreadable-formula"),
            pytest.param("42px", "42px", id="raw"),
            pytest.param(None, None, id="none"),
            pytest.param("", None, id="empty"),
        ],
    )
    def test_describe_fallbacks(self, control, value, expected):
        assert control.describe(value) == expected

    def test_describe_without_presets(self, settings, device_order):
        control = FluidControl("gap_tablet", device_order, settings.get)
        assert control.describe("inherit") == "inherit"

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"name": ""}, ValueError, id="empty-name"),
            pytest.param({"get_value": None}, TypeError, id="missing-accessor"),
        ],
    )
    def test_invalid_construction(self, kwargs, error, device_order):
        params = {"name": "gap_tablet", "device_order": device_order, "get_value": {}.get}
        params.update(kwargs)
        with pytest.raises(error):
            FluidControl(**params)
