"""
Unit Tests for LayoutRule variants

Test Coverage:
- Parameter validation on construction
- kind / to_dict configuration shape
"""

import pytest

from thumb_toolkit.core.models import (
    RULE_KEYS,
    ByHeight,
    ByLongerSide,
    ByShorterSide,
    ByWidth,
    Fit,
    Square,
)


class TestRuleValidation:
    
    @pytest.mark.parametrize("factory", [
        lambda: ByWidth(0),
        lambda: ByHeight(-5),
        lambda: ByShorterSide(10, 0),
        lambda: ByLongerSide(0, 10),
        lambda: Fit(10, 0),
        lambda: Square(0),
    ])
    def test_init_when_non_positive_then_raises_error(self, factory):
        with pytest.raises(ValueError, match="must be > 0"):
            factory()
    
    def test_init_when_float_then_raises_error(self):
        with pytest.raises(ValueError, match="must be an integer"):
            ByWidth(200.5)
    
    def test_init_when_bool_size_then_raises_error(self):
        with pytest.raises(ValueError, match="must be an integer"):
            ByHeight(True)
    
    def test_init_when_keep_aspect_not_bool_then_raises_error(self):
        with pytest.raises(ValueError, match="keep_aspect must be a bool"):
            Fit(10, 10, 1)
    
    def test_defaults_are_cover(self):
        assert Fit(10, 10).keep_aspect is False
        assert Square(10).keep_aspect is False
    
    def test_rules_are_hashable(self):
        assert len({Fit(1, 2), Fit(1, 2), Square(3)}) == 2


class TestRuleSerialization:
    
    def test_rule_keys_order(self):
        assert RULE_KEYS == ("width", "height", "shorter", "longer", "fit", "square")
    
    def test_to_dict_shapes(self):
        assert ByWidth(200).to_dict() == {"width": 200}
        assert ByHeight(100).to_dict() == {"height": 100}
        assert ByShorterSide(20, 10).to_dict() == {"shorter": [20, 10]}
        assert ByLongerSide(20, 10).to_dict() == {"longer": [20, 10]}
        assert Fit(20, 10, True).to_dict() == {"fit": [20, 10, True]}
        assert Square(30).to_dict() == {"square": [30, False]}
