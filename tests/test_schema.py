import math

import pytest

from burette.schema import TitrationState, TitrationType, validate_state


def test_from_mapping_accepts_camel_case_and_ignores_ui_fields():
    state = TitrationState.from_mapping(
        {
            "type": "strong_base_weak_acid",
            "analyteConc": "0.2",
            "titrantVol": 12,
            "pKa": 4.2,
            "indicator": "phenolphthalein",
            "dripRate": 3,
        }
    )
    assert state.type is TitrationType.STRONG_BASE_WEAK_ACID
    assert state.analyte_conc == 0.2
    assert state.titrant_vol == 12.0
    assert state.pka == 4.2
    assert state.analyte_vol == 25.0


def test_unknown_type_is_kept_as_string():
    state = TitrationState(type="back_titration")
    assert state.type == "back_titration"
    assert state.protons == 1


def test_derived_amounts():
    state = TitrationState(analyte_conc=0.1, analyte_vol=25.0, titrant_conc=0.2, titrant_vol=5.0)
    assert math.isclose(state.analyte_moles, 0.0025)
    assert math.isclose(state.titrant_moles, 0.001)
    assert math.isclose(state.total_volume_l, 0.030)


def test_state_is_immutable():
    with pytest.raises(AttributeError):
        TitrationState().titrant_vol = 1.0


def test_validate_accepts_defaults():
    state = TitrationState()
    assert validate_state(state) is state


@pytest.mark.parametrize(
    "overrides,message",
    [
        (dict(type="back_titration"), "Unknown titration type"),
        (dict(analyte_conc=-0.1), "analyte_conc cannot be negative"),
        (dict(titrant_max=math.inf), "titrant_max must be finite"),
        (dict(pka2=math.nan), "pka2 must be finite"),
        (dict(titrant_vol=60.0), "exceeds burette capacity"),
    ],
)
def test_validate_rejects(overrides, message):
    with pytest.raises(ValueError, match=message):
        validate_state(TitrationState(**overrides))
