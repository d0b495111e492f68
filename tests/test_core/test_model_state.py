# tests/test_core/test_model_state.py
import pytest
from core.constants import LONG_PERIOD_TRANSITION
from core.model_state import (
    Geometry,
    Loads,
    MaterialProperties,
    SeismicParameters,
    SiteClass,
    SoilData,
)


class TestSiteClass:
    def test_parse_full_name(self):
        """Test parsing the two-letter site class names."""
        assert SiteClass.parse("SD") is SiteClass.SD
        assert SiteClass.parse("SA") is SiteClass.SA

    def test_parse_letter_and_case(self):
        """Test bare letters and lower case are accepted."""
        assert SiteClass.parse("d") is SiteClass.SD
        assert SiteClass.parse(" se ") is SiteClass.SE

    def test_parse_member(self):
        """Test parsing an existing member returns it unchanged."""
        assert SiteClass.parse(SiteClass.SF) is SiteClass.SF

    def test_parse_invalid(self):
        """Test unknown site classes are rejected."""
        with pytest.raises(ValueError, match="Site class"):
            SiteClass.parse("SX")
        with pytest.raises(ValueError):
            SiteClass.parse(4)

    def test_site_specific_flag(self):
        """Test only SF requires site-specific analysis."""
        assert SiteClass.SF.requires_site_specific_analysis
        assert not SiteClass.SE.requires_site_specific_analysis


class TestGeometry:
    def test_derived_properties(self):
        """Test floor area and total height."""
        geometry = Geometry(length=20, width=15, number_of_floors=3, height_per_floor=3.5)
        assert geometry.floor_area == 300
        assert geometry.total_height == pytest.approx(10.5)

    @pytest.mark.parametrize("field", ["length", "width", "height_per_floor"])
    def test_non_positive_dimensions(self, field):
        """Test zero or negative dimensions fail fast."""
        values = dict(length=20, width=15, number_of_floors=3, height_per_floor=3.5)
        values[field] = 0
        with pytest.raises(ValueError, match=field):
            Geometry(**values)
        values[field] = -1.0
        with pytest.raises(ValueError, match=field):
            Geometry(**values)

    def test_number_of_floors(self):
        """Test floor count must be an integer of at least one."""
        with pytest.raises(ValueError, match="number_of_floors"):
            Geometry(length=20, width=15, number_of_floors=0, height_per_floor=3.5)
        with pytest.raises(ValueError, match="number_of_floors"):
            Geometry(length=20, width=15, number_of_floors=-2, height_per_floor=3.5)
        with pytest.raises(ValueError, match="number_of_floors"):
            Geometry(length=20, width=15, number_of_floors=2.5, height_per_floor=3.5)

    def test_non_finite(self):
        """Test NaN and infinite dimensions are rejected."""
        with pytest.raises(ValueError, match="finite"):
            Geometry(length=float("nan"), width=15, number_of_floors=3, height_per_floor=3.5)
        with pytest.raises(ValueError, match="finite"):
            Geometry(length=20, width=float("inf"), number_of_floors=3, height_per_floor=3.5)

    def test_immutability(self):
        """Test that geometry records are immutable."""
        geometry = Geometry(length=20, width=15, number_of_floors=3, height_per_floor=3.5)
        with pytest.raises(Exception):
            geometry.length = 30


class TestLoads:
    def test_partition_default(self):
        """Test partition load defaults to zero."""
        loads = Loads(dead_load=5.5, live_load=4.0)
        assert loads.partition_load == 0.0

    def test_zero_loads_allowed(self):
        """Test zero loads are valid input."""
        Loads(dead_load=0, live_load=0, partition_load=0)

    def test_negative_loads(self):
        """Test negative loads are rejected."""
        with pytest.raises(ValueError, match="dead_load"):
            Loads(dead_load=-1, live_load=4.0)
        with pytest.raises(ValueError, match="live_load"):
            Loads(dead_load=5.5, live_load=-4.0)
        with pytest.raises(ValueError, match="partition_load"):
            Loads(dead_load=5.5, live_load=4.0, partition_load=-0.5)


class TestMaterialProperties:
    def test_fc_must_be_positive(self):
        """Test concrete strength validation."""
        assert MaterialProperties(fc=30).fc == 30
        with pytest.raises(ValueError, match="fc"):
            MaterialProperties(fc=0)


class TestSoilData:
    def test_site_class_coerced(self):
        """Test soil site class strings become SiteClass members."""
        assert SoilData(site_class="E").site_class is SiteClass.SE


class TestSeismicParameters:
    def test_defaults(self):
        """Test caller-facing defaults and unset derived fields."""
        params = SeismicParameters(ss=0.8, s1=0.3, site_class="SD")
        assert params.site_class is SiteClass.SD
        assert params.r == 8.0
        assert params.importance == 1.0
        assert params.tl == LONG_PERIOD_TRANSITION
        assert params.fa is None
        assert params.sds is None
        assert not params.is_derived

    def test_derived_fields_not_settable(self):
        """Test derived fields cannot be passed to the constructor."""
        with pytest.raises(TypeError):
            SeismicParameters(ss=0.8, s1=0.3, site_class="SD", sds=1.0)

    def test_with_derived(self):
        """Test derived copy leaves the original untouched."""
        params = SeismicParameters(ss=0.8, s1=0.3, site_class="SD")
        derived = params.with_derived(fa=1.18, fv=2.0, sds=0.6, sd1=0.4,
                                      t0=0.13, ts=0.66, tl=12)
        assert derived.is_derived
        assert derived.fa == 1.18
        assert derived.ss == 0.8
        assert not params.is_derived

    def test_require_derived(self):
        """Test use before derivation is reported."""
        params = SeismicParameters(ss=0.8, s1=0.3, site_class="SD")
        with pytest.raises(ValueError, match="derived"):
            params.require_derived()

    def test_negative_spectral_accelerations(self):
        """Test negative Ss or S1 is rejected."""
        with pytest.raises(ValueError, match="ss"):
            SeismicParameters(ss=-0.1, s1=0.3, site_class="SD")
        with pytest.raises(ValueError, match="s1"):
            SeismicParameters(ss=0.8, s1=-0.3, site_class="SD")

    def test_zero_hazard_allowed(self):
        """Test zero spectral accelerations are valid input."""
        SeismicParameters(ss=0.0, s1=0.0, site_class="SD")

    def test_invalid_factors(self):
        """Test R and importance must be positive."""
        with pytest.raises(ValueError, match="r"):
            SeismicParameters(ss=0.8, s1=0.3, site_class="SD", r=0)
        with pytest.raises(ValueError, match="importance"):
            SeismicParameters(ss=0.8, s1=0.3, site_class="SD", importance=-1)

    def test_r_over_importance(self):
        """Test R/Ie ratio."""
        params = SeismicParameters(ss=0.8, s1=0.3, site_class="SD", r=6, importance=1.5)
        assert params.r_over_importance == pytest.approx(4.0)
