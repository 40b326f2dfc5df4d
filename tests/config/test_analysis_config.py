import pytest

from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig


def test_defaults():
    config = AnalysisConfig()
    assert config.default_weight == 1.0
    assert config.source == 0
    assert config.component_label_prefix == "SCC"
    assert config.compute_all_sources_critical_path is False


def test_global_instance_uses_defaults():
    assert ANALYSIS_CONFIG == AnalysisConfig()


def test_validate_accepts_defaults():
    AnalysisConfig().validate()


@pytest.mark.parametrize(
    "kwargs",
    [{"source": -1}, {"component_label_prefix": ""}],
)
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        AnalysisConfig(**kwargs).validate()
