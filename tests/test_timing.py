import pytest

from conftest import ScriptedSource, make_config
from linesim.errors import InvalidProductType
from linesim.simulation.random_source import NormalDistribution
from linesim.simulation.timing import DEFAULT_STAGE_TIMES, Stage, StageTimingTable, to_time_units


@pytest.mark.parametrize(
    "value, expected",
    [(2.0, 2), (2.5, 3), (2.49, 2), (0.4, 0), (-0.4, 0), (-3.7, 0), (7.5, 8)],
)
def test_to_time_units_rounds_half_up_and_clamps(value, expected):
    assert to_time_units(value) == expected


def test_default_catalog_has_two_products(timing):
    assert timing.product_types == 2
    assert timing.distribution(Stage.MACHINING, 1) == NormalDistribution(mean=4.0, stddev=0.7)


def test_duration_divides_by_machine_count():
    config = make_config(machine_counts={
        "raw_material": 1, "machining": 2, "assembly": 4, "quality_control": 1, "packaging": 1,
    })
    table = StageTimingTable(config.machine_counts)

    assert table.duration(Stage.MACHINING, 0, ScriptedSource(7.0)) == 4   # 3.5 rounds up
    assert table.duration(Stage.ASSEMBLY, 0, ScriptedSource(7.0)) == 2    # 1.75
    assert table.duration(Stage.RAW_MATERIAL, 0, ScriptedSource(2.0)) == 2


def test_negative_sample_never_produces_negative_duration(timing):
    assert timing.duration(Stage.PACKAGING, 1, ScriptedSource(-1.2)) == 0


@pytest.mark.parametrize("product_type", [-1, 2, 17])
def test_unknown_product_type_rejected(timing, product_type):
    with pytest.raises(InvalidProductType) as info:
        timing.duration(Stage.ASSEMBLY, product_type, ScriptedSource(1.0))
    assert info.value.product_type == product_type


def test_table_needs_every_stage(config):
    partial = {stage: dists for stage, dists in DEFAULT_STAGE_TIMES.items() if stage != Stage.PACKAGING}
    with pytest.raises(ValueError, match="packaging"):
        StageTimingTable(config.machine_counts, partial)


def test_table_needs_same_product_count_per_stage(config):
    uneven = dict(DEFAULT_STAGE_TIMES)
    uneven[Stage.ASSEMBLY] = uneven[Stage.ASSEMBLY][:1]
    with pytest.raises(ValueError):
        StageTimingTable(config.machine_counts, uneven)


def test_custom_catalog_sets_product_count(config):
    single = {stage: [NormalDistribution(mean=1.0, stddev=0.1)] for stage in Stage}
    assert StageTimingTable(config.machine_counts, single).product_types == 1
