from src.config.limits import Limits
from src.instance.generator import InstanceSpec, InstanceGenerator
from src.instance.model import ProblemInstance
from src.solution.builder import build_solution, dominant_warehouse
from src.solution.model import Solution
from src.validation.validator import Validator

def make_instance(seed=7, n_orders=150):
    spec = InstanceSpec(n_articles=80, n_warehouses=3, aisles_per_warehouse=6, n_orders=n_orders,
                        min_items=1, max_items=6, min_volume=100, max_volume=2000)
    return InstanceGenerator(spec, seed=seed).make_instance()

def test_built_solution_passes_validation():
    inst = make_instance()
    doc = build_solution(inst)
    report = Validator(inst, Solution.from_dict(doc)).run()
    assert report.costs.total_cost == report.costs.tour_cost + report.costs.rest_cost
    assert len(report.order_waves) == len(inst.orders)

def test_built_solution_respects_tight_limits():
    inst = make_instance(seed=11)
    limits = Limits(max_wave_size=20, max_batch_volume=3000)
    doc = build_solution(inst, limits)
    report = Validator(inst, Solution.from_dict(doc), limits).run()
    assert max(report.wave_sizes.values()) <= 20
    assert max(report.batch_volumes.values()) <= 3000
    # WaveSize/BatchVolume del documento coinciden con lo que mide el validador
    for w in doc["Waves"]:
        assert report.wave_sizes[str(w["WaveId"])] == w["WaveSize"]
    for b in doc["Batches"]:
        assert report.batch_volumes[str(b["BatchId"])] == b["BatchVolume"]

def test_batches_stay_in_one_warehouse():
    inst = make_instance(seed=3)
    doc = build_solution(inst)
    for b in doc["Batches"]:
        whs = {inst.location_of(it["ArticleId"]).warehouse for it in b["Items"]}
        assert len(whs) == 1

def test_dominant_warehouse_breaks_ties_by_text():
    inst = ProblemInstance.from_dict({
        "Articles": {"a": {"Volume": 1}, "b": {"Volume": 1}, "c": {"Volume": 1}},
        "ArticleLocations": [
            {"ArticleId": "a", "Warehouse": 2, "Aisle": 1},
            {"ArticleId": "b", "Warehouse": 1, "Aisle": 1},
            {"ArticleId": "c", "Warehouse": 2, "Aisle": 4},
        ],
        "Orders": [
            {"OrderId": 1, "ArticleIds": ["a", "b"]},
            {"OrderId": 2, "ArticleIds": ["a", "b", "c"]},
            {"OrderId": 3, "ArticleIds": []},
        ],
    })
    assert dominant_warehouse(inst.orders[0], inst) == 1
    assert dominant_warehouse(inst.orders[1], inst) == 2
    assert dominant_warehouse(inst.orders[2], inst) is None

def test_empty_order_still_gets_a_wave():
    inst = ProblemInstance.from_dict({
        "Articles": {"a": {"Volume": 1}},
        "ArticleLocations": [{"ArticleId": "a", "Warehouse": 0, "Aisle": 0}],
        "Orders": [{"OrderId": 1, "ArticleIds": []}, {"OrderId": 2, "ArticleIds": ["a"]}],
    })
    doc = build_solution(inst)
    Validator(inst, Solution.from_dict(doc)).run()
    assert sorted(o for w in doc["Waves"] for o in w["OrderIds"]) == [1, 2]
