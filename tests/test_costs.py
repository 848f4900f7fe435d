import random
from src.config.limits import Limits
from src.instance.model import ProblemInstance
from src.solution.model import Solution
from src.validation.costs import compute_costs, batch_tour
from src.validation.validator import validate

def single_article_case():
    instance = ProblemInstance.from_dict({
        "Articles": {"1": {"Volume": 1}},
        "ArticleLocations": [{"ArticleId": "1", "Warehouse": "A", "Aisle": "1"}],
        "Orders": [{"OrderId": "O1", "ArticleIds": ["1"]}],
    })
    solution = Solution.from_dict({
        "Batches": [{"BatchId": "B1", "Items": [{"ArticleId": "1", "OrderId": "O1"}]}],
        "Waves": [{"WaveId": "W1", "BatchIds": ["B1"], "OrderIds": ["O1"]}],
    })
    return instance, solution

def located_instance(locations):
    return ProblemInstance.from_dict({
        "Articles": {aid: {"Volume": 1} for aid, _, _ in locations},
        "ArticleLocations": [{"ArticleId": aid, "Warehouse": w, "Aisle": a} for aid, w, a in locations],
        "Orders": [],
    })

def batch_solution(batches, n_waves=1):
    return Solution.from_dict({
        "Batches": [{"BatchId": i, "Items": [{"ArticleId": a} for a in arts]} for i, arts in enumerate(batches)],
        "Waves": [{"WaveId": w, "BatchIds": [], "OrderIds": []} for w in range(n_waves)],
    })

def test_single_article_scenario_costs_30():
    instance, solution = single_article_case()
    costs = validate(instance, solution)
    assert costs.tour_cost == 15
    assert costs.rest_cost == 15
    assert costs.total_cost == 30
    assert costs.to_dict() == {"tourCost": 15, "restCost": 15, "totalCost": 30}

def test_same_warehouse_and_aisle_counts_once():
    inst = located_instance([("x", "A", "1"), ("y", "A", "1")])
    sol = batch_solution([["x", "y"]])
    tour = batch_tour(sol.batches[0], inst, Limits.default())
    assert (tour.n_warehouses, tour.n_aisles, tour.cost) == (1, 1, 15)

def test_two_batches_same_aisle_each_count_one_aisle():
    inst = located_instance([("x", "A", "1"), ("y", "A", "1")])
    sol = batch_solution([["x"], ["y"]])
    tours = [batch_tour(b, inst, Limits.default()) for b in sol.batches]
    assert [t.n_aisles for t in tours] == [1, 1]
    assert compute_costs(sol, inst).tour_cost == 30

def test_aisle_key_is_textual_concatenation():
    # ("1","23") y ("12","3") producen la misma clave "123": 2 almacenes, 1 pasillo
    inst = located_instance([("x", 1, 23), ("y", 12, 3)])
    sol = batch_solution([["x", "y"]])
    tour = batch_tour(sol.batches[0], inst, Limits.default())
    assert tour.n_warehouses == 2
    assert tour.n_aisles == 1
    assert tour.cost == 2 * 10 + 1 * 5

def test_same_aisle_number_in_different_warehouses_is_distinct():
    inst = located_instance([("x", "A", "1"), ("y", "B", "1")])
    sol = batch_solution([["x", "y"]])
    tour = batch_tour(sol.batches[0], inst, Limits.default())
    assert (tour.n_warehouses, tour.n_aisles) == (2, 2)

def test_rest_cost_counts_waves_and_batches():
    inst = located_instance([("x", "A", "1")])
    sol = batch_solution([["x"], ["x"], []], n_waves=2)
    costs = compute_costs(sol, inst)
    assert costs.rest_cost == 2 * 10 + 3 * 5
    # batch vacío no toca almacenes
    assert costs.tour_cost == 15 + 15

def test_costs_do_not_depend_on_input_order():
    inst = located_instance([(str(i), i % 3, i % 5) for i in range(12)])
    batches = [[str(i) for i in range(k, 12, 4)] for k in range(4)]
    base = compute_costs(batch_solution(batches, n_waves=3), inst)

    rnd = random.Random(3)
    for _ in range(5):
        shuffled = [list(b) for b in batches]
        rnd.shuffle(shuffled)
        for b in shuffled:
            rnd.shuffle(b)
        sol = batch_solution(shuffled, n_waves=3)
        rnd.shuffle(sol.waves)
        assert compute_costs(sol, inst) == base

def test_custom_cost_rates():
    instance, solution = single_article_case()
    limits = Limits(cost_per_warehouse=1, cost_per_aisle=2, cost_per_wave=3, cost_per_batch=4)
    costs = compute_costs(solution, instance, limits)
    assert (costs.tour_cost, costs.rest_cost, costs.total_cost) == (3, 7, 10)

def test_warehouse_ids_of_different_type_are_distinct():
    # 1 y "1" son dos almacenes; la clave de pasillo "11" coincide en ambos
    inst = located_instance([("x", 1, 1), ("y", "1", 1)])
    sol = batch_solution([["x", "y"]])
    tour = batch_tour(sol.batches[0], inst, Limits.default())
    assert (tour.n_warehouses, tour.n_aisles) == (2, 1)
    assert tour.cost == 25
