import pytest
from src.config.limits import Limits
from src.solution.model import Solution
from src.validation.checks import check_wave_sizes
from src.validation.errors import WaveTooLarge

def make_solution(items_per_batch):
    # una wave con todos los batches; artículo "A" repetido (acá solo importa el conteo)
    batches = [
        {"BatchId": i, "Items": [{"ArticleId": "A"}] * n}
        for i, n in enumerate(items_per_batch)
    ]
    waves = [{"WaveId": "W1", "BatchIds": list(range(len(batches))), "OrderIds": []}]
    return Solution.from_dict({"Batches": batches, "Waves": waves})

def test_wave_at_limit_passes():
    sizes = check_wave_sizes(make_solution([100, 100, 50]), Limits.default())
    assert sizes == {"W1": 250}

def test_wave_with_251_items_fails():
    with pytest.raises(WaveTooLarge) as exc:
        check_wave_sizes(make_solution([200, 51]), Limits.default())
    assert exc.value.wave_id == "W1"
    assert exc.value.size == 251
    assert str(exc.value) == "Wave W1 contains 251 articles!"

def test_custom_limit_is_honored():
    limits = Limits(max_wave_size=10)
    with pytest.raises(WaveTooLarge):
        check_wave_sizes(make_solution([6, 5]), limits)

def test_first_offending_wave_is_reported():
    sol = Solution.from_dict({
        "Batches": [{"BatchId": 0, "Items": [{"ArticleId": 1}] * 300}],
        "Waves": [
            {"WaveId": "ok", "BatchIds": [], "OrderIds": []},
            {"WaveId": "big1", "BatchIds": [0], "OrderIds": []},
            {"WaveId": "big2", "BatchIds": [0], "OrderIds": []},
        ],
    })
    with pytest.raises(WaveTooLarge) as exc:
        check_wave_sizes(sol, Limits.default())
    assert exc.value.wave_id == "big1"
