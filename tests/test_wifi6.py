import io

import pytest

from wifisim.channel import Channel
from wifisim.user import User
from wifisim.wifi6 import ResourceUnit, WiFi6Simulation


def _sim(duration=100):
    return WiFi6Simulation(duration, out=io.StringIO())


def test_default_duration():
    assert WiFi6Simulation().sim_duration == 100


def test_allocation_fills_total_bandwidth():
    sim = _sim()
    users = [User(1), User(2), User(3)]
    for _ in range(30):
        rus = sim.allocate_rus_round_robin(users)
        assert sum(ru.bandwidth for ru in rus) == pytest.approx(sim.TOTAL_BANDWIDTH)
        assert {ru.bandwidth for ru in rus} <= {float(s) for s in sim.RU_SIZES}


def test_allocation_is_round_robin_across_calls():
    sim = _sim()
    users = [User(4), User(5), User(6)]
    ids = []
    for _ in range(10):
        ids.extend(ru.user_id for ru in sim.allocate_rus_round_robin(users))
    assert ids == [users[k % len(users)].id for k in range(len(ids))]


def test_allocation_without_users_is_empty():
    assert _sim().allocate_rus_round_robin([]) == []


def test_resource_unit_fields():
    ru = ResourceUnit(3, 10.0)
    assert (ru.user_id, ru.bandwidth) == (3, 10.0)


def test_run_counts_every_resource_unit():
    sim = _sim()
    users = [User(1), User(2), User(3)]
    sim.run(users, Channel())
    rounds = sim.sim_duration / sim.OFDMA_WINDOW_MS
    total = sum(u.successful_transmissions for u in users)
    per_round_min = sim.TOTAL_BANDWIDTH / max(sim.RU_SIZES)
    per_round_max = sim.TOTAL_BANDWIDTH / min(sim.RU_SIZES)
    assert rounds * per_round_min <= total <= rounds * per_round_max
    assert sim.output.getvalue().count("Allocated:") == rounds


def test_run_throughput_over_whole_run():
    sim = _sim()
    users = [User(1), User(2)]
    sim.run(users, Channel())
    sim_time_sec = sim.sim_duration / 1000.0
    for user in users:
        assert user.throughput * sim_time_sec == pytest.approx(
            user.successful_transmissions * user.packet_size * 8
        )
        assert len(user.latencies) == user.successful_transmissions
        assert all(lat >= 0 for lat in user.latencies)


def test_print_final_metrics_empty():
    sim = _sim()
    sim.print_final_metrics([])
    text = sim.output.getvalue()
    assert "Mean Latency: 0.00 ms" in text
    assert "Total Frames Delivered: 0" in text