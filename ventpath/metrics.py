from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'pushes': 0,
        'pops': 0,
        'stale_pops': 0,
        'expanded': 0,
        'grid_relaxations': 0,
        'vent_relaxations': 0,
        'runtime_ms': 0.0,
    }
