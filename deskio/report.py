# End-of-run report
from typing import List

from desk import stats
from desk.stats import Statistics
from simcore.resource import ResourcePool

CATEGORY_LABELS = {
    stats.RIDE: 'Ride',
    stats.DIAGNOSTICS: 'Diagnostics',
    stats.INSTALL: 'SW Install',
}


def format_pool(pool: ResourcePool) -> List[str]:
    return [
        f"{pool.name}:",
        f"  capacity={pool.capacity} busy={pool.in_use} free={pool.free} waiting={pool.waiting}",
        f"  enter operations={pool.entries} max busy={pool.max_in_use} max queue length={pool.max_queue_length}",
    ]


def format_success_rate(statistics: Statistics) -> str:
    rate = statistics.success_rate()
    if rate is None:
        return "Success rate: n/a (no requests accepted)"
    return f"Success rate: {rate * 100:.2f}%"


def format_report(pools: List[ResourcePool], statistics: Statistics) -> List[str]:
    lines: List[str] = []
    for pool in pools:
        lines.extend(format_pool(pool))
    for category in stats.CATEGORIES:
        label = CATEGORY_LABELS[category]
        lines.append(f"Final {label} Request Queue Length: {statistics[stats.request_queue(category)]}")
    for category in stats.CATEGORIES:
        label = CATEGORY_LABELS[category]
        lines.append(f"Final {label} Queue Length: {statistics[stats.service_queue(category)]}")
    lines.append(f"Escalated deployments: {statistics[stats.ESCALATIONS]}")
    counts = [statistics[stats.requests(c)] for c in stats.CATEGORIES]
    lines.append(f"RIDE/DIA/SWI: {counts[0]}/{counts[1]}/{counts[2]} TOTAL:{statistics.total_requests()}")
    lines.append(format_success_rate(statistics))
    return lines
