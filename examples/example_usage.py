"""Example: use the service layer directly (no Flask).

Controllers stay thin; dashboards and reports come straight from the services.
"""

import importlib
import logging

from config import get_settings_module

from facilities_tracker.container import build_container
from facilities_tracker.work_entries.filters import WorkEntryFilter

logger = logging.getLogger("example_usage")


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    stats = container.dashboard_service.stats(WorkEntryFilter(status="completed"))
    logger.info("completed tasks=%s cost=%.2f", stats.total_tasks, stats.total_cost_all_time)

    for row in container.report_service.performance():
        logger.info("%-30s %5.1f%% of %s tasks", row.college, row.efficiency, row.total_tasks)


if __name__ == "__main__":
    main()
