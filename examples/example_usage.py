"""Example: run payroll through the service layer (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from payroll_system.common.datetime_utils import month_label
from payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    record = container.salary_service.create_salary_record(
        employee_id=1,
        month=month_label(date.today()),
        basic_salary=60000,
        allowances=5000,
    )
    for key, value in record.to_dict().items():
        print(f"{key:>22}: {value:.2f}" if isinstance(value, float) else f"{key:>22}: {value}")


if __name__ == "__main__":
    main()
