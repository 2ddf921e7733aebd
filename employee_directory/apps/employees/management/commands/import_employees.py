import csv
from pathlib import Path
from django.core.management.base import BaseCommand, CommandError
from django.db import models
from employee_directory.apps.employees.application.services import EmployeeApplicationService
from employee_directory.apps.employees.models import Employee


def parse_id(raw_id: str):
    """Positive integer id, or None for an empty cell."""
    if not raw_id:
        return None
    if not raw_id.isascii() or not raw_id.isdecimal() or not 1 <= int(raw_id) <= models.BigIntegerField.MAX_BIGINT:
        raise ValueError(raw_id)
    return int(raw_id)


class Command(BaseCommand):
    help = "Import employees from CSV (name, role, department, email, optional id)"

    def add_arguments(self, parser):
        parser.add_argument("csv_path", type=str, help="Path to the CSV file")
        parser.add_argument("--delimiter", default=";", help="Column delimiter (default ';')")

    def handle(self, *args, **options):
        csv_path = Path(options["csv_path"])

        if not csv_path.exists():
            raise CommandError(f"File not found: {csv_path}")

        service = EmployeeApplicationService()
        created_count = 0
        updated_count = 0
        skipped_count = 0

        with open(csv_path, encoding="utf-8-sig", newline="") as f:  # utf-8-sig strips the BOM
            reader = csv.DictReader(f, delimiter=options["delimiter"], quotechar='"')

            for line_no, row in enumerate(reader, start=2):
                name = (row.get("name") or "").strip()
                if not name:
                    skipped_count += 1
                    continue

                raw_id = (row.get("id") or "").strip()
                try:
                    requested_id = parse_id(raw_id)
                except ValueError:
                    self.stderr.write(f"Line {line_no}: invalid id {raw_id!r}, skipped")
                    skipped_count += 1
                    continue

                employee = service.save(Employee(
                    id=requested_id,
                    name=name,
                    role=(row.get("role") or "").strip(),
                    department=(row.get("department") or "").strip(),
                    email=(row.get("email") or "").strip(),
                ))

                if requested_id is None or employee.id != requested_id:
                    created_count += 1
                else:
                    updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Import finished: created {created_count}, updated {updated_count}, skipped {skipped_count}"
            )
        )
