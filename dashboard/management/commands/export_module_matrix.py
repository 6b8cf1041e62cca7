from django.core.management.base import BaseCommand, CommandError

from dashboard.access_control import ALL_BUSINESS_TYPES
from dashboard.exports import build_module_matrix


class Command(BaseCommand):
    help = "Write the role x module access matrix to an xlsx workbook"

    def add_arguments(self, parser):
        parser.add_argument("output", help="Path of the .xlsx file to write")
        parser.add_argument(
            "--business-type",
            action="append",
            dest="business_types",
            choices=ALL_BUSINESS_TYPES,
            help="Limit to this business type (repeatable). Default: all.",
        )

    def handle(self, *args, **options):
        output = options["output"]
        if not output.lower().endswith(".xlsx"):
            raise CommandError("Output file must end with .xlsx")

        types = options.get("business_types") or list(ALL_BUSINESS_TYPES)
        wb = build_module_matrix(types)
        wb.save(output)

        self.stdout.write(self.style.SUCCESS(f"Done. Wrote {len(types)} sheet(s) to {output}."))
