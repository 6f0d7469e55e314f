"""BaseModel with rich table display."""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table


class DisplayModel(BaseModel):
    def display(
        self,
        console: Console | None = None,
        title: str | None = None,
        values: dict[str, str] | None = None,
    ) -> None:
        """Display the model as a field/value table.

        ``values`` holds pre-rendered text for fields that need custom formatting.
        """

        if console is None:
            console = Console()

        table = Table(title=title or self.__class__.__name__, show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        fields = [*type(self).model_fields, *type(self).model_computed_fields]
        for field_name in fields:
            field_value = getattr(self, field_name)
            if field_value is not None:
                rendered = (values or {}).get(field_name)
                table.add_row(field_name, rendered if rendered is not None else self._format_value(field_value))

        console.print(table)

    def _format_value(self, value: Any) -> str:
        """Format a value for display."""

        if isinstance(value, list):
            return ", ".join(str(v) for v in value) if value else "[]"
        if isinstance(value, bool):
            return "yes" if value else "no"
        return str(value)
