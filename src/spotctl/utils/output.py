from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

from spotctl.utils.serialization import to_plain_data

OutputFormat = Literal["json", "yaml", "table", "wide"]


@dataclass(frozen=True, slots=True)
class TableColumn:
    header: str
    field: str
    default: str = ""
    width: int = 0


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Columns rendered for one resource type.

    ``detail_columns`` and ``wide_columns`` are appended in ``wide`` output.
    """

    columns: tuple[TableColumn, ...]
    detail_columns: tuple[TableColumn, ...] = field(default_factory=tuple)
    wide_columns: tuple[TableColumn, ...] = field(default_factory=tuple)

    def for_output(self, output: OutputFormat) -> tuple[TableColumn, ...]:
        if output == "wide":
            return self.columns + self.detail_columns + self.wide_columns
        return self.columns


REGION_TABLE = TableConfig(
    columns=(
        TableColumn("NAME", "metadata.name", "N/A"),
        TableColumn("COUNTRY", "spec.country", "N/A"),
        TableColumn("PROVIDER", "spec.provider.providerType", "N/A"),
    ),
    detail_columns=(
        TableColumn("PROVIDER REGION", "spec.provider.providerRegionName", "N/A"),
        TableColumn("DESCRIPTION", "spec.description", "N/A", width=50),
    ),
    wide_columns=(
        TableColumn("API VERSION", "apiVersion", "N/A"),
        TableColumn("KIND", "kind", "N/A"),
        TableColumn("UID", "metadata.uid", "N/A"),
    ),
)

SERVER_CLASS_TABLE = TableConfig(
    columns=(
        TableColumn("NAME", "metadata.name"),
        TableColumn("DISPLAY NAME", "spec.displayName"),
        TableColumn("REGION", "spec.region"),
        TableColumn("CPU", "spec.resources.cpu"),
        TableColumn("MEMORY", "spec.resources.memory"),
        TableColumn("AVAILABILITY", "spec.availability"),
    ),
    detail_columns=(
        TableColumn("CATEGORY", "spec.category"),
        TableColumn("FLAVOR TYPE", "spec.flavorType"),
        TableColumn("PROVIDER TYPE", "spec.provider.providerType"),
        TableColumn("ON-DEMAND COST", "spec.onDemandPricing.cost"),
        TableColumn("SPOT PRICE", "status.spotPricing.marketPricePerHour", "N/A"),
        TableColumn("HAMMER PRICE", "status.spotPricing.hammerPricePerHour", "N/A"),
    ),
)

ORGANIZATION_TABLE = TableConfig(
    columns=(
        TableColumn("ID", "id"),
        TableColumn("NAME", "name"),
        TableColumn("DISPLAY NAME", "display_name"),
    ),
    detail_columns=(TableColumn("NAMESPACE", "metadata.namespace"),),
)

CLOUDSPACE_TABLE = TableConfig(
    columns=(
        TableColumn("NAME", "metadata.name"),
        TableColumn("NAMESPACE", "metadata.namespace"),
        TableColumn("REGION", "spec.region"),
        TableColumn("PHASE", "status.phase", "<none>"),
        TableColumn("HEALTH", "status.health", "<none>"),
    ),
    detail_columns=(
        TableColumn("K8S VERSION", "status.currentKubernetesVersion", "<none>"),
        TableColumn("CNI", "spec.cni", "<none>"),
        TableColumn("DEPLOYMENT TYPE", "spec.deploymentType", "<none>"),
        TableColumn("HA CONTROL PLANE", "spec.HAControlPlane", "<none>"),
    ),
)

SPOT_NODEPOOL_TABLE = TableConfig(
    columns=(
        TableColumn("NAME", "metadata.name"),
        TableColumn("NAMESPACE", "metadata.namespace"),
        TableColumn("SERVER CLASS", "spec.serverClass", "<none>"),
        TableColumn("DESIRED", "spec.desired", "<none>"),
        TableColumn("BID STATUS", "status.bidStatus", "<none>"),
        TableColumn("WON COUNT", "status.wonCount", "<none>"),
    ),
    detail_columns=(
        TableColumn("CLOUD SPACE", "spec.cloudSpace", "<none>"),
        TableColumn("BID PRICE", "spec.bidPrice", "<none>"),
        TableColumn("AUTOSCALING", "spec.autoscaling.enabled", "<none>"),
        TableColumn("MIN NODES", "spec.autoscaling.minNodes", "<none>"),
        TableColumn("MAX NODES", "spec.autoscaling.maxNodes", "<none>"),
    ),
)

ONDEMAND_NODEPOOL_TABLE = TableConfig(
    columns=(
        TableColumn("NAME", "metadata.name"),
        TableColumn("NAMESPACE", "metadata.namespace"),
        TableColumn("SERVER CLASS", "spec.serverClass", "<none>"),
        TableColumn("DESIRED", "spec.desired", "<none>"),
    ),
    detail_columns=(
        TableColumn("CLOUD SPACE", "spec.cloudSpace", "<none>"),
        TableColumn("RESERVED STATUS", "status.reservedStatus", "<none>"),
        TableColumn("RESERVED COUNT", "status.reservedCount", "<none>"),
    ),
)


def get_field_value(item: Any, path: str) -> str:
    """Resolve a dotted path against plain data; missing values render as ``""``.

    Example:
        >>> get_field_value({"spec": {"country": "United Kingdom"}}, "spec.country")
        'United Kingdom'
    """

    if not path:
        return ""
    value: Any = item
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return ""
        value = value[part]
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, separators=(",", ":"))
    return str(value)


def extract_items(plain: Any) -> list[Any]:
    if isinstance(plain, list):
        return plain
    if isinstance(plain, Mapping) and isinstance(plain.get("items"), list):
        return plain["items"]
    return [plain]


def build_table(items: Sequence[Any], columns: Sequence[TableColumn]) -> Table:
    table = Table(show_header=True, header_style="bold", box=box.SIMPLE_HEAD, pad_edge=False)
    for column in columns:
        table.add_column(column.header, no_wrap=column.width == 0)
    for item in items:
        row = []
        for column in columns:
            value = get_field_value(item, column.field) or column.default
            if column.width and len(value) > column.width:
                value = value[: column.width - 3] + "..."
            row.append(value)
        table.add_row(*row)
    return table


def _should_page(console: Console, rows: int, *, no_pager: bool) -> bool:
    if no_pager or not console.is_terminal:
        return False
    return rows > max(console.height * 4 // 5, 10)


def emit(
    value: Any,
    *,
    table: TableConfig,
    output: OutputFormat = "table",
    empty_message: str | None = None,
    no_pager: bool = False,
    console: Console | None = None,
) -> None:
    """Render a result as json, yaml, table or wide.

    An empty list renders ``[]`` for json/yaml and ``empty_message`` (or
    ``No items found.``) for tables.
    """

    plain = to_plain_data(value)
    console = console or Console()

    if output == "json":
        print(json.dumps(plain, indent=2))
        return
    if output == "yaml":
        print(yaml.safe_dump(plain, sort_keys=False), end="")
        return

    items = extract_items(plain)
    if not items:
        console.print(empty_message or "No items found.", highlight=False)
        return

    rendered = build_table(items, table.for_output(output))
    if _should_page(console, len(items), no_pager=no_pager):
        with console.pager():
            console.print(rendered)
        return
    console.print(rendered)
